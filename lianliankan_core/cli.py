from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence, Tuple

from .board import Board, Coord
from .config import load_settings
from .deal import create_board
from .errors import InvalidArgumentError, InvalidDimensionsError
from .pathfind import find_path, path_turns
from .session import commit_match, find_hint, has_moves, is_cleared, reshuffle


def parse_selection(text: str) -> Optional[Tuple[Coord, Coord]]:
    """Parses 'r1 c1 r2 c2' (commas allowed) into two coordinates, or None."""
    parts = [t for t in text.replace(',', ' ').split() if t != '']
    if len(parts) != 4:
        return None
    try:
        r1, c1, r2, c2 = (int(p) for p in parts)
    except ValueError:
        return None
    return (r1, c1), (r2, c2)


def _print_board(board: Board, highlight: Optional[Sequence[Coord]] = None) -> None:
    header = '   ' + ' '.join(str(c % 10) for c in range(board.cols))
    print(header)
    for r, line in enumerate(board.pretty(highlight).split('\n')):
        print(f'{r:>2} {line}')


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Lianliankan: connect matching tiles with at most two turns')
    parser.add_argument('--rows', type=int, default=settings.rows, help='Board rows')
    parser.add_argument('--cols', type=int, default=settings.cols, help='Board columns')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--loose-pairs', action='store_true',
                        help='Match on palette entry instead of pair identity when the palette wraps')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    rng = random.Random(args.seed)
    strict = settings.strict_pairs and not args.loose_pairs
    try:
        board = create_board(args.rows, args.cols, rng=rng, strict_pairs=strict)
    except InvalidDimensionsError as e:
        print(f'error: {e}')
        return

    print('Initial board:')
    _print_board(board)

    while not is_cleared(board):
        if not has_moves(board):
            print('No moves left; reshuffling.')
            board = reshuffle(board, rng=rng)
            _print_board(board)
            continue
        text = input("Select two tiles as 'r1 c1 r2 c2' (or hint / shuffle / quit): ").strip().lower()
        if text in ('q', 'quit', 'exit'):
            return
        if text == 'hint':
            hint = find_hint(board)
            if hint is not None:
                a, b, path = hint
                print(f'Try {a.pos} and {b.pos}')
                _print_board(board, path)
            continue
        if text == 'shuffle':
            board = reshuffle(board, rng=rng)
            _print_board(board)
            continue
        selection = parse_selection(text)
        if selection is None:
            print('Could not parse. Try again.')
            continue
        a, b = selection
        try:
            path = find_path(board, a, b)
        except InvalidArgumentError as e:
            print(f'Invalid selection: {e}')
            continue
        if not path:
            print('Those tiles cannot be connected.')
            continue
        commit_match(board, a, b)
        print(f'Matched via {path} ({path_turns(path)} turns)')
        _print_board(board)

    print('Board cleared!')


if __name__ == '__main__':
    main()
