from __future__ import annotations

# Facade module that re-exports the Lianliankan core.
# The Flask app and the tests import from here; single-responsibility
# modules live under lianliankan_core/*.

from lianliankan_core.board import PALETTE, Board, Coord, Symbol, Tile
from lianliankan_core.errors import InvalidArgumentError, InvalidDimensionsError
from lianliankan_core.deal import (
    RandomSource,
    check_dimensions,
    create_board,
    lay_out,
    make_pairs,
    shuffle_in_place,
)
from lianliankan_core.pathfind import (
    can_connect,
    corner_usable,
    find_path,
    is_candidate_pair,
    line_clear,
    path_turns,
    resolve_tile,
)
from lianliankan_core.session import (
    commit_match,
    find_hint,
    has_moves,
    is_cleared,
    reshuffle,
)

__all__ = [
    'PALETTE', 'Board', 'Coord', 'Symbol', 'Tile',
    'InvalidArgumentError', 'InvalidDimensionsError',
    'RandomSource', 'check_dimensions', 'create_board', 'lay_out', 'make_pairs', 'shuffle_in_place',
    'can_connect', 'corner_usable', 'find_path', 'is_candidate_pair', 'line_clear', 'path_turns',
    'resolve_tile',
    'commit_match', 'find_hint', 'has_moves', 'is_cleared', 'reshuffle',
]


def main() -> None:
    # CLI driver delegated to lianliankan_core.cli
    from lianliankan_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
