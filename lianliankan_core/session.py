from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .board import Board, Coord, Tile
from .deal import RandomSource, lay_out, resolve_rng, shuffle_in_place
from .pathfind import TileRef, find_path, is_candidate_pair, resolve_tile

logger = logging.getLogger(__name__)

Hint = Tuple[Tile, Tile, List[Coord]]


def commit_match(board: Board, tile_a: TileRef, tile_b: TileRef) -> List[Coord]:
    """
    Eliminates a pair if the engine finds a path between them.
    This is the only operation that mutates a board: on success both tiles
    are marked matched and the path is returned. On failure the board is
    left as it was and [] is returned.
    """
    path = find_path(board, tile_a, tile_b)
    if not path:
        return []
    a = resolve_tile(board, tile_a, 'tile_a')
    b = resolve_tile(board, tile_b, 'tile_b')
    a.mark_matched()
    b.mark_matched()
    logger.debug('matched tiles %d@%s and %d@%s', a.id, a.pos, b.id, b.pos)
    return path


def find_hint(board: Board) -> Optional[Hint]:
    """Returns the first connectable unmatched pair, scanning row-major, or None."""
    open_tiles = board.unmatched()
    for i, a in enumerate(open_tiles):
        for b in open_tiles[i + 1:]:
            if not is_candidate_pair(a, b):
                continue
            path = find_path(board, a, b)
            if path:
                return a, b, path
    return None


def has_moves(board: Board) -> bool:
    return find_hint(board) is not None


def is_cleared(board: Board) -> bool:
    return all(t.matched for t in board.tiles)


def reshuffle(board: Board, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> Board:
    """
    Builds a new board where the unmatched tiles are permuted across the
    unmatched cells. Matched cells keep their place. The input board is not
    modified; tiles on the result are fresh copies.
    """
    open_cells = [t.pos for t in board.tiles if not t.matched]
    faces = [(t.id, t.symbol) for t in board.tiles if not t.matched]
    shuffle_in_place(faces, resolve_rng(rng, seed))
    shuffled = dict(zip(open_cells, faces))
    tiles: List[Tile] = []
    for tile in board.tiles:
        if tile.matched:
            tiles.append(Tile(id=tile.id, symbol=tile.symbol, matched=True))
        else:
            tid, symbol = shuffled[tile.pos]
            tiles.append(Tile(id=tid, symbol=symbol))
    logger.debug('reshuffled %d open tiles on %dx%d board', len(faces), board.rows, board.cols)
    return lay_out(board.rows, board.cols, tiles)
