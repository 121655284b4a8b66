from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from .board import Board, Coord, Tile
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

TileRef = Union[Tile, Coord, Sequence[int]]


def _reject(message: str) -> InvalidArgumentError:
    logger.warning('rejected engine call: %s', message)
    return InvalidArgumentError(message)


def resolve_tile(board: Board, ref: Optional[TileRef], name: str = 'tile') -> Tile:
    """Turns a Tile or a (row, col) pair into the board's own Tile, validating it on the way."""
    if ref is None:
        raise _reject(f'{name} is required')
    if isinstance(ref, Tile):
        r, c = ref.row, ref.col
    elif isinstance(ref, (tuple, list)) and len(ref) == 2 and all(
        isinstance(v, int) and not isinstance(v, bool) for v in ref
    ):
        r, c = ref[0], ref[1]
    else:
        raise _reject(f'{name} must be a Tile or a (row, col) pair, got {ref!r}')
    if not board.in_bounds(r, c):
        raise _reject(f'{name} at ({r}, {c}) is outside the {board.rows}x{board.cols} board')
    tile = board.at(r, c)
    if isinstance(ref, Tile) and tile is not ref and tile != ref:
        raise _reject(f'{name} does not belong to this board at ({r}, {c})')
    return tile


def _check_board(board: Board) -> None:
    if not isinstance(board, Board):
        raise _reject(f'board must be a Board, got {type(board).__name__}')


def _is_endpoint(r: int, c: int, a: Tile, b: Tile) -> bool:
    return (r == a.row and c == a.col) or (r == b.row and c == b.col)


def _passable(board: Board, r: int, c: int, a: Tile, b: Tile) -> bool:
    return board.at(r, c).matched or _is_endpoint(r, c, a, b)


def line_clear(board: Board, p: Coord, q: Coord, a: Tile, b: Tile) -> bool:
    """
    Straight-line probe between two grid points.
    Only cells strictly between p and q are inspected; each must be matched or
    be one of the two selected tiles. Points sharing neither row nor column
    never form a straight line.
    """
    if p[0] == q[0]:
        r = p[0]
        lo, hi = sorted((p[1], q[1]))
        return all(_passable(board, r, c, a, b) for c in range(lo + 1, hi))
    if p[1] == q[1]:
        c = p[1]
        lo, hi = sorted((p[0], q[0]))
        return all(_passable(board, r, c, a, b) for r in range(lo + 1, hi))
    return False


def corner_usable(board: Board, corner: Coord, a: Tile, b: Tile) -> bool:
    """A turn point must lie on the board and be empty (matched) or one of the endpoints."""
    r, c = corner
    return board.in_bounds(r, c) and _passable(board, r, c, a, b)


def _direct(board: Board, a: Tile, b: Tile) -> List[Coord]:
    if a.row != b.row and a.col != b.col:
        return []
    if not line_clear(board, a.pos, b.pos, a, b):
        return []
    return [a.pos, b.pos]


def _one_corner(board: Board, a: Tile, b: Tile) -> List[Coord]:
    for corner in ((a.row, b.col), (b.row, a.col)):
        if not corner_usable(board, corner, a, b):
            continue
        if line_clear(board, a.pos, corner, a, b) and line_clear(board, corner, b.pos, a, b):
            return [a.pos, corner, b.pos]
    return []


def _two_corners_via(board: Board, a: Tile, b: Tile, c1: Coord, c2: Coord) -> bool:
    return (
        corner_usable(board, c1, a, b)
        and corner_usable(board, c2, a, b)
        and line_clear(board, a.pos, c1, a, b)
        and line_clear(board, c1, c2, a, b)
        and line_clear(board, c2, b.pos, a, b)
    )


def _two_corners(board: Board, a: Tile, b: Tile) -> List[Coord]:
    # Column scan first, then row scan; ascending in both.
    for col in range(board.cols):
        if col == a.col or col == b.col:
            continue
        c1, c2 = (a.row, col), (b.row, col)
        if _two_corners_via(board, a, b, c1, c2):
            return [a.pos, c1, c2, b.pos]
    for row in range(board.rows):
        if row == a.row or row == b.row:
            continue
        c1, c2 = (row, a.col), (row, b.col)
        if _two_corners_via(board, a, b, c1, c2):
            return [a.pos, c1, c2, b.pos]
    return []


def _search(board: Board, a: Tile, b: Tile) -> List[Coord]:
    for strategy in (_direct, _one_corner, _two_corners):
        path = strategy(board, a, b)
        if path:
            return path
    return []


def is_candidate_pair(a: Tile, b: Tile) -> bool:
    """Distinct positions, same symbol key, neither tile already matched."""
    if a.pos == b.pos:
        return False
    if a.symbol.key != b.symbol.key:
        return False
    return not (a.matched or b.matched)


def find_path(board: Board, tile_a: TileRef, tile_b: TileRef) -> List[Coord]:
    """
    Finds an elimination path of at most two right-angle turns between two tiles.
    Returns the list of grid points [A, (corners...), B], or [] when the tiles
    cannot be connected. Raises InvalidArgumentError for structurally invalid calls.
    """
    _check_board(board)
    a = resolve_tile(board, tile_a, 'tile_a')
    b = resolve_tile(board, tile_b, 'tile_b')
    if not is_candidate_pair(a, b):
        return []
    # Search from the lower position so the result is the same line either way round.
    if a.pos <= b.pos:
        path = _search(board, a, b)
    else:
        path = _search(board, b, a)[::-1]
    logger.debug('find_path %s -> %s: %s', a.pos, b.pos, path or 'no path')
    return path


def can_connect(board: Board, tile_a: TileRef, tile_b: TileRef) -> bool:
    """True iff find_path returns a non-empty path."""
    return len(find_path(board, tile_a, tile_b)) > 0


def path_turns(path: Sequence[Coord]) -> int:
    """Number of right-angle turns in a path returned by find_path."""
    return max(len(path) - 2, 0)

