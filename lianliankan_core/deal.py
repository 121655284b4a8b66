from __future__ import annotations

import logging
import random
from typing import List, MutableSequence, Optional, Protocol, Sequence, Tuple, TypeVar

from .board import PALETTE, Board, Symbol, Tile
from .errors import InvalidDimensionsError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RandomSource(Protocol):
    """Anything with `randrange(n)` returning a uniform int in [0, n). random.Random qualifies."""

    def randrange(self, n: int) -> int:
        ...


def resolve_rng(rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> RandomSource:
    if rng is not None:
        return rng
    return random.Random(seed)


def shuffle_in_place(items: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """Fisher-Yates: every permutation is equally likely given a uniform source."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def check_dimensions(rows: int, cols: int) -> None:
    for name, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(f'{name} must be an integer, got {value!r}')
        if value <= 0:
            raise InvalidDimensionsError(f'{name} must be positive, got {value}')
    if (rows * cols) % 2 != 0:
        raise InvalidDimensionsError(f'rows * cols must be even, got {rows}x{cols}')


def make_pairs(
    total_pairs: int,
    strict_pairs: bool = True,
    palette: Sequence[Tuple[str, str]] = PALETTE,
) -> List[Tile]:
    """
    Builds the unshuffled pair list: pair i -> tiles with ids 2i and 2i+1.
    The palette wraps when it has fewer entries than there are pairs. With
    strict_pairs the matching key is the pair index, so each key occurs on
    exactly two tiles; otherwise the key is the palette index and wrapped
    entries form larger matchable groups.
    """
    if not palette:
        raise InvalidDimensionsError('palette must not be empty')
    tiles: List[Tile] = []
    for i in range(total_pairs):
        slot = i % len(palette)
        glyph, color = palette[slot]
        symbol = Symbol(key=i if strict_pairs else slot, glyph=glyph, color=color)
        tiles.append(Tile(id=i * 2, symbol=symbol))
        tiles.append(Tile(id=i * 2 + 1, symbol=symbol))
    return tiles


def lay_out(rows: int, cols: int, tiles: Sequence[Tile]) -> Board:
    """Places tiles row-major and stamps each tile with its grid position."""
    if len(tiles) != rows * cols:
        raise InvalidDimensionsError(f'expected {rows * cols} tiles for {rows}x{cols}, got {len(tiles)}')
    for i, tile in enumerate(tiles):
        tile.row, tile.col = divmod(i, cols)
    return Board(rows=rows, cols=cols, tiles=tuple(tiles))


def create_board(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    strict_pairs: bool = True,
    palette: Sequence[Tuple[str, str]] = PALETTE,
) -> Board:
    """Creates a shuffled rows x cols board where every pair appears exactly twice."""
    check_dimensions(rows, cols)
    tiles = make_pairs(rows * cols // 2, strict_pairs=strict_pairs, palette=palette)
    shuffle_in_place(tiles, resolve_rng(rng, seed))
    board = lay_out(rows, cols, tiles)
    logger.debug('created %dx%d board (%d pairs, strict=%s, seed=%s)',
                 rows, cols, len(tiles) // 2, strict_pairs, seed)
    return board
