from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidArgumentError

Coord = Tuple[int, int]  # (row, col)


@dataclass(frozen=True)
class Symbol:
    """A tile face. Only `key` takes part in matching; glyph and color are cosmetic."""
    key: int
    glyph: str
    color: str


# Reference palette: (glyph, color). Entries 5 and 7 share a glyph on purpose.
PALETTE: Tuple[Tuple[str, str], ...] = (
    ('♥', '#e74c3c'),
    ('♦', '#e67e22'),
    ('♣', '#2ecc71'),
    ('♠', '#3498db'),
    ('★', '#9b59b6'),
    ('✿', '#ff7979'),
    ('◆', '#f1c40f'),
    ('✿', '#1abc9c'),
)


@dataclass
class Tile:
    """A single game piece. Shape (symbol, position) is fixed; only `matched` changes."""
    id: int
    symbol: Symbol
    row: int = -1
    col: int = -1
    matched: bool = False

    @property
    def pos(self) -> Coord:
        return (self.row, self.col)

    def mark_matched(self) -> None:
        # One-way flag: a matched tile never becomes unmatched again.
        self.matched = True


@dataclass(frozen=True)
class Board:
    """The grid of tiles, stored row-major with one tile per cell."""
    rows: int
    cols: int
    tiles: Tuple[Tile, ...]  # length == rows * cols

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Tile:
        """Gets the tile at a given row and column; no wrap-around."""
        if not self.in_bounds(r, c):
            raise InvalidArgumentError(f'coordinate ({r}, {c}) outside {self.rows}x{self.cols} board')
        return self.tiles[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def unmatched(self) -> List[Tile]:
        return [t for t in self.tiles if not t.matched]

    def pretty(self, highlight: Optional[Iterable[Coord]] = None) -> str:
        """Generates a human-readable string representation of the board."""
        marks = set(highlight or ())
        lines: List[str] = []
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.cols):
                tile = self.at(r, c)
                if (r, c) in marks:
                    row.append('*')
                elif tile.matched:
                    row.append('·')
                else:
                    row.append(tile.symbol.glyph)
            lines.append(' '.join(row))
        return '\n'.join(lines)
