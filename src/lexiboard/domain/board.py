"""Board grid and the static premium-square layout."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .enums import PremiumType

BOARD_SIZE = 15

Coord = tuple[int, int]

# --- Premium layout -------------------------------------------------------------

PREMIUM_SQUARES: dict[PremiumType, tuple[Coord, ...]] = {
    PremiumType.TRIPLE_WORD: (
        (0, 0), (0, 7), (0, 14),
        (7, 0), (7, 14),
        (14, 0), (14, 7), (14, 14),
    ),
    PremiumType.DOUBLE_WORD: (
        (1, 1), (2, 2), (3, 3), (4, 4),
        (1, 13), (2, 12), (3, 11), (4, 10),
        (13, 1), (12, 2), (11, 3), (10, 4),
        (13, 13), (12, 12), (11, 11), (10, 10),
    ),
    PremiumType.TRIPLE_LETTER: (
        (1, 5), (1, 9),
        (5, 1), (5, 5), (5, 9), (5, 13),
        (9, 1), (9, 5), (9, 9), (9, 13),
        (13, 5), (13, 9),
    ),
    PremiumType.DOUBLE_LETTER: (
        (0, 3), (0, 11),
        (2, 6), (2, 8),
        (3, 0), (3, 7), (3, 14),
        (6, 2), (6, 6), (6, 8), (6, 12),
        (7, 3), (7, 11),
        (8, 2), (8, 6), (8, 8), (8, 12),
        (11, 0), (11, 7), (11, 14),
        (12, 6), (12, 8),
        (14, 3), (14, 11),
    ),
}  # fmt: skip

PREMIUM_MAP = MappingProxyType(
    {coord: kind for kind, coords in PREMIUM_SQUARES.items() for coord in coords}
)


def premium_at(row: int, col: int) -> PremiumType | None:
    """Return the premium kind of a square, or ``None`` for a plain square."""

    return PREMIUM_MAP.get((row, col))


def _empty_cells() -> list[list[str | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass(slots=True)
class Board:
    """15x15 grid of placed letters.

    ``blanks`` records the squares holding a blank tile; the letter stored in
    ``cells`` is the one the blank stands for.
    """

    cells: list[list[str | None]] = field(default_factory=_empty_cells)
    blanks: set[Coord] = field(default_factory=set)

    @property
    def size(self) -> int:
        return len(self.cells)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> str | None:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.get(row, col) is not None

    def is_blank(self, row: int, col: int) -> bool:
        return (row, col) in self.blanks

    def is_empty(self) -> bool:
        """True iff no square holds a letter."""

        return all(cell is None for line in self.cells for cell in line)

    def occupied_count(self) -> int:
        return sum(1 for line in self.cells for cell in line if cell is not None)

    def get_premium_type(self, row: int, col: int) -> PremiumType | None:
        return premium_at(row, col)

    def place(self, row: int, col: int, letter: str, *, is_blank: bool = False) -> None:
        """Write ``letter`` onto an empty square.

        Raises:
            ValueError: If the square is off the board or already filled
        """
        if not self.in_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is off the board")
        if self.cells[row][col] is not None:
            raise ValueError(f"Square ({row}, {col}) is already occupied")
        self.cells[row][col] = letter
        if is_blank:
            self.blanks.add((row, col))

    def to_rows(self) -> list[list[str | None]]:
        """Return a detached copy of the grid."""

        return [list(line) for line in self.cells]

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[str | None]], blanks: Iterable[Coord] = ()
    ) -> Board:
        """Rebuild a board from a persisted grid."""

        if len(rows) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        cells = [[cell or None for cell in line] for line in rows]
        blank_set = {(int(r), int(c)) for r, c in blanks}
        for row, col in blank_set:
            if cells[row][col] is None:
                raise ValueError(f"Blank recorded on empty square ({row}, {col})")
        return cls(cells=cells, blanks=blank_set)
