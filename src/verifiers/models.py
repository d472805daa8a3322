"""Data models for grids, paths and validation results."""

from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(NamedTuple):
    """A cell on the grid, addressed by row then column."""
    row: int
    col: int


PositionLike = Union[Position, Tuple[int, int], Mapping[str, int]]

# Row/column offsets of the eight neighbours of a cell
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def to_position(value: PositionLike) -> Position:
    """Coerce a tuple, mapping or Position into a Position."""
    if isinstance(value, Position):
        return value
    if isinstance(value, Mapping):
        return Position(int(value["row"]), int(value["col"]))
    row, col = value
    return Position(int(row), int(col))


def is_adjacent(a: Position, b: Position) -> bool:
    """True if ``a`` and ``b`` touch horizontally, vertically or diagonally."""
    return a != b and abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


class Grid(BaseModel):
    """
    Immutable square grid of single uppercase letters.

    Cells are stored as tuples so a Grid can be shared between callers
    without anyone mutating it. Lowercase input is upper-cased.
    """

    model_config = ConfigDict(frozen=True)

    cells: Tuple[Tuple[str, ...], ...]

    @field_validator("cells", mode="before")
    @classmethod
    def _normalize_cells(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("cells must be a sequence of rows, not a string")
        return tuple(
            tuple(str(letter).upper() for letter in row) for row in value
        )

    @field_validator("cells")
    @classmethod
    def _check_square(cls, cells: Tuple[Tuple[str, ...], ...]) -> Tuple[Tuple[str, ...], ...]:
        size = len(cells)
        if size == 0:
            raise ValueError("grid must have at least one row")
        for r, row in enumerate(cells):
            if len(row) != size:
                raise ValueError(f"row {r} has {len(row)} cells, expected {size}")
            for c, letter in enumerate(row):
                if len(letter) != 1 or not ("A" <= letter <= "Z"):
                    raise ValueError(f"cell ({r}, {c}) is not a single letter: {letter!r}")
        return cells

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from strings such as ``["CATS", "XQZW", ...]``."""
        return cls(cells=[list(row) for row in rows])

    @classmethod
    def from_letters(cls, letters: List[str], size: int) -> "Grid":
        """Build a grid from a flat row-major list of ``size * size`` letters."""
        if len(letters) != size * size:
            raise ValueError(f"expected {size * size} letters, got {len(letters)}")
        return cls(cells=[letters[r * size:(r + 1) * size] for r in range(size)])

    @property
    def size(self) -> int:
        return len(self.cells)

    def letter_at(self, position: Position) -> str:
        return self.cells[position.row][position.col]

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.row < self.size and 0 <= position.col < self.size

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                yield Position(r, c)

    def neighbors(self, position: Position) -> Iterator[Position]:
        """In-bounds neighbours of ``position`` in the eight directions."""
        for dr, dc in NEIGHBOR_OFFSETS:
            candidate = Position(position.row + dr, position.col + dc)
            if self.in_bounds(candidate):
                yield candidate

    def letters(self) -> List[str]:
        """Flat row-major list of letters."""
        return [letter for row in self.cells for letter in row]

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]

    def find_triplets(self) -> List[Position]:
        """
        Positions that end a run of three identical letters.

        Runs are only checked along rows and columns, left-to-right and
        top-to-bottom; diagonals are not constrained.
        """
        found: List[Position] = []
        for position in self.positions():
            r, c = position
            letter = self.cells[r][c]
            if c >= 2 and self.cells[r][c - 1] == letter and self.cells[r][c - 2] == letter:
                found.append(position)
            elif r >= 2 and self.cells[r - 1][c] == letter and self.cells[r - 2][c] == letter:
                found.append(position)
        return found


class ValidationError(BaseModel):
    """A single validation failure with a machine-readable code."""
    code: str
    message: str
    word: Optional[str] = None
    index: Optional[int] = Field(None, ge=0)  # Offending path index, if any


class PathValidationResult(BaseModel):
    """Result of checking a submitted path against a grid."""
    valid: bool
    word: str = ""
    path: List[Position] = Field(default_factory=list)
    error: Optional[ValidationError] = None

    @property
    def code(self) -> Optional[str]:
        return self.error.code if self.error else None

    @property
    def reason(self) -> str:
        return self.error.message if self.error else "Path spells the word"


class SubmissionResult(BaseModel):
    """Result of a player's word submission."""
    valid: bool
    word: str = ""
    score: int = Field(default=0, ge=0)
    code: Optional[str] = None
    reason: str = ""
