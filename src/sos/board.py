"""The Board holds the grid of letters and answers coordinate queries. It knows nothing about turns or scores."""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import (
    CellOccupiedError,
    InvalidCoordinateError,
    InvalidLetterError,
    InvalidNotationError,
)
from src.core.shared_types import Letter
from src.sos.cells import CELL_TO_NOTATION, LETTER_TO_CELL, NOTATION_TO_CELL, Cell
from src.sos.coordinate import BOARD_SIZE, Coordinate

EMPTY_BOARD_NOTATION = "/".join([str(BOARD_SIZE)] * BOARD_SIZE)


@dataclass(frozen=True)
class Board:
    position: dict[Coordinate, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls(
            {
                Coordinate(row, col): Cell.EMPTY
                for row in range(BOARD_SIZE)
                for col in range(BOARD_SIZE)
            }
        )

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Construct a board from its compact notation.

        Rows are separated by slashes, the top row (row 0) comes first.
        ex. S at the top left corner and an O right next to it:
        SO4/6/6/6/6/6
        means:
        * row 0 holds an S in column 0, an O in column 1, then 4 empty cells
        * rows 1 through 5 are entirely empty
        """
        rows = notation.split("/")
        if len(rows) != BOARD_SIZE:
            raise InvalidNotationError(
                f"Board notation needs {BOARD_SIZE} rows, got {len(rows)}: {notation!r}"
            )

        position: dict[Coordinate, Cell] = {}
        for row, row_notation in enumerate(rows):
            col = 0
            for character in row_notation:
                if character in NOTATION_TO_CELL:
                    position[Coordinate(row, col)] = NOTATION_TO_CELL[character]
                    col += 1
                elif character.isdigit() and 1 <= int(character) <= BOARD_SIZE:
                    # A number denotes the amount of empty cells after each other
                    for _ in range(int(character)):
                        position[Coordinate(row, col)] = Cell.EMPTY
                        col += 1
                else:
                    raise InvalidNotationError(
                        f"Unknown character {character!r} in row {row} of {notation!r}"
                    )
            if col != BOARD_SIZE:
                raise InvalidNotationError(
                    f"Row {row} of {notation!r} covers {col} cells instead of {BOARD_SIZE}"
                )
        return cls(position)

    def to_notation(self) -> str:
        """Rows are separated by slashes in the notation."""
        return "/".join(self._row_to_notation(row) for row in range(BOARD_SIZE))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_SIZE):
            cell = self.cell(Coordinate(row, col))
            if cell == Cell.EMPTY:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(CELL_TO_NOTATION[cell])

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def cell(self, coordinate: Coordinate) -> Cell:
        if not coordinate.is_within_bounds():
            raise InvalidCoordinateError(
                f"({coordinate.row}, {coordinate.col}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board"
            )
        return self.position[coordinate]

    def get(self, row: int, col: int) -> Cell:
        return self.cell(Coordinate(row, col))

    def set(self, row: int, col: int, letter: Letter) -> Self:
        """Return a new board with the letter placed. Cells only ever go from empty to a letter."""
        if letter not in [value.value for value in Letter]:
            raise InvalidLetterError(f"Cannot place {letter!r}, only S or O")
        coordinate = Coordinate(row, col)
        if self.cell(coordinate) != Cell.EMPTY:
            raise CellOccupiedError(f"Cell ({row}, {col}) already holds a letter")
        return type(self)({**self.position, coordinate: LETTER_TO_CELL[Letter(letter)]})

    def is_full(self) -> bool:
        return not self.empty_cells()

    def empty_cells(self) -> list[Coordinate]:
        return [
            coordinate
            for coordinate, cell in self.position.items()
            if cell == Cell.EMPTY
        ]

    def filled_count(self) -> int:
        return len(self.position) - len(self.empty_cells())

    def rows(self) -> list[list[Cell]]:
        """Grid form, handy for rendering"""
        return [
            [self.cell(Coordinate(row, col)) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]
