"""
A cell position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# SOS is played on a fixed 6x6 grid
BOARD_SIZE = 6


@dataclass(frozen=True, order=True)
class Coordinate:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def shifted(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def to_list(self) -> list[int]:
        """[row, col], the form the API/DB layers use for line endpoints"""
        return [self.row, self.col]

    @classmethod
    def from_list(cls, values: list[int]) -> Coordinate:
        row, col = values
        return cls(int(row), int(col))
