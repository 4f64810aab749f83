"""Defines the possible contents of a single cell"""

from enum import Enum, auto
from typing import Optional

from src.core.shared_types import Letter


class Cell(Enum):
    EMPTY = auto()
    S = auto()
    O = auto()

    @property
    def letter(self) -> Optional[Letter]:
        return CELL_TO_LETTER.get(self)


LETTER_TO_CELL: dict[Letter, Cell] = {
    Letter.S: Cell.S,
    Letter.O: Cell.O,
}

CELL_TO_LETTER: dict[Cell, Letter] = {
    value: key for key, value in LETTER_TO_CELL.items()
}

NOTATION_TO_CELL: dict[str, Cell] = {
    "S": Cell.S,
    "O": Cell.O,
}

CELL_TO_NOTATION: dict[Cell, str] = {
    value: key for key, value in NOTATION_TO_CELL.items()
}
