"""
Type definitions used across layers
"""

from enum import StrEnum


class Player(StrEnum):
    BLUE = "blue"
    RED = "red"

    @property
    def opponent(self) -> "Player":
        return Player.RED if self == Player.BLUE else Player.BLUE


class Letter(StrEnum):
    S = "S"
    O = "O"

    @property
    def toggled(self) -> "Letter":
        return Letter.O if self == Letter.S else Letter.S


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal down"
    DIAGONAL_UP = "diagonal up"


class Outcome(StrEnum):
    BLUE_WINS = "blue wins"
    RED_WINS = "red wins"
    TIE = "tie"
