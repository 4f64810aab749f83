"""
Detection of completed S-O-S lines

Key idea: every orientation is just a step vector. A run of three cells starting at some cell and
following the step qualifies when it reads S, O, S.

The whole board is rescanned after every move. Cells are never cleared, so lines found earlier stay valid and
the newly formed ones are whatever the scan finds that was not known before.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Self

from src.core.models import LineRecord
from src.core.shared_types import Orientation, Player
from src.sos.cells import Cell
from src.sos.coordinate import BOARD_SIZE, Coordinate


class Board(Protocol):
    """Just the part of the board the detector needs"""

    def cell(self, coordinate: Coordinate) -> Cell: ...


Vector = tuple[int, int]

# (row step, col step) per orientation. Diagonal up climbs towards row 0 while moving right.
ORIENTATION_STEPS: dict[Orientation, Vector] = {
    Orientation.HORIZONTAL: (0, 1),
    Orientation.VERTICAL: (1, 0),
    Orientation.DIAGONAL_DOWN: (1, 1),
    Orientation.DIAGONAL_UP: (-1, 1),
}

SOS_PATTERN: tuple[Cell, Cell, Cell] = (Cell.S, Cell.O, Cell.S)

LineKey = tuple[Coordinate, Coordinate]


@dataclass(frozen=True)
class Line:
    """A completed formation, identified by its two S endpoints"""

    start: Coordinate
    end: Coordinate
    player: Player
    orientation: Orientation

    @property
    def key(self) -> LineKey:
        """Identity used for deduplication. Neither the owner nor the orientation takes part."""
        return (self.start, self.end)

    def cells(self) -> tuple[Coordinate, Coordinate, Coordinate]:
        d_row, d_col = ORIENTATION_STEPS[self.orientation]
        return (
            self.start,
            self.start.shifted(d_row, d_col),
            self.start.shifted(2 * d_row, 2 * d_col),
        )

    def to_record(self) -> LineRecord:
        return {
            "start": self.start.to_list(),
            "end": self.end.to_list(),
            "player": self.player.value,
            "orientation": self.orientation.value,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        return cls(
            start=Coordinate.from_list(record["start"]),
            end=Coordinate.from_list(record["end"]),
            player=Player(record["player"]),
            orientation=Orientation(record["orientation"]),
        )


def run_from(start: Coordinate, orientation: Orientation) -> list[Coordinate]:
    """The three cells starting at `start` in the direction of the orientation (may leave the board)"""
    d_row, d_col = ORIENTATION_STEPS[orientation]
    return [start.shifted(step * d_row, step * d_col) for step in range(3)]


def is_sos(board: Board, run: list[Coordinate]) -> bool:
    if not all(coordinate.is_within_bounds() for coordinate in run):
        return False
    return tuple(board.cell(coordinate) for coordinate in run) == SOS_PATTERN


def detect_lines(board: Board, player: Player) -> list[Line]:
    """
    Full board scan
    ---

    For every starting cell and every orientation, test the run of three cells.
    Runs that would leave the grid are skipped, which gives the bounds:
    * horizontal: col <= 3
    * vertical: row <= 3
    * diagonal down: row <= 3 and col <= 3
    * diagonal up: row >= 2 and col <= 3

    Every line found is attributed to `player`. Callers only keep the ones that are new.
    """
    lines: list[Line] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            start = Coordinate(row, col)
            for orientation in ORIENTATION_STEPS:
                run = run_from(start, orientation)
                if is_sos(board, run):
                    lines.append(Line(run[0], run[-1], player, orientation))
    return lines


def new_lines(detected: Iterable[Line], known: Iterable[Line]) -> list[Line]:
    """Keep the detected lines whose (start, end) pair has not been seen before, preserving scan order."""
    seen: set[LineKey] = {line.key for line in known}
    fresh: list[Line] = []
    for line in detected:
        if line.key in seen:
            continue
        seen.add(line.key)
        fresh.append(line)
    return fresh
