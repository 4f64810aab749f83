"""Unit tests for /src/sos/coordinate.py"""

import pytest

from src.sos.coordinate import BOARD_SIZE, Coordinate


def test_coordinate_within_bounds() -> None:
    """happy case: every cell of the 6x6 grid"""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            assert Coordinate(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col", [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE), (7, 7)]
)
def test_coordinate_out_of_bounds(row: int, col: int) -> None:
    assert not Coordinate(row, col).is_within_bounds()


def test_shifted() -> None:
    assert Coordinate(2, 0).shifted(-1, 1) == Coordinate(1, 1)


def test_list_form() -> None:
    """The API and DB layers exchange endpoints as [row, col]"""
    coordinate = Coordinate(4, 1)
    assert coordinate.to_list() == [4, 1]
    assert Coordinate.from_list([4, 1]) == coordinate
