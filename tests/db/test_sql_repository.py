"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.db.sql_repository import MatchModel, SQLMatchRepository


@pytest.fixture
def model() -> MatchModel:
    """Mock match data: blue scored once on the top row and holds an S."""
    return MatchModel(
        board="SOS3/6/6/6/6/5O",
        current_player="blue",
        current_letter="S",
        scores={"blue": 1, "red": 0},
        lines=[
            {
                "start": [0, 0],
                "end": [0, 2],
                "player": "blue",
                "orientation": "horizontal",
            }
        ],
        timer=6,
        initial_countdown=10,
        game_over=False,
    )


def test_create_match(db_session_repo: Session, model: MatchModel) -> None:
    """Conversion from a MatchModel to DBMatch for a new entry to the database."""
    repo = SQLMatchRepository(db_session_repo)
    record_in_db, _ = repo.create_match(model)
    assert isinstance(record_in_db, MatchModel)
    assert record_in_db == model


def test_get_match_by_id(db_session_repo: Session, model: MatchModel) -> None:
    """Create a match, then fetch it from db."""
    repo = SQLMatchRepository(db_session_repo)
    expected_match, match_id = repo.create_match(model)
    match_found = repo.get_match(match_id)
    assert isinstance(match_found, MatchModel)
    assert match_found == expected_match


def test_get_unknown_match(db_session_repo: Session, model: MatchModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLMatchRepository(db_session_repo)
    assert repo.get_match(uuid4()) is None

    # Now do it with creating a match, but retrieving from the wrong ID
    repo.create_match(model)
    assert repo.get_match(uuid4()) is None


def test_update_match(db_session_repo: Session, model: MatchModel) -> None:
    repo = SQLMatchRepository(db_session_repo)
    _, match_id = repo.create_match(model)

    model.board = "SOS3/6/6/6/6/4SO"
    model.current_player = "red"
    model.current_letter = "O"
    model.timer = 10
    updated = repo.update_match(match_id, model)
    assert updated == model
    assert repo.get_match(match_id) == model


def test_update_lines_and_scores(db_session_repo: Session, model: MatchModel) -> None:
    """JSON columns pick up appended lines and changed scores"""
    repo = SQLMatchRepository(db_session_repo)
    _, match_id = repo.create_match(model)

    model.lines.append(
        {"start": [5, 3], "end": [5, 5], "player": "blue", "orientation": "horizontal"}
    )
    model.scores["blue"] = 2
    repo.update_match(match_id, model)

    stored = repo.get_match(match_id)
    assert stored is not None
    assert len(stored.lines) == 2
    assert stored.scores == {"blue": 2, "red": 0}


def test_update_unknown_match(db_session_repo: Session, model: MatchModel) -> None:
    repo = SQLMatchRepository(db_session_repo)
    assert repo.update_match(uuid4(), model) is None


def test_delete_match(db_session_repo: Session, model: MatchModel) -> None:
    repo = SQLMatchRepository(db_session_repo)
    _, match_id = repo.create_match(model)

    deleted = repo.delete_match(match_id)
    assert deleted == model
    assert repo.get_match(match_id) is None
    assert repo.delete_match(match_id) is None
