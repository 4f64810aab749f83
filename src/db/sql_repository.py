"""Implementation of (Match)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import MatchModel
from src.db.schema import DBMatch


class SQLMatchRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_match(self, match_id: UUID) -> MatchModel | None:
        """Get match by ID, if record exists."""
        match_db = self._fetch_match(match_id)
        if match_db:
            return self._to_model(match_db)
        return None

    def create_match(self, match: MatchModel) -> tuple[MatchModel, UUID]:
        """Store new match and return the stored data + newly created match ID."""

        new_id = uuid4()
        match_db = DBMatch(id=new_id)
        self._copy_fields(match, match_db)
        self.db.add(match_db)
        self.db.commit()
        self.db.refresh(match_db)
        return self._to_model(match_db), new_id

    def update_match(self, match_id: UUID, match: MatchModel) -> MatchModel | None:
        """Overwrite an existing record with the latest state."""
        match_db = self._fetch_match(match_id)
        if not match_db:
            return None
        self._copy_fields(match, match_db)
        self.db.commit()
        self.db.refresh(match_db)
        return self._to_model(match_db)

    def delete_match(self, match_id: UUID) -> MatchModel | None:
        """Remove a match's record."""
        match_db = self._fetch_match(match_id)
        if not match_db:
            return None
        match_model = self._to_model(match_db)
        self.db.delete(match_db)
        self.db.commit()
        return match_model

    def _fetch_match(self, match_id: UUID) -> DBMatch | None:
        query = select(DBMatch).where(DBMatch.id == match_id)
        return self.db.scalar(query)

    def _copy_fields(self, match: MatchModel, match_db: DBMatch) -> None:
        # JSON columns are only flagged dirty on reassignment, so always hand over fresh containers
        match_db.board = match.board
        match_db.current_player = match.current_player
        match_db.current_letter = match.current_letter
        match_db.scores = dict(match.scores)
        match_db.lines = [dict(line) for line in match.lines]
        match_db.timer = match.timer
        match_db.initial_countdown = match.initial_countdown
        match_db.game_over = match.game_over

    def _to_model(self, match_db: DBMatch) -> MatchModel:
        """Convert SQLAlchemy model to data transfer model."""
        return MatchModel(
            board=match_db.board,
            current_player=match_db.current_player,
            current_letter=match_db.current_letter,
            scores=dict(match_db.scores),
            lines=[dict(line) for line in match_db.lines],
            timer=match_db.timer,
            initial_countdown=match_db.initial_countdown,
            game_over=match_db.game_over,
        )
