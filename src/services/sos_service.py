"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    CreateMatchRequest,
    DeleteMatchRequest,
    GetMatchRequest,
    LineResponse,
    MatchResponse,
    MoveRequest,
    ResetMatchRequest,
    TickRequest,
)
from src.core.config import Settings
from src.core.exceptions import GameError, RepositoryError
from src.core.models import MatchModel
from src.db.repository import MatchRepository
from src.sos import match as engine
from src.sos.clock import MatchClock
from src.sos.match import MatchState

logger = logging.getLogger(__name__)

Transition = Callable[[MatchState], MatchState]


class SosService:
    """Orchestration of layers for SOS matches."""

    def __init__(
        self, repository: MatchRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings.from_env()
        # A single lock: every read-modify-write of a match (move, tick, reset) is one critical section
        self._lock = threading.RLock()
        self._clocks: dict[UUID, MatchClock] = {}
        # Matches whose countdown should run in real time, even while their clock is stopped at game over
        self._clocked: set[UUID] = set()

    # -- API routes logic ---
    def create_match(self, request: CreateMatchRequest) -> MatchResponse:
        """Start a new match on an empty board."""
        countdown = request.initial_countdown or self.settings.initial_countdown
        new_state = engine.new_match(initial_countdown=countdown)

        with self._lock:
            stored_match, match_id = self.repo.create_match(new_state.to_model())

        logger.info("Created match %s (countdown %d)", match_id, countdown)
        return self._create_match_response(match_id, stored_match)

    def get_match(self, request: GetMatchRequest) -> MatchResponse:
        """
        Retrieve current match state.
        ----
        Used in a "polling" loop by a frontend to redraw the board, scores and countdown.
        """
        with self._lock:
            match_model = self._fetch_match(request.match_id)
        return self._create_match_response(request.match_id, match_model)

    def make_move(self, request: MoveRequest) -> MatchResponse:
        """Place the current letter for the player whose turn it is."""
        try:
            return self._transition(
                request.match_id,
                lambda state: engine.apply_move(state, request.row, request.col),
            )
        except GameError as err:
            logger.warning(
                "Rejected move (%d, %d) in match %s: %s",
                request.row,
                request.col,
                request.match_id,
                err,
            )
            raise

    def tick(self, request: TickRequest) -> MatchResponse:
        """Advance the countdown by one unit."""
        return self._transition(request.match_id, engine.tick)

    def reset_match(self, request: ResetMatchRequest) -> MatchResponse:
        """Back to an empty board, keeping the match's countdown length."""
        response = self._transition(
            request.match_id,
            lambda state: engine.reset(initial_countdown=state.initial_countdown),
        )
        logger.info("Reset match %s", request.match_id)
        if request.match_id in self._clocked:
            self.start_clock(request.match_id)
        return response

    def delete_match(self, request: DeleteMatchRequest) -> None:
        """Handle a request to delete a Match record. Also tears down its clock."""
        self.stop_clock(request.match_id)
        with self._lock:
            self.repo.delete_match(request.match_id)

    # -- Clock handling --
    def start_clock(self, match_id: UUID) -> MatchClock:
        """Drive the countdown of a match in real time. Stops by itself once the match is over."""
        with self._lock:
            self._fetch_match(match_id)
            clock = self._clocks.get(match_id)
            if clock is None or not clock.running:
                clock = MatchClock(
                    on_tick=lambda: self._clock_tick(match_id),
                    interval=self.settings.tick_interval_sec,
                    name=str(match_id),
                )
                self._clocks[match_id] = clock
                clock.start()
            self._clocked.add(match_id)
        return clock

    def stop_clock(self, match_id: UUID) -> None:
        with self._lock:
            clock = self._clocks.pop(match_id, None)
            self._clocked.discard(match_id)
        # Cancel outside the lock: a tick waiting for the lock must be able to finish
        if clock is not None:
            clock.cancel()

    def _clock_tick(self, match_id: UUID) -> bool:
        """Returns whether the clock should keep running."""
        with self._lock:
            if match_id not in self._clocks:
                return False
            response = self.tick(TickRequest(match_id=match_id))
            if response.game_over:
                # The clock stops itself, a reset starts a new one
                self._clocks.pop(match_id, None)
        return not response.game_over

    # -- Internal helpers --
    def _transition(self, match_id: UUID, transition: Transition) -> MatchResponse:
        """Fetch, apply, store. Nothing is written when the transition raises."""
        with self._lock:
            stored_model = self._fetch_match(match_id)
            state = MatchState.from_model(stored_model)
            updated = transition(state).to_model()
            self.repo.update_match(match_id, updated)
        return self._create_match_response(match_id, updated)

    def _create_match_response(self, match_id: UUID, model: MatchModel) -> MatchResponse:
        """Convert info in MatchModel to a MatchResponse (for match with given ID.)"""
        state = MatchState.from_model(model)
        return MatchResponse(
            match_id=match_id,
            board=[[cell.letter for cell in row] for row in state.board.rows()],
            current_player=state.current_player,
            current_letter=state.current_letter,
            scores=dict(state.scores),
            lines=[
                LineResponse(
                    start=line.start.to_list(),
                    end=line.end.to_list(),
                    player=line.player,
                    orientation=line.orientation,
                )
                for line in state.lines
            ],
            timer=state.timer,
            game_over=state.game_over,
            winner=state.winner,
        )

    def _fetch_match(self, match_id: UUID) -> MatchModel:
        """Attempt to find the match in the repository and raise error if it fails."""
        match_model = self.repo.get_match(match_id)
        if match_model is None:
            raise RepositoryError(f"Match with {match_id=} not found.")
        return match_model
