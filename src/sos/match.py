"""
The match engine is the entrypoint into the domain layer for the service layer.

It owns everything that changes during a match besides the letters on the board: whose turn it is, which letter
they place, the scores, the lines found so far, the countdown and whether the match is over.

Every transition takes a MatchState snapshot and returns a new one. A snapshot is never mutated, so a transition
that raises leaves the caller's state exactly as it was.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Self

from src.core.config import DEFAULT_COUNTDOWN
from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import MatchModel
from src.core.shared_types import Letter, Outcome, Player
from src.sos.board import Board
from src.sos.lines import Line, detect_lines, new_lines

logger = logging.getLogger(__name__)


def _zero_scores() -> dict[Player, int]:
    return {player: 0 for player in Player}


@dataclass(frozen=True)
class MatchState:
    board: Board
    current_player: Player = Player.BLUE
    current_letter: Letter = Letter.S
    scores: dict[Player, int] = field(default_factory=_zero_scores)
    lines: tuple[Line, ...] = ()
    timer: int = DEFAULT_COUNTDOWN
    game_over: bool = False
    initial_countdown: int = DEFAULT_COUNTDOWN

    @property
    def winner(self) -> Optional[Outcome]:
        """Only decided once the board is full. Strictly more lines wins, equal is a tie."""
        if not self.game_over:
            return None
        blue, red = self.scores[Player.BLUE], self.scores[Player.RED]
        if blue > red:
            return Outcome.BLUE_WINS
        if red > blue:
            return Outcome.RED_WINS
        return Outcome.TIE

    @property
    def move_count(self) -> int:
        return self.board.filled_count()

    # --- CONVERSION FROM/TO THE SERVICE LAYER ---
    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        """Define how to construct a MatchState from the information the Service layer actually has"""

        # Validation
        if model.current_player not in [player.value for player in Player]:
            raise GameStateError(
                f"Invalid player: {model.current_player!r}. \nPick one from {','.join(Player)}"
            )
        if model.current_letter not in [letter.value for letter in Letter]:
            raise GameStateError(
                f"Invalid letter: {model.current_letter!r}. \nPick one from {','.join(Letter)}"
            )
        if model.initial_countdown < 1 or not 0 <= model.timer <= model.initial_countdown:
            raise GameStateError(
                f"Timer {model.timer} does not fit a countdown starting at {model.initial_countdown}"
            )
        if set(model.scores) != {player.value for player in Player}:
            raise GameStateError(f"Scores must list every player, got {model.scores}")

        board = Board.from_notation(model.board)
        return cls(
            board=board,
            current_player=Player(model.current_player),
            current_letter=Letter(model.current_letter),
            scores={Player(name): score for name, score in model.scores.items()},
            lines=tuple(Line.from_record(record) for record in model.lines),
            timer=model.timer,
            game_over=model.game_over,
            initial_countdown=model.initial_countdown,
        )

    def to_model(self) -> MatchModel:
        """Encode back into a format the Service layer uses"""
        return MatchModel(
            board=self.board.to_notation(),
            current_player=self.current_player.value,
            current_letter=self.current_letter.value,
            scores={player.value: score for player, score in self.scores.items()},
            lines=[line.to_record() for line in self.lines],
            timer=self.timer,
            initial_countdown=self.initial_countdown,
            game_over=self.game_over,
        )


# --- MATCH ENGINE API CALLED BY SERVICE ---
def new_match(initial_countdown: int = DEFAULT_COUNTDOWN) -> MatchState:
    """Empty board, blue to move with an S, no points, full countdown."""
    if initial_countdown < 1:
        raise GameStateError(f"Countdown must start at 1 or more, got {initial_countdown}")
    return MatchState(
        board=Board.empty(),
        timer=initial_countdown,
        initial_countdown=initial_countdown,
    )


def reset(initial_countdown: int = DEFAULT_COUNTDOWN) -> MatchState:
    """Throw away board, lines, scores and timer progress."""
    return new_match(initial_countdown)


def apply_move(state: MatchState, row: int, col: int) -> MatchState:
    """
    Place the current letter at (row, col)
    -----

    1. Place the letter (the board rejects occupied cells and coordinates off the grid)
    2. Rescan the board and keep the lines not seen before
    3. Scoring move? Same player goes again with the other letter, the timer keeps running
    4. Otherwise the turn passes: other player, other letter, fresh countdown
    5. A full board ends the match
    """
    if state.game_over:
        raise IllegalMoveError("Match is over, no more moves accepted.")

    board = state.board.set(row, col, state.current_letter)
    formed = new_lines(detect_lines(board, state.current_player), state.lines)

    if formed:
        logger.info(
            "%s scores %d line(s) with %s at (%d, %d)",
            state.current_player,
            len(formed),
            state.current_letter,
            row,
            col,
        )
        scores = dict(state.scores)
        scores[state.current_player] += len(formed)
        next_state = replace(
            state,
            board=board,
            lines=state.lines + tuple(formed),
            scores=scores,
            current_letter=state.current_letter.toggled,
        )
    else:
        logger.debug(
            "%s placed %s at (%d, %d), turn passes",
            state.current_player,
            state.current_letter,
            row,
            col,
        )
        next_state = replace(_pass_turn(state), board=board)

    if board.is_full():
        next_state = replace(next_state, game_over=True)
        logger.info(
            "Match over: %s (%s)",
            next_state.winner,
            ", ".join(f"{p}={s}" for p, s in next_state.scores.items()),
        )
    return next_state


def tick(state: MatchState) -> MatchState:
    """
    One unit of the countdown
    ---

    When the countdown reaches zero the turn passes exactly like after a non-scoring move, but nothing is placed.
    Once the match is over the clock is stopped and the state comes back untouched.
    """
    if state.game_over:
        return state

    remaining = state.timer - 1
    if remaining > 0:
        return replace(state, timer=remaining)

    logger.info("%s ran out of time", state.current_player)
    return _pass_turn(state)


# -- PRIVATE HELPERS ---
def _pass_turn(state: MatchState) -> MatchState:
    """Other player, other letter, fresh countdown"""
    return replace(
        state,
        current_player=state.current_player.opponent,
        current_letter=state.current_letter.toggled,
        timer=state.initial_countdown,
    )
