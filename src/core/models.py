"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Any

# Type aliases to make MatchModel easier to read
PlayerName = str
LineRecord = dict[str, Any]


@dataclass
class MatchModel:
    """Transport-safe representation of an SOS match used between API, Service, DB, and Match layers."""

    board: str
    current_player: str
    current_letter: str
    scores: dict[PlayerName, int]
    lines: list[LineRecord] = field(default_factory=list)
    timer: int = 10
    initial_countdown: int = 10
    game_over: bool = False
