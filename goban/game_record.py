"""Immutable game record produced by the SGF parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

from goban.constants import DEFAULT_BOARD_SIZE, SGF_COLORS

Color = Literal["B", "W"]


@dataclass(frozen=True)
class SGFMove:
    """A single move of the main line.

    ``position`` is the raw SGF point ("dd"); "" means a pass.
    """

    color: Color
    position: str
    move_number: int

    @property
    def sign(self) -> int:
        return SGF_COLORS[self.color]

    @property
    def is_pass(self) -> bool:
        return self.position in ("", "tt")


@dataclass(frozen=True)
class GameInfo:
    """Game metadata from the root properties of a record."""

    board_size: int = DEFAULT_BOARD_SIZE
    player_black: str | None = None
    player_white: str | None = None
    result: str | None = None
    date: str | None = None
    event: str | None = None
    round: str | None = None
    komi: float | None = None
    handicap: int | None = None
    game_name: str | None = None
    rules: str | None = None


@dataclass(frozen=True)
class GameRecord:
    """Metadata, setup stones and main-line moves of one game."""

    game_info: GameInfo = field(default_factory=GameInfo)
    moves: Tuple[SGFMove, ...] = ()
    setup_black: Tuple[Tuple[int, int], ...] = ()
    setup_white: Tuple[Tuple[int, int], ...] = ()
