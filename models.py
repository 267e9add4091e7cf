# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for the baseball scorecard.

All models are frozen. A mutation never edits a model in place: it builds a
replacement with ``model_copy(update=...)`` so a reader always holds a
complete, consistent snapshot.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


LINEUP_SIZE = 9
INNINGS = 9
MAX_OUTS = 3


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Base(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    HOME = "home"


class PlayerField(str, Enum):
    NUMBER = "number"
    NAME = "name"
    POSITION = "position"


class Position(str, Enum):
    """Scorer's position codes, keyed by the number used in fielding chains."""
    P = "P"
    C = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SS = "SS"
    LF = "LF"
    CF = "CF"
    RF = "RF"


POSITION_NUMBERS: dict[int, Position] = {
    1: Position.P,
    2: Position.C,
    3: Position.FIRST_BASE,
    4: Position.SECOND_BASE,
    5: Position.THIRD_BASE,
    6: Position.SS,
    7: Position.LF,
    8: Position.CF,
    9: Position.RF,
}


# ---------------------------------------------------------------------------
# Lineup and at-bat grid
# ---------------------------------------------------------------------------

class Player(BaseModel):
    """One lineup slot. Fields are free text; length limits belong to the UI."""
    model_config = ConfigDict(frozen=True)

    number: str = ""
    name: str = ""
    position: str = ""


class AtBatCell(BaseModel):
    """One player's plate appearance in one inning."""
    model_config = ConfigDict(frozen=True)

    result: str = ""
    first: bool = False
    second: bool = False
    third: bool = False
    home: bool = False
    outs: int = Field(default=0, ge=0, le=2)


class ClassifiedResult(BaseModel):
    """Structured outcome derived from a notation string."""
    model_config = ConfigDict(frozen=True)

    is_out: bool = False
    outs: int = Field(default=0, ge=0, le=2)
    first: bool = False
    second: bool = False
    third: bool = False
    home: bool = False


def _blank_lineup() -> tuple[Player, ...]:
    return tuple(Player() for _ in range(LINEUP_SIZE))


def _blank_grid() -> tuple[tuple[AtBatCell, ...], ...]:
    return tuple(
        tuple(AtBatCell() for _ in range(INNINGS))
        for _ in range(LINEUP_SIZE)
    )


class Team(BaseModel):
    """A team's lineup and its 9x9 at-bat grid, indexed [player][inning]."""
    model_config = ConfigDict(frozen=True)

    name: str
    players: tuple[Player, ...] = Field(default_factory=_blank_lineup)
    at_bats: tuple[tuple[AtBatCell, ...], ...] = Field(default_factory=_blank_grid)

    def with_player(self, player_idx: int, player: Player) -> Team:
        players = list(self.players)
        players[player_idx] = player
        return self.model_copy(update={"players": tuple(players)})

    def with_cell(self, player_idx: int, inning: int, cell: AtBatCell) -> Team:
        row = list(self.at_bats[player_idx])
        row[inning] = cell
        grid = list(self.at_bats)
        grid[player_idx] = tuple(row)
        return self.model_copy(update={"at_bats": tuple(grid)})

    def inning_column(self, inning: int) -> list[AtBatCell]:
        return [row[inning] for row in self.at_bats]


def position_codes() -> list[dict]:
    """Scorer's position table, in fielding-number order, for the lineup UI."""
    return [
        {"number": number, "code": position.value}
        for number, position in POSITION_NUMBERS.items()
    ]


def check_index(kind: str, idx: int, size: int) -> None:
    if not 0 <= idx < size:
        raise IndexError(f"{kind} index {idx} out of range (0-{size - 1})")
