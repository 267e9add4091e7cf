# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Scorecard store: lineups and at-bat grids for one or two teams.

Every at-bat write goes through the result classifier and the inning out
gate. A write either commits a whole new cell or leaves the scorecard
untouched; a write rejected by the three-out rule is reported through
``AtBatUpdate.accepted`` rather than raised.

State is held as a tuple of frozen ``Team`` models. Each command builds the
replacement team and swaps the tuple in a single assignment, so readers
never observe a half-applied update. The store is not thread-safe on its
own; concurrent callers must serialize commands (see ``app.py``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import config
from classifier import QUICK_RESULTS, classify_result, normalize
from models import (
    INNINGS,
    LINEUP_SIZE,
    AtBatCell,
    Base,
    Player,
    PlayerField,
    Team,
    check_index,
)
from out_tracker import (
    is_cell_locked,
    out_ordinal,
    outs_in_inning,
    would_exceed,
)

logger = logging.getLogger(__name__)


def create_team(name: str) -> Team:
    """Return a team with 9 blank players and a 9x9 grid of empty cells."""
    return Team(name=name)


@dataclass
class AtBatUpdate:
    """Outcome of a set_at_bat_result command.

    Attributes:
        accepted: False when the write would push the inning past 3 outs.
        cell: The cell as it stands after the command.
        inning_outs: The inning's out count after the command.
        close_selection: Tells the UI to dismiss its result picker. Set on
            every committed write; not part of the scorecard state.
    """
    accepted: bool
    cell: AtBatCell
    inning_outs: int
    close_selection: bool = False

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "cell": self.cell.model_dump(),
            "inning_outs": self.inning_outs,
            "close_selection": self.close_selection,
        }


def team_to_dict(team: Team) -> dict:
    """Serialize one team with its per-inning outs, out ordinals and locks."""
    data = team.model_dump(mode="json")
    data["inning_outs"] = [outs_in_inning(team, i) for i in range(INNINGS)]
    data["out_ordinals"] = [
        [
            out_ordinal(team, p, i) if team.at_bats[p][i].outs else None
            for i in range(INNINGS)
        ]
        for p in range(LINEUP_SIZE)
    ]
    data["locked"] = [
        [is_cell_locked(team, p, i) for i in range(INNINGS)]
        for p in range(LINEUP_SIZE)
    ]
    return data


class ScorecardStore:
    """Owns the teams and exposes the scorecard's command and query API."""

    def __init__(
        self,
        team_count: int | None = None,
        team_names: tuple[str, ...] | None = None,
    ):
        if team_count is None:
            team_count = len(team_names) if team_names else config.get_team_count()
        if team_names is None:
            team_names = config.default_team_names(team_count)
        if len(team_names) != team_count:
            raise ValueError(
                f"Expected {team_count} team names, got {len(team_names)}"
            )
        self._default_names: tuple[str, ...] = tuple(team_names)
        self._teams: tuple[Team, ...] = tuple(create_team(n) for n in team_names)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------

    @property
    def teams(self) -> tuple[Team, ...]:
        return self._teams

    @property
    def team_count(self) -> int:
        return len(self._teams)

    def team(self, team_idx: int) -> Team:
        check_index("team", team_idx, len(self._teams))
        return self._teams[team_idx]

    def grid(self, team_idx: int) -> tuple[tuple[AtBatCell, ...], ...]:
        return self.team(team_idx).at_bats

    def cell(self, team_idx: int, player_idx: int, inning: int) -> AtBatCell:
        self._check_cell(player_idx, inning)
        return self.team(team_idx).at_bats[player_idx][inning]

    def outs_in_inning(self, team_idx: int, inning: int) -> int:
        check_index("inning", inning, INNINGS)
        return outs_in_inning(self.team(team_idx), inning)

    def out_ordinal(self, team_idx: int, player_idx: int, inning: int) -> int:
        self._check_cell(player_idx, inning)
        return out_ordinal(self.team(team_idx), player_idx, inning)

    def quick_result_options(
        self, team_idx: int, player_idx: int, inning: int
    ) -> list[dict]:
        """List the quick-entry results for a cell and whether each is allowed."""
        self._check_cell(player_idx, inning)
        team = self.team(team_idx)
        options = []
        for result in QUICK_RESULTS:
            outs = classify_result(result).outs
            options.append({
                "result": result,
                "outs": outs,
                "disabled": would_exceed(team, inning, player_idx, outs),
            })
        return options

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------

    def update_player_field(
        self, team_idx: int, player_idx: int, field: PlayerField | str, value: str
    ) -> Player:
        field = PlayerField(field)
        check_index("player", player_idx, LINEUP_SIZE)
        team = self.team(team_idx)
        player = team.players[player_idx].model_copy(update={field.value: value})
        self._replace_team(team_idx, team.with_player(player_idx, player))
        return player

    def rename_team(self, team_idx: int, name: str) -> Team:
        team = self.team(team_idx).model_copy(update={"name": name})
        self._replace_team(team_idx, team)
        return team

    def set_at_bat_result(
        self, team_idx: int, player_idx: int, inning: int, notation: str
    ) -> AtBatUpdate:
        """Record a notation in a cell, subject to the three-out rule.

        Args:
            team_idx: Team index (0 = away in the two-team layout).
            player_idx: Batting-order slot, 0-8.
            inning: Inning index, 0-8.
            notation: Scorer's notation. Trimmed and uppercased before
                classification. A blank string clears the cell.

        Returns:
            AtBatUpdate. When rejected, the scorecard is unchanged.
        """
        self._check_cell(player_idx, inning)
        team = self.team(team_idx)
        result = normalize(notation)
        outcome = classify_result(result)

        if would_exceed(team, inning, player_idx, outcome.outs):
            logger.info(
                "Rejected %r for %s batter %d inning %d: inning already has %d outs",
                result, team.name, player_idx + 1, inning + 1,
                outs_in_inning(team, inning),
            )
            return AtBatUpdate(
                accepted=False,
                cell=team.at_bats[player_idx][inning],
                inning_outs=outs_in_inning(team, inning),
            )

        cell = AtBatCell(
            result=result,
            first=outcome.first,
            second=outcome.second,
            third=outcome.third,
            home=outcome.home,
            outs=outcome.outs,
        )
        updated = team.with_cell(player_idx, inning, cell)
        self._replace_team(team_idx, updated)
        logger.debug(
            "%s batter %d inning %d: %r", team.name, player_idx + 1, inning + 1, result
        )
        return AtBatUpdate(
            accepted=True,
            cell=cell,
            inning_outs=outs_in_inning(updated, inning),
            close_selection=True,
        )

    def toggle_base_flag(
        self, team_idx: int, player_idx: int, inning: int, base: Base | str
    ) -> AtBatCell:
        """Flip one base flag on a cell. Scorer override: ignores the out gate."""
        base = Base(base)
        self._check_cell(player_idx, inning)
        team = self.team(team_idx)
        current = team.at_bats[player_idx][inning]
        cell = current.model_copy(
            update={base.value: not getattr(current, base.value)}
        )
        self._replace_team(team_idx, team.with_cell(player_idx, inning, cell))
        return cell

    def reset_all(self) -> None:
        """Recreate every team blank under its default name."""
        self._teams = tuple(create_team(n) for n in self._default_names)
        logger.info("Scorecard reset (%d teams)", len(self._teams))

    # -------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Full snapshot for rendering, including derived out ordinals."""
        return {"teams": [team_to_dict(team) for team in self._teams]}

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------

    def _check_cell(self, player_idx: int, inning: int) -> None:
        check_index("player", player_idx, LINEUP_SIZE)
        check_index("inning", inning, INNINGS)

    def _replace_team(self, team_idx: int, team: Team) -> None:
        teams = list(self._teams)
        teams[team_idx] = team
        self._teams = tuple(teams)
