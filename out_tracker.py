# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Three-outs-per-half-inning bookkeeping over a team's at-bat grid."""

from __future__ import annotations

from models import MAX_OUTS, Team


def outs_in_inning(team: Team, inning: int) -> int:
    """Total outs recorded by every batter in the given inning."""
    return sum(cell.outs for cell in team.inning_column(inning))


def would_exceed(team: Team, inning: int, player_idx: int, new_outs: int) -> bool:
    """Return True if writing ``new_outs`` to the cell breaks the out limit.

    Only net new outs are gated. Outs the cell already holds are part of
    the inning's count, so re-scoring an out cell as another single out (or
    as a non-out) is always allowed. Upgrading it to a DP still has to fit.
    """
    current = team.at_bats[player_idx][inning].outs
    return outs_in_inning(team, inning) - current + new_outs > MAX_OUTS


def out_ordinal(team: Team, player_idx: int, inning: int) -> int:
    """Out number shown on a cell, counted in batting order within the inning."""
    before = sum(team.at_bats[i][inning].outs for i in range(player_idx))
    return before + 1


def is_inning_complete(team: Team, inning: int) -> bool:
    return outs_in_inning(team, inning) >= MAX_OUTS


def is_cell_locked(team: Team, player_idx: int, inning: int) -> bool:
    # A finished inning keeps its recorded cells editable, blank ones are closed.
    cell = team.at_bats[player_idx][inning]
    return is_inning_complete(team, inning) and not cell.result
