# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Box-score statistics derived from a team's at-bat grid.

Nothing here is cached: every figure is recomputed from the grid on each
call, so it always agrees with the current snapshot.
"""

from __future__ import annotations

from classifier import NON_AT_BAT_RESULTS, is_hit
from models import INNINGS, AtBatCell, Team, check_index


def _is_at_bat(cell: AtBatCell) -> bool:
    # Walks and hit-by-pitch are plate appearances, not at-bats.
    return bool(cell.result) and cell.result not in NON_AT_BAT_RESULTS


def _row(team: Team, player_idx: int) -> tuple[AtBatCell, ...]:
    check_index("player", player_idx, len(team.players))
    return team.at_bats[player_idx]


def at_bats(team: Team, player_idx: int) -> int:
    return sum(1 for cell in _row(team, player_idx) if _is_at_bat(cell))


def hits(team: Team, player_idx: int) -> int:
    return sum(1 for cell in _row(team, player_idx) if is_hit(cell.result))


def runs(team: Team, player_idx: int) -> int:
    return sum(1 for cell in _row(team, player_idx) if cell.home)


def inning_runs(team: Team, inning: int) -> int:
    check_index("inning", inning, INNINGS)
    return sum(1 for cell in team.inning_column(inning) if cell.home)


def linescore(team: Team) -> list[int]:
    """Runs per inning, innings 1-9."""
    return [inning_runs(team, i) for i in range(INNINGS)]


def batting_line(team: Team, player_idx: int) -> dict:
    check_index("player", player_idx, len(team.players))
    player = team.players[player_idx]
    return {
        "number": player.number,
        "name": player.name,
        "position": player.position,
        "AB": at_bats(team, player_idx),
        "H": hits(team, player_idx),
        "R": runs(team, player_idx),
    }


def team_totals(team: Team) -> dict[str, int]:
    lineup = range(len(team.players))
    return {
        "AB": sum(at_bats(team, p) for p in lineup),
        "H": sum(hits(team, p) for p in lineup),
        "R": sum(runs(team, p) for p in lineup),
    }


def box_score(team: Team) -> dict:
    """Generate the batting box score and linescore for one team."""
    totals = team_totals(team)
    return {
        "team_name": team.name,
        "inning_runs": linescore(team),
        "total_runs": totals["R"],
        "total_hits": totals["H"],
        "batting": [batting_line(team, p) for p in range(len(team.players))],
        "totals": totals,
    }
