# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for inning out bookkeeping.

Validates:
  1. outs_in_inning sums outs down one inning column
  2. would_exceed only gates net new outs
  3. out_ordinal numbers outs in batting order within an inning
  4. Completed innings lock their blank cells
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from models import AtBatCell, Team
from out_tracker import (
    is_cell_locked,
    is_inning_complete,
    out_ordinal,
    outs_in_inning,
    would_exceed,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_team_with_outs(inning: int, outs_by_player: dict[int, int]) -> Team:
    team = Team(name="TEST")
    for player_idx, outs in outs_by_player.items():
        result = "DP" if outs == 2 else "K"
        team = team.with_cell(player_idx, inning, AtBatCell(result=result, outs=outs))
    return team


# ===========================================================================
# outs_in_inning
# ===========================================================================

class TestOutsInInning:
    def test_empty_inning(self):
        assert outs_in_inning(Team(name="T"), 0) == 0

    def test_sums_column(self):
        team = make_team_with_outs(2, {0: 1, 3: 2})
        assert outs_in_inning(team, 2) == 3

    def test_other_innings_unaffected(self):
        team = make_team_with_outs(2, {0: 1, 3: 2})
        assert outs_in_inning(team, 1) == 0
        assert outs_in_inning(team, 3) == 0


# ===========================================================================
# would_exceed
# ===========================================================================

class TestWouldExceed:
    def test_third_out_allowed(self):
        team = make_team_with_outs(0, {0: 1, 1: 1})
        assert would_exceed(team, 0, 2, 1) is False

    def test_fourth_out_rejected(self):
        team = make_team_with_outs(0, {0: 1, 1: 1, 2: 1})
        assert would_exceed(team, 0, 3, 1) is True

    def test_double_play_with_two_outs_rejected(self):
        team = make_team_with_outs(0, {0: 1, 1: 1})
        assert would_exceed(team, 0, 2, 2) is True

    def test_non_out_never_rejected(self):
        team = make_team_with_outs(0, {0: 1, 1: 1, 2: 1})
        assert would_exceed(team, 0, 3, 0) is False

    def test_rescoring_an_out_cell_does_not_double_count(self):
        team = make_team_with_outs(0, {0: 1, 1: 1, 2: 1})
        assert would_exceed(team, 0, 2, 1) is False

    def test_upgrading_an_out_cell_to_dp_still_capped(self):
        team = make_team_with_outs(0, {0: 1, 1: 1, 2: 1})
        assert would_exceed(team, 0, 2, 2) is True

    def test_upgrading_to_dp_allowed_when_room(self):
        team = make_team_with_outs(0, {0: 1})
        assert would_exceed(team, 0, 0, 2) is False


# ===========================================================================
# out_ordinal
# ===========================================================================

class TestOutOrdinal:
    def test_first_out(self):
        team = make_team_with_outs(0, {4: 1})
        assert out_ordinal(team, 4, 0) == 1

    def test_counts_lower_batting_order_only(self):
        team = make_team_with_outs(0, {1: 1, 5: 1, 7: 1})
        assert out_ordinal(team, 1, 0) == 1
        assert out_ordinal(team, 5, 0) == 2
        assert out_ordinal(team, 7, 0) == 3

    def test_double_play_counts_two(self):
        team = make_team_with_outs(0, {0: 2, 3: 1})
        assert out_ordinal(team, 3, 0) == 3


# ===========================================================================
# Inning completion
# ===========================================================================

class TestInningComplete:
    def test_complete_at_three(self):
        team = make_team_with_outs(0, {0: 1, 1: 2})
        assert is_inning_complete(team, 0) is True
        assert is_inning_complete(team, 1) is False

    def test_blank_cells_locked_after_three_outs(self):
        team = make_team_with_outs(0, {0: 1, 1: 2})
        assert is_cell_locked(team, 5, 0) is True

    def test_recorded_cells_stay_editable(self):
        team = make_team_with_outs(0, {0: 1, 1: 2})
        assert is_cell_locked(team, 0, 0) is False

    def test_nothing_locked_in_open_inning(self):
        team = make_team_with_outs(0, {0: 1})
        assert is_cell_locked(team, 5, 0) is False
