# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for the command input validation layer.

Validates:
  1. Each command has a Pydantic input model
  2. Player and inning indices are range-checked (0-8)
  3. Enum parameters reject unknown values
  4. Errors name the failing parameter
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from models import Base, PlayerField
from validation import (
    COMMAND_INPUT_MODELS,
    SetAtBatResultInput,
    ToggleBaseInput,
    UpdatePlayerFieldInput,
    parse_command,
)


class TestInputModels:
    def test_every_command_has_a_model(self):
        assert set(COMMAND_INPUT_MODELS) == {
            "set_at_bat_result", "toggle_base_flag", "update_player_field", "rename_team",
        }

    def test_at_bat_input_keeps_raw_notation(self):
        # Trimming and case belong to the classifier, not the HTTP edge
        model = SetAtBatResultInput(player=0, inning=8, result=" 6-3 ")
        assert model.result == " 6-3 "

    def test_toggle_input_parses_enum(self):
        model = ToggleBaseInput(player=1, inning=2, base="home")
        assert model.base is Base.HOME

    def test_player_field_input_parses_enum(self):
        model = UpdatePlayerFieldInput(player=1, field="position", value="SS")
        assert model.field is PlayerField.POSITION


class TestParseCommand:
    def test_valid(self):
        model, errors = parse_command("set_at_bat_result", {"player": 2, "inning": 0, "result": "K"})
        assert errors is None
        assert model.player == 2

    @pytest.mark.parametrize("player,inning", [(9, 0), (0, 9), (-1, 0)])
    def test_index_out_of_range(self, player, inning):
        model, errors = parse_command(
            "set_at_bat_result", {"player": player, "inning": inning, "result": "K"}
        )
        assert model is None
        params = [e["parameter"] for e in errors]
        assert ("player" in params) or ("inning" in params)

    def test_missing_result(self):
        _, errors = parse_command("set_at_bat_result", {"player": 0, "inning": 0})
        assert [e["parameter"] for e in errors] == ["result"]

    def test_bad_base(self):
        _, errors = parse_command("toggle_base_flag", {"player": 0, "inning": 0, "base": "fourth"})
        assert errors[0]["parameter"] == "base"

    def test_bad_field(self):
        _, errors = parse_command("update_player_field", {"player": 0, "field": "avg", "value": "x"})
        assert errors[0]["parameter"] == "field"

    def test_unknown_command(self):
        model, errors = parse_command("steal_home", {})
        assert model is None
        assert "Unknown command" in errors[0]["message"]
