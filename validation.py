# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Input validation layer for scorecard commands.

Provides Pydantic input models for each command the web UI can send, and a
helper that parses a raw JSON payload into the matching model. Validation
happens at the HTTP edge so the store only ever sees well-formed commands.

Every command input model enforces:
- Player and inning indices are integers in 0-8
- Enum parameters (base, player field) reject unknown values
- Notation and free-text fields are strings

Validation errors name the parameter that failed and what was expected.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from models import INNINGS, LINEUP_SIZE, Base, PlayerField


# ---------------------------------------------------------------------------
# Command input models
# ---------------------------------------------------------------------------

class SetAtBatResultInput(BaseModel):
    """Input schema for recording an at-bat result."""
    player: int = Field(ge=0, lt=LINEUP_SIZE, description="Batting-order slot (0-8).")
    inning: int = Field(ge=0, lt=INNINGS, description="Inning index (0-8).")
    result: str = Field(description="Scorer's notation; empty string clears the cell.")


class ToggleBaseInput(BaseModel):
    """Input schema for a manual base-flag toggle."""
    player: int = Field(ge=0, lt=LINEUP_SIZE, description="Batting-order slot (0-8).")
    inning: int = Field(ge=0, lt=INNINGS, description="Inning index (0-8).")
    base: Base = Field(description="One of 'first', 'second', 'third', 'home'.")


class UpdatePlayerFieldInput(BaseModel):
    """Input schema for editing a lineup slot."""
    player: int = Field(ge=0, lt=LINEUP_SIZE, description="Batting-order slot (0-8).")
    field: PlayerField = Field(description="One of 'number', 'name', 'position'.")
    value: str = Field(description="New value for the field.")


class RenameTeamInput(BaseModel):
    """Input schema for renaming a team."""
    name: str = Field(description="New team name.")


COMMAND_INPUT_MODELS: dict[str, type[BaseModel]] = {
    "set_at_bat_result": SetAtBatResultInput,
    "toggle_base_flag": ToggleBaseInput,
    "update_player_field": UpdatePlayerFieldInput,
    "rename_team": RenameTeamInput,
}


# ---------------------------------------------------------------------------
# Validation entry point
# ---------------------------------------------------------------------------

def parse_command(
    command: str, payload: dict[str, Any]
) -> tuple[Optional[BaseModel], Optional[list[dict]]]:
    """Parse a command payload against the command's input model.

    Args:
        command: The command name (a key of COMMAND_INPUT_MODELS).
        payload: Raw decoded JSON body.

    Returns:
        Tuple of (model, errors). Exactly one of them is None.
    """
    model_cls = COMMAND_INPUT_MODELS.get(command)
    if model_cls is None:
        return None, [{"parameter": "command", "message": f"Unknown command: {command}"}]

    try:
        return model_cls(**payload), None
    except ValidationError as e:
        return None, format_validation_errors(e)


def format_validation_errors(exc: ValidationError) -> list[dict]:
    """Flatten a Pydantic ValidationError into parameter/message pairs."""
    errors = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error["loc"])
        errors.append({"parameter": loc, "message": error["msg"]})
    return errors
