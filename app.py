# /// script
# requires-python = ">=3.12"
# dependencies = ["flask>=3.0", "pydantic>=2.0"]
# ///
"""Web UI for the baseball scorecard.

Serves a single scorecard page and a JSON API the page drives: recording
at-bat results, toggling bases, editing the lineup, and reading the box
score and linescore.

Usage:
    uv run app.py
    SCORECARD_TEAMS=1 uv run app.py     # single-team scorecard
"""

from __future__ import annotations

import logging
import threading

from flask import Flask, jsonify, render_template, request

import config
from models import INNINGS, LINEUP_SIZE, position_codes
from response import error_response, success_response
from scorecard import ScorecardStore, team_to_dict
from stats import box_score
from validation import parse_command

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = Flask(__name__)

STORE = ScorecardStore()

# The dev server is threaded; commands run one at a time so each at-bat
# write is checked and committed against the same snapshot.
_STORE_LOCK = threading.Lock()


def _scorecard_payload() -> dict:
    """Render teams and box scores from one snapshot. Call under _STORE_LOCK."""
    teams = STORE.teams
    return {
        "teams": [team_to_dict(team) for team in teams],
        "box_scores": [box_score(team) for team in teams],
        "positions": position_codes(),
    }


def _unknown_team(command: str, team_idx: int):
    return jsonify(error_response(
        command, "TEAM_NOT_FOUND",
        f"Team {team_idx} not found (scorecard has {STORE.team_count})",
    )), 404


def _parse(command: str):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    parsed, errors = parse_command(command, payload)
    if errors:
        logger.warning("Invalid %s request: %s", command, errors)
        return None, (jsonify(error_response(
            command, "INVALID_PARAMETER", "Request validation failed", errors,
        )), 400)
    return parsed, None


# ---------------------------------------------------------------------------
# Page routes
# ---------------------------------------------------------------------------


@app.route("/")
def scorecard_page():
    return render_template(
        "scorecard.html",
        innings=range(1, INNINGS + 1),
        lineup_size=LINEUP_SIZE,
    )


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.route("/api/scorecard")
def api_scorecard():
    with _STORE_LOCK:
        payload = _scorecard_payload()
    return jsonify(success_response("scorecard", payload))


@app.route("/api/teams/<int:team_idx>/box_score")
def api_box_score(team_idx: int):
    if team_idx >= STORE.team_count:
        return _unknown_team("box_score", team_idx)
    return jsonify(success_response("box_score", box_score(STORE.team(team_idx))))


@app.route("/api/teams/<int:team_idx>/at_bats", methods=["POST"])
def api_set_at_bat(team_idx: int):
    command = "set_at_bat_result"
    if team_idx >= STORE.team_count:
        return _unknown_team(command, team_idx)
    parsed, failure = _parse(command)
    if failure:
        return failure

    with _STORE_LOCK:
        update = STORE.set_at_bat_result(
            team_idx, parsed.player, parsed.inning, parsed.result
        )
    return jsonify(success_response(command, update.to_dict()))


@app.route(
    "/api/teams/<int:team_idx>/at_bats/<int:player_idx>/<int:inning>/options"
)
def api_quick_result_options(team_idx: int, player_idx: int, inning: int):
    command = "quick_result_options"
    if team_idx >= STORE.team_count:
        return _unknown_team(command, team_idx)
    if player_idx >= LINEUP_SIZE or inning >= INNINGS:
        return jsonify(error_response(
            command, "INVALID_PARAMETER",
            f"Cell ({player_idx}, {inning}) is outside the 9x9 grid",
        )), 400
    options = STORE.quick_result_options(team_idx, player_idx, inning)
    return jsonify(success_response(command, {"options": options}))


@app.route("/api/teams/<int:team_idx>/bases", methods=["POST"])
def api_toggle_base(team_idx: int):
    command = "toggle_base_flag"
    if team_idx >= STORE.team_count:
        return _unknown_team(command, team_idx)
    parsed, failure = _parse(command)
    if failure:
        return failure

    with _STORE_LOCK:
        cell = STORE.toggle_base_flag(
            team_idx, parsed.player, parsed.inning, parsed.base
        )
    return jsonify(success_response(command, {"cell": cell.model_dump()}))


@app.route("/api/teams/<int:team_idx>/players", methods=["POST"])
def api_update_player(team_idx: int):
    command = "update_player_field"
    if team_idx >= STORE.team_count:
        return _unknown_team(command, team_idx)
    parsed, failure = _parse(command)
    if failure:
        return failure

    with _STORE_LOCK:
        player = STORE.update_player_field(
            team_idx, parsed.player, parsed.field, parsed.value
        )
    return jsonify(success_response(command, {"player": player.model_dump()}))


@app.route("/api/teams/<int:team_idx>/name", methods=["POST"])
def api_rename_team(team_idx: int):
    command = "rename_team"
    if team_idx >= STORE.team_count:
        return _unknown_team(command, team_idx)
    parsed, failure = _parse(command)
    if failure:
        return failure

    with _STORE_LOCK:
        team = STORE.rename_team(team_idx, parsed.name)
    return jsonify(success_response(command, {"name": team.name}))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    with _STORE_LOCK:
        STORE.reset_all()
        payload = _scorecard_payload()
    return jsonify(success_response("reset_all", payload))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    app.run(debug=True, host="0.0.0.0", port=config.get_port(), threaded=True)
