# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Structured response helpers for the scorecard HTTP API.

Every command response follows the same top-level structure:

  Success:
    {
      "status": "ok",
      "command": "<command_name>",
      "data": { ... }
    }

  Error:
    {
      "status": "error",
      "command": "<command_name>",
      "error_code": "<ERROR_CODE>",
      "message": "Human-readable error description",
      "errors": [ {"parameter": ..., "message": ...}, ... ]   # optional
    }

A rejected at-bat (three-out rule) is a success response whose data has
``"accepted": false``. It is an expected scorer input, not an error.
"""

from typing import Any


def success_response(command: str, data: dict[str, Any]) -> dict[str, Any]:
    """Build a structured success response.

    Args:
        command: The name of the command producing this response.
        data: The command-specific data payload.

    Returns:
        Dict with consistent top-level structure, ready for jsonify.
    """
    return {
        "status": "ok",
        "command": command,
        "data": data,
    }


def error_response(
    command: str,
    error_code: str,
    message: str,
    errors: list[dict] | None = None,
) -> dict[str, Any]:
    """Build a structured error response.

    Args:
        command: The name of the command producing this response.
        error_code: Machine-readable error code (e.g., INVALID_PARAMETER).
        message: Human-readable error description.
        errors: Optional per-parameter details from input validation.

    Returns:
        Dict with consistent error structure.
    """
    body: dict[str, Any] = {
        "status": "error",
        "command": command,
        "error_code": error_code,
        "message": message,
    }
    if errors:
        body["errors"] = errors
    return body
