# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Classify scorer's notation into a structured at-bat outcome.

Classification is substring-based, not a grammar. A string that contains
both an out token and a hit token (say ``"K1B"``) sets both the out and the
base flags. Downstream statistics rely on exactly this behavior.

Tokens:

  Outs:   K, F (F7, F8, ...), GO, PO, any fielding chain with '-' (6-3),
          and DP (exactly) which records two outs.
  Bases:  1B, 2B, 3B, HR, BB, HBP, E reach first; 2B/3B/HR reach second;
          3B/HR reach third; HR scores.
"""

from __future__ import annotations

from models import ClassifiedResult


OUT_TOKENS = ("K", "F", "GO", "PO")
DOUBLE_PLAY = "DP"

FIRST_TOKENS = ("1B", "2B", "3B", "HR", "BB", "HBP", "E")
SECOND_TOKENS = ("2B", "3B", "HR")
THIRD_TOKENS = ("3B", "HR")
HOME_TOKENS = ("HR",)

HIT_TOKENS = ("1B", "2B", "3B", "HR")
NON_AT_BAT_RESULTS = frozenset({"BB", "HBP"})

# Quick-entry buttons offered by the scorecard UI
QUICK_RESULTS = (
    "K", "BB", "1B", "2B", "3B", "HR",
    "F7", "F8", "F9", "6-3", "4-3", "5-3", "DP",
)


def normalize(notation: str) -> str:
    return notation.strip().upper()


def _contains_any(notation: str, tokens: tuple[str, ...]) -> bool:
    return any(token in notation for token in tokens)


def is_out_result(notation: str) -> bool:
    """True if the (already uppercased) notation records an out."""
    return (
        _contains_any(notation, OUT_TOKENS)
        or "-" in notation
        or notation == DOUBLE_PLAY
    )


def outs_for_result(notation: str) -> int:
    if notation == DOUBLE_PLAY:
        return 2
    return 1 if is_out_result(notation) else 0


def is_hit(notation: str) -> bool:
    return _contains_any(notation, HIT_TOKENS)


def classify_result(notation: str) -> ClassifiedResult:
    """Derive out count and base flags from a notation string.

    Args:
        notation: Raw scorer's notation. Case-insensitive; surrounding
            whitespace is dropped. A blank string means "no result" and
            classifies as all-false with zero outs.

    Returns:
        ClassifiedResult with is_out, outs and the four base flags.
    """
    notation = normalize(notation)
    if not notation:
        return ClassifiedResult()

    return ClassifiedResult(
        is_out=is_out_result(notation),
        outs=outs_for_result(notation),
        first=_contains_any(notation, FIRST_TOKENS),
        second=_contains_any(notation, SECOND_TOKENS),
        third=_contains_any(notation, THIRD_TOKENS),
        home=_contains_any(notation, HOME_TOKENS),
    )
