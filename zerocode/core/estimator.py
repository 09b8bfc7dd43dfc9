"""Approximate size cost of a text block.

WHY: The assembler needs a cheap, deterministic cost for each fragment
to decide whether it still fits under a platform's ceiling. Exact
tokenizer counts differ per model and are not needed because the
budget thresholds already carry generous safety margins.

HOW: ceil(len(text) / CHARS_PER_UNIT) with CHARS_PER_UNIT = 4.

RULES:
- Pure function, no hidden state
- Empty text costs 0
"""

from __future__ import annotations

import math

from zerocode.config import CHARS_PER_UNIT


def estimate(text: str, chars_per_unit: int = CHARS_PER_UNIT) -> int:
    """Return the estimated cost of *text* (characters / 4, rounded up)."""
    return math.ceil(len(text) / chars_per_unit)
