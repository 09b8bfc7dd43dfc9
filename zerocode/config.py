"""Configuration constants, budget ratios, and .env loading.

WHY: Centralizes every tunable value so it is easy to find, update, and
override. The budget ratios in particular are load-bearing: the
assembler's inclusion decisions and the truncator's branch selection both
depend on their exact values, so they live here as named constants
instead of being scattered through the logic as magic numbers.

HOW: python-dotenv loads the .env file on import. Defaults are module
level constants read via os.getenv. load_profile_overrides() reads an
optional JSON file of per-platform limit overrides and validates it with
jsonschema before anything in it is trusted.

RULES:
- EXTENDED_BUDGET_RATIO / EXAMPLES_BUDGET_RATIO gate optional fragments
- MIN_CONTENT_RATIO / PARAGRAPH_SNAP_RATIO steer the truncator
- All defaults can be overridden via environment variables
- Invalid override files raise ValueError, never a silent fallback
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from dotenv import load_dotenv

# Load .env from the project root (where the CLI is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Size estimation and budget ratios
# ---------------------------------------------------------------------------

CHARS_PER_UNIT = 4
"""Coarse characters-per-token heuristic used by the size estimator."""

EXTENDED_BUDGET_RATIO = 0.7
"""Extended rules are included only while cumulative cost stays below this share of the ceiling."""

EXAMPLES_BUDGET_RATIO = 0.9
"""Example blocks are included only while cumulative cost stays below this share of the ceiling."""

MIN_CONTENT_RATIO = 0.3
"""Header/footer-preserving truncation needs at least this share of the document left over."""

PARAGRAPH_SNAP_RATIO = 0.8
"""A truncation cut snaps back to a paragraph break only if the break lies past this share of the cut."""

TRUNCATION_MARKER = "\n\n[Truncated for platform compatibility]"

MIN_LINE_LIMIT = 3
"""Smallest usable line limit: one kept line plus the blank line and marker line."""

DEFAULT_DESTINATION = "universal"
"""Profile used for unknown destination identifiers."""

FALLBACK_EXTENDED_DESTINATION = "cursor"
"""Destination whose extended rules are used when a destination has none of its own."""

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_PLATFORM = os.getenv("ZEROCODE_DEFAULT_PLATFORM", DEFAULT_DESTINATION)
DEFAULT_COMPLEXITY = os.getenv("ZEROCODE_DEFAULT_COMPLEXITY", "basic")
DEFAULT_LANGUAGE = os.getenv("ZEROCODE_DEFAULT_LANGUAGE", "english")
LOG_LEVEL = os.getenv("ZEROCODE_LOG_LEVEL", "WARNING")


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" to its logging constant.

    Raises ValueError for names the logging module does not know.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError("Unknown log level in ZEROCODE_LOG_LEVEL: {!r}".format(name))
    return level


ZEROCODE_DIR_NAME = ".zerocode"
PRINCIPLES = ["hickey", "linus", "zeus"]

# ---------------------------------------------------------------------------
# Profile override files
# ---------------------------------------------------------------------------

PROFILE_OVERRIDES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "properties": {
            "display_name": {"type": "string", "minLength": 1},
            "ceiling": {"type": "integer", "minimum": 0},
            "line_limit": {"type": ["integer", "null"], "minimum": MIN_LINE_LIMIT},
            "format_style": {"enum": ["markdown", "plain", "structured"]},
            "supports_symbols": {"type": "boolean"},
            "transform_kind": {"type": "string", "minLength": 1},
        },
        "additionalProperties": False,
    },
}


def load_profile_overrides(path: str | Path) -> Dict[str, Dict[str, Any]]:
    """Load and validate a JSON file of per-platform profile overrides.

    WHY: Users with a bigger local model (or a stricter IDE plugin) want
    to tune ceilings without editing package code.

    HOW: Parses the file as JSON and validates it against
    PROFILE_OVERRIDES_SCHEMA. Keys are destination identifiers; values
    hold any subset of profile fields.

    RULES:
    - Raises ValueError for unreadable, malformed, or schema-invalid files
    - Unknown destination keys are allowed (they register new profiles)
    - line_limit must leave room for the two truncation marker lines

    Args:
        path: Path to the overrides JSON file.

    Returns:
        Mapping of destination key to field overrides.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError("Cannot read profile overrides file {}: {}".format(path, e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError("Profile overrides file {} is not valid JSON: {}".format(path, e)) from e

    try:
        jsonschema.validate(instance=data, schema=PROFILE_OVERRIDES_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ValueError(
            "Invalid profile overrides in {} at {}: {}".format(path, location, e.message)
        ) from e

    return data


def configured_overrides() -> Optional[Dict[str, Dict[str, Any]]]:
    """Return overrides from ZEROCODE_PROFILES_FILE, or None when unset."""
    path = os.getenv("ZEROCODE_PROFILES_FILE", "").strip()
    if not path:
        return None
    return load_profile_overrides(path)
