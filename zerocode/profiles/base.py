"""Destination profile record and format-style enum.

WHY: Every platform has a size ceiling and formatting quirks. A profile
is the single record the assembler, transformer, and truncator consult
for one destination.

HOW: DestinationProfile is a frozen dataclass. with_overrides() returns a
copy with selected fields replaced (used for JSON override files).

RULES:
- ceiling: maximum character count, integer >= 0
- line_limit: optional maximum line count (None = unlimited), at least 3
- supports_symbols=False triggers glyph removal in the transformer
- transform_kind names the entry in zerocode.transforms.TRANSFORMS
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from zerocode.config import MIN_LINE_LIMIT


class FormatStyle(str, enum.Enum):
    """Preferred text layout for a destination."""

    MARKDOWN = "markdown"
    PLAIN = "plain"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class DestinationProfile:
    """Constraints and formatting flags for one destination platform."""

    key: str
    display_name: str
    ceiling: int
    format_style: FormatStyle = FormatStyle.MARKDOWN
    supports_symbols: bool = True
    transform_kind: str = "universal"
    line_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.ceiling < 0:
            raise ValueError("Profile '{}' has a negative ceiling.".format(self.key))
        if self.line_limit is not None and self.line_limit < MIN_LINE_LIMIT:
            raise ValueError(
                "Profile '{}' has line_limit {}; the minimum is {}.".format(
                    self.key, self.line_limit, MIN_LINE_LIMIT
                )
            )

    def with_overrides(self, overrides: Mapping[str, Any]) -> DestinationProfile:
        changes = dict(overrides)
        if "format_style" in changes:
            changes["format_style"] = FormatStyle(changes["format_style"])
        return dataclasses.replace(self, **changes)
