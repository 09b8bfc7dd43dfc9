"""Header/footer-preserving truncation — the final size safety net.

WHY: The assembler only budgets the fragments it adds. The transformer
can still push a prompt past its platform ceiling (Claude's appendix is
appended unconditionally), and custom documents may be any size. The
truncator guarantees the ceiling while keeping the parts of the prompt
a model reads first (the title and principles) and last (usage
instructions).

HOW: Character pass:
  1. footer = "\\n\\n## Usage Instructions" to the end (may be empty)
  2. available = ceiling - len(marker) - len(footer)
  3. available < 0.3 * len(document) → simple truncation
  4. otherwise keep header + as much middle as fits + marker + footer
Simple truncation cuts at ceiling - len(marker) and snaps back to the
last paragraph break when that break lies past 80% of the cut.
Line pass: keep the first limit - 2 lines, then a blank line and the
marker line. Given the ceiling as well, it drops more trailing lines
until the result also fits the character limit.

RULES:
- truncate() returns the document unchanged when it already fits
- Output of truncate() is never longer than the ceiling
- A ceiling shorter than the marker gets a bare hard cut (no marker)
- The footer is dropped in the simple-truncation branch
- truncate_lines() returns exactly line_limit lines when it cuts and
  no ceiling forces more lines out
- truncate_lines(..., ceiling) is never longer than the ceiling
"""

from __future__ import annotations

from typing import Optional

from zerocode.config import MIN_CONTENT_RATIO, PARAGRAPH_SNAP_RATIO, TRUNCATION_MARKER
from zerocode.core.patterns import (
    footer_region_start,
    header_region_length,
    last_paragraph_break,
)


class Truncator:
    """Shrinks documents to a character ceiling or a line limit."""

    def __init__(
        self,
        marker: str = TRUNCATION_MARKER,
        min_content_ratio: float = MIN_CONTENT_RATIO,
        snap_ratio: float = PARAGRAPH_SNAP_RATIO,
    ) -> None:
        self.marker = marker
        self.min_content_ratio = min_content_ratio
        self.snap_ratio = snap_ratio

    @property
    def marker_line(self) -> str:
        return self.marker.strip("\n")

    def truncate(self, document: str, ceiling: int) -> str:
        """Shrink *document* to at most *ceiling* characters."""
        if len(document) <= ceiling:
            return document
        if ceiling <= len(self.marker):
            return document[:ceiling]

        footer_start = footer_region_start(document)
        footer = document[footer_start:]
        available = ceiling - len(self.marker) - len(footer)

        if available < len(document) * self.min_content_ratio:
            return self._simple_truncate(document, ceiling)

        header_length = header_region_length(document)
        main_available = available - header_length
        if main_available <= 0:
            return self._simple_truncate(document, ceiling)

        header = document[:header_length]
        main_end = max(header_length, min(header_length + main_available, footer_start))
        main = self._snap_to_paragraph(document[header_length:main_end], main_available)
        return header + main + self.marker + footer

    def truncate_lines(self, document: str, line_limit: int, ceiling: Optional[int] = None) -> str:
        """Keep the first *line_limit* - 2 lines plus a marker line.

        With a *ceiling*, trailing kept lines are dropped until the result
        fits; a ceiling too small even for the marker gets a hard cut.
        """
        lines = document.split("\n")
        if len(lines) <= line_limit:
            return document

        kept = lines[:max(line_limit - 2, 0)]
        tail = "\n\n" + self.marker_line
        if ceiling is not None:
            length = len("\n".join(kept))
            while kept and length + len(tail) > ceiling:
                length = max(length - len(kept.pop()) - 1, 0)

        result = "\n".join(kept) + tail
        if ceiling is not None and len(result) > ceiling:
            return result[:ceiling]
        return result

    def _simple_truncate(self, document: str, ceiling: int) -> str:
        cut = ceiling - len(self.marker)
        return self._snap_to_paragraph(document[:cut], cut) + self.marker

    def _snap_to_paragraph(self, text: str, span: int) -> str:
        """Cut *text* at its last paragraph break if that break is late enough."""
        boundary = last_paragraph_break(text)
        if boundary > span * self.snap_ratio:
            return text[:boundary]
        return text
