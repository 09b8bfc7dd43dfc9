"""Named structural matchers for prompt documents.

WHY: The transformer and truncator treat prompt text as opaque except for
a few structural landmarks — the title block, the "Core Principles"
header region, the "Usage Instructions" footer. Naming each landmark as
a function with a precise contract lets the rewrite and truncation code
be tested against synthetic documents instead of the shipped prose.

HOW: Each matcher returns the length (or end offset) of its region, with
0 meaning "not found". Regexes are compiled once at import time.

RULES:
- title_block_end: "# " at offset 0, then the shortest run up to the
  first blank line, then the shortest run up to the next blank line.
  Returns the offset just past that second blank line, or 0.
- header_region_length: "# " title line, blank line, one single-line
  paragraph, blank line, a "## Core Principles" heading, then everything
  up to and including the first following blank line. Returns 0 if any
  piece is missing.
- footer_region_start: the earliest "\\n\\n## Usage Instructions" in the
  document; the footer runs from there to the end. Returns len(text)
  when absent so text[start:] is always the (possibly empty) footer.
- last_paragraph_break: offset of the last "\\n\\n" in text, or -1.
"""

from __future__ import annotations

import re

# "." is dot-all here: the title and first paragraph may span lines
_TITLE_BLOCK_RE = re.compile(r"# .*?\n\n.*?\n\n", re.DOTALL)

# "." is NOT dot-all here: title and intro paragraph are single lines
_HEADER_REGION_RE = re.compile(r"# .*?\n\n.*?\n\n## Core Principles[\s\S]*?\n\n")

_FOOTER_RE = re.compile(r"\n\n## Usage Instructions[\s\S]*$")

PARAGRAPH_BREAK = "\n\n"


def title_block_end(text: str) -> int:
    match = _TITLE_BLOCK_RE.match(text)
    return match.end() if match else 0


def header_region_length(text: str) -> int:
    match = _HEADER_REGION_RE.match(text)
    return match.end() if match else 0


def footer_region_start(text: str) -> int:
    match = _FOOTER_RE.search(text)
    return match.start() if match else len(text)


def last_paragraph_break(text: str) -> int:
    return text.rfind(PARAGRAPH_BREAK)
