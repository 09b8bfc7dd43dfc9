"""Pure text -> text rewrite steps used by the platform transforms.

WHY: Each platform adaptation is a handful of small, independent
rewrites. Keeping each rewrite a pure function makes it trivial to unit
test and to switch on or off per platform.

HOW: Plain functions over strings. Steps that need a parameter (a
preamble, an appendix) are built with a small factory returning a
TransformStep.

RULES:
- No step ever drops content it does not explicitly rewrite
- inject_preamble prepends when no title block is found
- remove_symbols maps known glyphs to bracketed words before stripping
  the remaining decorative code points
- simplify_structure demotes headings of level 3 and deeper by one level
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict

from zerocode.core.patterns import title_block_end


@dataclass(frozen=True)
class TransformStep:
    """One named rewrite in a transform pipeline."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


# ---------------------------------------------------------------------------
# Preamble injection
# ---------------------------------------------------------------------------


def inject_preamble(text: str, preamble: str) -> str:
    """Insert *preamble* right after the title block, or prepend it."""
    end = title_block_end(text)
    if end:
        return text[:end] + preamble + text[end:]
    return preamble + text


def preamble_step(preamble: str) -> TransformStep:
    return TransformStep("preamble", lambda text: inject_preamble(text, preamble))


# ---------------------------------------------------------------------------
# Section relabeling
# ---------------------------------------------------------------------------

IMPLEMENTATION_HEADING = "## Implementation Guidelines"


def relabel_sections(text: str, guidance: str) -> str:
    """Put *guidance* directly before every Implementation Guidelines heading."""
    return text.replace(IMPLEMENTATION_HEADING, guidance + IMPLEMENTATION_HEADING)


def relabel_step(guidance: str) -> TransformStep:
    return TransformStep("relabel_sections", lambda text: relabel_sections(text, guidance))


# ---------------------------------------------------------------------------
# Structural emphasis
# ---------------------------------------------------------------------------

OBJECTIVE_MARKER = "🎯 OBJECTIVE:"
OBJECTIVE_HEADING = "### 🎯 OBJECTIVE"


def emphasize_markers(text: str, annotation: str) -> str:
    """Annotate every OBJECTIVE marker; fall back to OBJECTIVE headings.

    The inline marker form gets the annotation on its own line after it.
    Only if no inline marker exists are "### 🎯 OBJECTIVE" headings tried.
    """
    if OBJECTIVE_MARKER in text:
        return text.replace(OBJECTIVE_MARKER, "{}\n{}\n".format(OBJECTIVE_MARKER, annotation))
    return text.replace(OBJECTIVE_HEADING, "{}\n{}".format(OBJECTIVE_HEADING, annotation))


def emphasis_step(annotation: str) -> TransformStep:
    return TransformStep("emphasize_markers", lambda text: emphasize_markers(text, annotation))


# ---------------------------------------------------------------------------
# Supplemental appendix
# ---------------------------------------------------------------------------


def appendix_step(appendix: str) -> TransformStep:
    return TransformStep("append_examples", lambda text: text + appendix)


# ---------------------------------------------------------------------------
# Symbol removal
# ---------------------------------------------------------------------------

SYMBOL_REPLACEMENTS: Dict[str, str] = {
    "🎯": "[OBJECTIVE]",
    "🔧": "[IMPLEMENTATION]",
    "⚠️": "[CONSIDERATIONS]",
    "📈": "[VALIDATION]",
}

_DECORATIVE_SYMBOLS_RE = re.compile(
    "[\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"   # pictographs
    "\U0001F680-\U0001F6FF"   # transport and map
    "\U0001F1E0-\U0001F1FF"   # flags
    "\u2600-\u26FF"           # miscellaneous symbols
    "\u2700-\u27BF]"          # dingbats
)


def remove_symbols(text: str) -> str:
    for glyph, replacement in SYMBOL_REPLACEMENTS.items():
        text = text.replace(glyph, replacement)
    return _DECORATIVE_SYMBOLS_RE.sub("", text)


# ---------------------------------------------------------------------------
# Structural simplification
# ---------------------------------------------------------------------------

_DEEP_HEADING_RE = re.compile(r"^#(##+) ", re.MULTILINE)
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_CHECKBOX = "- [ ]"


def simplify_structure(text: str) -> str:
    text = _DEEP_HEADING_RE.sub(r"\1 ", text)
    text = _BOLD_RE.sub(r"\1:", text)
    return text.replace(_CHECKBOX, "-")


REMOVE_SYMBOLS = TransformStep("remove_symbols", remove_symbols)
SIMPLIFY_STRUCTURE = TransformStep("simplify_structure", simplify_structure)
