"""Universal (default) transform — generic compatibility preamble only.

WHY: Unknown platforms and the explicit "universal" platform get a
balanced prompt that any assistant can read. Nothing beyond a short
preamble is changed.
"""

from __future__ import annotations

from zerocode.transforms.base import BaseTransform

UNIVERSAL_PREAMBLE = """
## Universal Compatibility

This prompt is optimized for compatibility across multiple AI platforms:
- Works with Cursor, Claude, Ollama, and other AI tools
- Balanced approach between detail and conciseness
- Standard markdown formatting
- Clear structure for easy parsing

"""


class UniversalTransform(BaseTransform):

    @property
    def name(self) -> str:
        return "Universal"

    @property
    def preamble(self) -> str:
        return UNIVERSAL_PREAMBLE
