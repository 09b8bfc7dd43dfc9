"""GitHub Copilot transform — inline-completion focused preamble.

WHY: Copilot completes code from the surrounding comments and names, so
the prompt reminds the model to write intent-revealing comments first.
The rest of the document is left alone.
"""

from __future__ import annotations

from zerocode.transforms.base import BaseTransform

COPILOT_PREAMBLE = """
## GitHub Copilot Optimization

You are optimized for inline code completion. Focus on:
- Descriptive function and variable names
- A one-line intent comment before each function
- Small functions that are easy to complete
- Consistent naming across files

"""


class CopilotTransform(BaseTransform):

    @property
    def name(self) -> str:
        return "GitHub Copilot"

    @property
    def preamble(self) -> str:
        return COPILOT_PREAMBLE
