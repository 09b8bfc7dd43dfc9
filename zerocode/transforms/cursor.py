"""Cursor IDE transform — code-generation preamble and section guidance.

WHY: Cursor users paste the prompt into an IDE where the model writes
files directly. The prompt should push for complete, runnable code, and
any "Implementation Guidelines" section gets IDE-specific guidance in
front of it.

HOW: Preamble injection plus the relabel step. The original
"## Implementation Guidelines" section is kept as-is; the guidance block
is inserted immediately before it.

RULES:
- Every "## Implementation Guidelines" heading gets its own guidance block
- Documents without that heading only receive the preamble
"""

from __future__ import annotations

from typing import List

from zerocode.transforms.base import BaseTransform
from zerocode.transforms.steps import TransformStep, relabel_step

CURSOR_PREAMBLE = """
## Cursor IDE Optimization

You are specifically optimized for code generation in Cursor IDE. Focus on:
- Providing complete, runnable code examples
- Using TypeScript when possible
- Including proper imports and exports
- Suggesting file structures and organization
- Optimizing for developer productivity

"""

CURSOR_GUIDANCE = """## Code Implementation Guidelines

**For Cursor IDE users:**
- Always provide complete, runnable code
- Include proper TypeScript types
- Suggest file organization
- Consider IDE integration

"""


class CursorTransform(BaseTransform):
    """Transform for the Cursor IDE profile."""

    @property
    def name(self) -> str:
        return "Cursor IDE"

    @property
    def preamble(self) -> str:
        return CURSOR_PREAMBLE

    def platform_steps(self) -> List[TransformStep]:
        return [relabel_step(CURSOR_GUIDANCE)]
