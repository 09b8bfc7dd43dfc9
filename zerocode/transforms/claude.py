"""Claude transform — structured reasoning preamble, emphasis, appendix.

WHY: Claude has the largest ceiling and does best with explicit
reasoning structure. The prompt asks for multi-perspective analysis at
every OBJECTIVE marker and ends with fully worked response examples.

HOW: Preamble injection, then the emphasis step (annotate every
"🎯 OBJECTIVE:" marker, or "### 🎯 OBJECTIVE" headings when there are
no inline markers), then the appendix step.

RULES:
- The appendix is appended unconditionally; it is not budgeted by the
  assembler, so the truncator may later shorten the document
- The emphasis annotation is italic markdown on its own line
"""

from __future__ import annotations

from typing import List

from zerocode.transforms.base import BaseTransform
from zerocode.transforms.steps import TransformStep, appendix_step, emphasis_step

CLAUDE_PREAMBLE = """
## Claude Optimization

You are optimized for Claude's structured reasoning capabilities. Emphasize:
- Detailed step-by-step explanations
- Multiple perspectives on complex problems
- Comprehensive analysis with pros/cons
- Clear reasoning chains
- Thorough documentation of thought processes

"""

CLAUDE_ANNOTATION = "*Claude users: Provide comprehensive analysis with multiple perspectives*"

CLAUDE_APPENDIX = """

## Detailed Examples for Claude

### Example 1: Code Review Request
**Request:** "Review this React component"
**Response Structure:**
🎯 **OBJECTIVE:** Analyze component for Hickey/Linus/Zeus principles
🔧 **IMPLEMENTATION:** Specific improvements with code examples
⚠️ **CONSIDERATIONS:** Potential issues and trade-offs
📈 **VALIDATION:** Testing strategies and success metrics

### Example 2: Architecture Decision
**Request:** "Should I use Redux or Context API?"
**Response Structure:**
🎯 **OBJECTIVE:** Choose state management based on real needs (Linus)
🔧 **IMPLEMENTATION:** Simple solution first (Hickey), structured comparison (Zeus)
⚠️ **CONSIDERATIONS:** Complexity trade-offs and team familiarity
📈 **VALIDATION:** Measurable criteria for success
"""


class ClaudeTransform(BaseTransform):
    """Transform for the Claude profile."""

    @property
    def name(self) -> str:
        return "Claude"

    @property
    def preamble(self) -> str:
        return CLAUDE_PREAMBLE

    def platform_steps(self) -> List[TransformStep]:
        return [
            emphasis_step(CLAUDE_ANNOTATION),
            appendix_step(CLAUDE_APPENDIX),
        ]
