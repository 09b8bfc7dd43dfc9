"""Data model for fragments, assembly requests, and assembly results.

WHY: The assembler, transformer, and truncator pass text and bookkeeping
between each other. Typed dataclasses make the contract between the
stages explicit and keep the stages testable with synthetic inputs.

HOW: Fragment is a frozen dataclass (library content never changes after
startup). AssemblyRequest is frozen as well — one per invocation.
AssemblyResult is the mutable record that each stage appends to.
GeneratedPrompt is the outward-facing bundle handed to the CLI.

RULES:
- applied_steps always starts with "core"
- Later step labels appear only if that inclusion actually happened
- warnings are data; nothing in the core logs or raises them
- Complexity and Language are informational pass-through fields
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class FragmentPool(str, enum.Enum):
    """The three pools a fragment can live in."""

    CORE = "core"
    EXTENDED = "extended"
    EXAMPLES = "examples"


class Complexity(str, enum.Enum):
    BASIC = "basic"
    ADVANCED = "advanced"
    EXPERT = "expert"


class Language(str, enum.Enum):
    ENGLISH = "english"
    HUNGARIAN = "hungarian"


# Applied-step labels
STEP_CORE = "core"
STEP_EXTENDED = "extended"
STEP_EXAMPLES = "examples"
STEP_CUSTOM_RULES = "custom_rules"


@dataclass(frozen=True)
class Fragment:
    """An immutable named block of prompt text.

    Attributes:
        pool: Which pool the fragment belongs to.
        key: Destination name (extended pool), category name (examples
             pool), or "core".
        text: The fragment prose, treated as opaque by the core apart
              from headings and paragraph breaks.
    """

    pool: FragmentPool
    key: str
    text: str


@dataclass(frozen=True)
class AssemblyRequest:
    """Inputs to a single prompt assembly.

    WHY: The CLI, the activate/zinit commands, and tests all need to ask
    for a prompt in the same way.

    RULES:
    - destination: free-form; unknown values resolve to the default profile
    - complexity / language: accepted and reported, never alter the text
    - custom_rules: ordered extra directives, one plain text line each
    - category: example category key; None means "detect from the project"
    """

    destination: str = "universal"
    complexity: Complexity = Complexity.BASIC
    language: Language = Language.ENGLISH
    custom_rules: Tuple[str, ...] = ()
    category: Optional[str] = None


@dataclass
class AssemblyResult:
    """The document produced by one request plus what happened to it.

    Attributes:
        document: The prompt text.
        applied_steps: Inclusion labels in order, "core" first.
        warnings: Human-readable notes, e.g. which limit truncated the text.
        transforms: Names of the rewrite steps that ran.
        destination: Key of the profile that was actually used.
    """

    document: str
    applied_steps: List[str] = field(default_factory=lambda: [STEP_CORE])
    warnings: List[str] = field(default_factory=list)
    transforms: List[str] = field(default_factory=list)
    destination: str = ""


@dataclass
class GeneratedPrompt:
    """Outward-facing bundle returned by generate_prompt()."""

    system_prompt: str
    instructions: str
    examples: List[str]
    platform: str
    applied_steps: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
