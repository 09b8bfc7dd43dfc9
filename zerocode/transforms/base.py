"""Abstract base transform and the pipeline it builds.

WHY: Every platform rewrites the assembled prompt differently, but the
generator, the CLI, and tests should be able to run any of them the same
way. The base class fixes the order of the rewrite stages so platform
modules only declare what is special about them.

HOW: BaseTransform subclasses provide a ``name``, a ``preamble``, and the
platform-specific middle steps (relabel, emphasis, appendix).
build_pipeline() wraps them with the profile-driven steps: symbol
removal when the profile has supports_symbols=False, structural
simplification when its format style is plain.

RULES:
- Fixed order: preamble, platform steps, remove_symbols, simplify_structure
- The preamble step always runs
- Steps are pure; TransformPipeline.run never mutates its input

To add a new platform transform:
1. Create a new file in transforms/
2. Subclass BaseTransform and implement name and preamble
3. Override platform_steps() if it needs more than a preamble
4. Register it in TRANSFORMS in transforms/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from zerocode.profiles.base import DestinationProfile, FormatStyle
from zerocode.transforms.steps import (
    REMOVE_SYMBOLS,
    SIMPLIFY_STRUCTURE,
    TransformStep,
    preamble_step,
)


class TransformPipeline:
    """An ordered list of rewrite steps."""

    def __init__(self, steps: Sequence[TransformStep]) -> None:
        self.steps: Tuple[TransformStep, ...] = tuple(steps)

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self.steps]

    def run(self, text: str) -> Tuple[str, List[str]]:
        """Apply every step in order and return the text plus step names."""
        applied: List[str] = []
        for step in self.steps:
            text = step(text)
            applied.append(step.name)
        return text, applied


class BaseTransform(ABC):
    """Abstract base for all platform transforms."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable transform name, e.g. 'Cursor IDE'."""

    @property
    @abstractmethod
    def preamble(self) -> str:
        """Block inserted after the prompt's title and first paragraph."""

    def platform_steps(self) -> List[TransformStep]:
        return []

    def build_pipeline(self, profile: DestinationProfile) -> TransformPipeline:
        steps = [preamble_step(self.preamble)]
        steps.extend(self.platform_steps())
        if not profile.supports_symbols:
            steps.append(REMOVE_SYMBOLS)
        if profile.format_style == FormatStyle.PLAIN:
            steps.append(SIMPLIFY_STRUCTURE)
        return TransformPipeline(steps)
