"""Budget-constrained assembly of the prompt from library fragments.

WHY: A platform's ceiling has to cover more than the fragments
themselves — the transformer later injects preambles, guidance, and
appendices that the assembler cannot see. Greedy inclusion against
fractional thresholds reserves that headroom while still giving roomy
platforms the full prompt.

HOW: Start from the core fragment, then try the extended rules and the
examples in that order. Each optional block is included only if the
running (cumulative) estimated cost plus its own cost stays strictly
below ratio * ceiling.

RULES:
- Core is always included and always labelled first
- Extended is checked against EXTENDED_BUDGET_RATIO (0.7)
- Examples are checked against EXAMPLES_BUDGET_RATIO (0.9)
- Each block is tried exactly once; a rejected block is never retried
  and never replaced by something smaller
- Order matters: extended is charged before examples is checked
- Blocks are joined with one blank line
"""

from __future__ import annotations

from typing import Optional

from zerocode.config import EXAMPLES_BUDGET_RATIO, EXTENDED_BUDGET_RATIO
from zerocode.core.estimator import estimate
from zerocode.core.library import FragmentLibrary
from zerocode.core.models import (
    STEP_EXAMPLES,
    STEP_EXTENDED,
    AssemblyResult,
    Fragment,
)
from zerocode.core.patterns import PARAGRAPH_BREAK
from zerocode.profiles.base import DestinationProfile


class Assembler:
    """Greedy fragment assembler for one library."""

    def __init__(
        self,
        library: FragmentLibrary,
        extended_ratio: float = EXTENDED_BUDGET_RATIO,
        examples_ratio: float = EXAMPLES_BUDGET_RATIO,
    ) -> None:
        self._library = library
        self.extended_ratio = extended_ratio
        self.examples_ratio = examples_ratio

    def assemble(
        self,
        profile: DestinationProfile,
        category: Optional[str] = None,
    ) -> AssemblyResult:
        """Compose the pre-transform document for *profile*.

        Args:
            profile: Resolved destination profile; its key selects the
                     extended rules and its ceiling sets the budget.
            category: Example category key, or None for no examples.

        Returns:
            AssemblyResult with the document and inclusion labels. The
            warnings list is empty; later stages append to it.
        """
        core = self._library.core_fragment()
        result = AssemblyResult(document=core.text, destination=profile.key)
        cost = estimate(core.text)

        extended = self._library.extended_fragment(profile.key)
        if self._fits(extended, cost, self.extended_ratio * profile.ceiling):
            result.document += PARAGRAPH_BREAK + extended.text
            result.applied_steps.append(STEP_EXTENDED)
            cost += estimate(extended.text)

        examples = self._library.example_fragment(category)
        if self._fits(examples, cost, self.examples_ratio * profile.ceiling):
            result.document += PARAGRAPH_BREAK + examples.text
            result.applied_steps.append(STEP_EXAMPLES)
            cost += estimate(examples.text)

        return result

    @staticmethod
    def _fits(fragment: Optional[Fragment], cost: int, threshold: float) -> bool:
        if fragment is None or not fragment.text:
            return False
        return cost + estimate(fragment.text) < threshold
