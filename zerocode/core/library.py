"""Fragment library: the core rules, per-platform extensions, and examples.

WHY: The assembler should not know where prompt prose comes from. Tests
build a library from a handful of synthetic strings; the CLI builds one
from the shipped content module. Both go through the same lookups.

HOW: FragmentLibrary holds three read-only pools. Lookups return a
Fragment or None; absence is never an error.

RULES:
- The core fragment is mandatory and must be non-empty
- extended_fragment() falls back to the fallback destination's fragment
- example_fragment() has no fallback — unknown categories yield None
- The library is immutable after construction (pools are copied)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from zerocode import content
from zerocode.config import FALLBACK_EXTENDED_DESTINATION
from zerocode.core.models import Fragment, FragmentPool


class FragmentLibrary:
    """Read-only store of named prompt fragments."""

    def __init__(
        self,
        core: str,
        extended: Optional[Mapping[str, str]] = None,
        examples: Optional[Mapping[str, str]] = None,
        fallback_destination: str = FALLBACK_EXTENDED_DESTINATION,
    ) -> None:
        if not core:
            raise ValueError("The core fragment must not be empty.")
        self._core = Fragment(FragmentPool.CORE, "core", core)
        self._extended = MappingProxyType({
            key: Fragment(FragmentPool.EXTENDED, key, text)
            for key, text in (extended or {}).items()
            if text
        })
        self._examples = MappingProxyType({
            key: Fragment(FragmentPool.EXAMPLES, key, text)
            for key, text in (examples or {}).items()
            if text
        })
        self._fallback_destination = fallback_destination

    @classmethod
    def default(cls) -> FragmentLibrary:
        """Build the library from the shipped ZeroCode content."""
        return cls(
            core=content.CORE_PROMPT,
            extended=content.EXTENDED_PROMPTS,
            examples=content.EXAMPLE_PROMPTS,
        )

    def core_fragment(self) -> Fragment:
        return self._core

    def extended_fragment(self, destination: str) -> Optional[Fragment]:
        """Return the extended rules for *destination*.

        Falls back to the fallback destination's rules, then to None.
        """
        fragment = self._extended.get(destination)
        if fragment is None:
            fragment = self._extended.get(self._fallback_destination)
        return fragment

    def example_fragment(self, category: Optional[str]) -> Optional[Fragment]:
        if category is None:
            return None
        return self._examples.get(category)

    @property
    def extended_keys(self) -> list:
        return sorted(self._extended)

    @property
    def example_categories(self) -> list:
        return sorted(self._examples)
