"""Destination profile registry — one profile per supported platform.

WHY: The CLI, the generator, and tests need a single lookup to find the
right limits for a platform name, with a guaranteed answer even for
names nobody registered.

HOW: PROFILES maps destination keys to DestinationProfile instances.
ProfileRegistry wraps a read-only copy of such a mapping and resolves
unknown keys (and the literal "default") to the default profile.

RULES:
- Keys are lowercase platform identifiers used on the command line;
  lookups and overrides strip and lowercase the name first
- resolve() never raises; unknown names map to the default profile
- Registries are immutable; with_overrides() returns a new registry
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from zerocode.config import DEFAULT_DESTINATION
from zerocode.profiles.base import DestinationProfile, FormatStyle

logger = logging.getLogger(__name__)

DEFAULT_KEY_ALIAS = "default"

PROFILES: Dict[str, DestinationProfile] = {
    # Cursor IDE - code generation, full templates
    "cursor": DestinationProfile(
        key="cursor",
        display_name="Cursor",
        ceiling=15000,
        format_style=FormatStyle.MARKDOWN,
        supports_symbols=True,
        transform_kind="cursor",
    ),
    # Claude - detailed, structured explanations
    "claude": DestinationProfile(
        key="claude",
        display_name="Claude",
        ceiling=20000,
        format_style=FormatStyle.STRUCTURED,
        supports_symbols=True,
        transform_kind="claude",
    ),
    # Ollama - local models with limited context
    "ollama": DestinationProfile(
        key="ollama",
        display_name="Ollama",
        ceiling=8000,
        line_limit=300,
        format_style=FormatStyle.PLAIN,
        supports_symbols=False,
        transform_kind="ollama",
    ),
    "copilot": DestinationProfile(
        key="copilot",
        display_name="GitHub Copilot",
        ceiling=12000,
        format_style=FormatStyle.MARKDOWN,
        supports_symbols=True,
        transform_kind="copilot",
    ),
    # Universal - balanced default
    "universal": DestinationProfile(
        key="universal",
        display_name="universal",
        ceiling=12000,
        format_style=FormatStyle.MARKDOWN,
        supports_symbols=True,
        transform_kind="universal",
    ),
}


def _normalize_key(destination: Optional[str]) -> str:
    return (destination or "").strip().lower()


# Keyword heuristics for detect_destination(), checked in order
_DESTINATION_KEYWORDS = [
    ("cursor", ("cursor", "vscode", "ide")),
    ("claude", ("claude", "anthropic")),
    ("ollama", ("ollama", "local", "llama")),
]


class ProfileRegistry:
    """Immutable lookup from destination identifier to profile."""

    def __init__(
        self,
        profiles: Mapping[str, DestinationProfile],
        default_key: str = DEFAULT_DESTINATION,
    ) -> None:
        profiles = {_normalize_key(key): profile for key, profile in profiles.items()}
        default_key = _normalize_key(default_key)
        if default_key not in profiles:
            raise ValueError("Default profile '{}' is not registered.".format(default_key))
        self._profiles = MappingProxyType(profiles)
        self._default_key = default_key

    @classmethod
    def default(cls, overrides: Optional[Mapping[str, Mapping[str, Any]]] = None) -> ProfileRegistry:
        registry = cls(PROFILES)
        if overrides:
            registry = registry.with_overrides(overrides)
        return registry

    @property
    def default_profile(self) -> DestinationProfile:
        return self._profiles[self._default_key]

    def resolve(self, destination: str) -> DestinationProfile:
        """Return the profile for *destination*, or the default profile."""
        key = _normalize_key(destination)
        profile = self._profiles.get(key)
        if profile is None:
            if key != DEFAULT_KEY_ALIAS:
                logger.debug("Unknown destination %r, using %r", destination, self._default_key)
            profile = self.default_profile
        return profile

    def keys(self) -> List[str]:
        return list(self._profiles)

    def __contains__(self, destination: object) -> bool:
        return isinstance(destination, str) and _normalize_key(destination) in self._profiles

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> ProfileRegistry:
        """Return a new registry with *overrides* applied.

        Keys are matched the way resolve() matches them, so "Claude"
        overrides the claude profile. Existing profiles get the given
        fields replaced. Unknown keys register a new profile based on the
        default profile.
        """
        profiles = dict(self._profiles)
        for name, fields in overrides.items():
            key = _normalize_key(name)
            base = profiles.get(key)
            if base is None:
                base = DestinationProfile(
                    key=key,
                    display_name=name.strip() or key,
                    ceiling=self.default_profile.ceiling,
                    transform_kind=self.default_profile.transform_kind,
                )
            profiles[key] = base.with_overrides(fields)
        return ProfileRegistry(profiles, self._default_key)


def supported_destinations() -> List[str]:
    """Return the shipped destination keys in registration order."""
    return list(PROFILES)


def detect_destination(text: str, requested: str = DEFAULT_DESTINATION) -> str:
    """Guess a destination from free text when the caller asked for universal.

    WHY: A prompt that mentions its target tool ("paste this into
    Cursor") is better served by that tool's profile.

    HOW: If *requested* is anything but the default destination it wins.
    Otherwise look for platform keywords in the lowercased text.

    RULES:
    - Explicit non-default requests are never overridden
    - Keyword groups are checked in order: cursor, claude, ollama
    - No keyword match returns the default destination
    """
    if _normalize_key(requested) != DEFAULT_DESTINATION:
        return requested

    lowered = text.lower()
    for destination, keywords in _DESTINATION_KEYWORDS:
        if any(word in lowered for word in keywords):
            return destination
    return DEFAULT_DESTINATION
