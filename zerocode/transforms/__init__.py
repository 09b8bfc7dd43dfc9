"""Platform transform registry — pluggable rewrite pipelines.

WHY: The generator looks up a profile's transform_kind here to find the
rewrite pipeline for a platform. A central dict makes it trivial to add
a platform: create the transform class, import it here, add one line.

HOW: TRANSFORMS maps transform_kind strings to BaseTransform *classes*.
Callers instantiate as needed; unknown kinds fall back to
DEFAULT_TRANSFORM_KIND.

RULES:
- Keys match DestinationProfile.transform_kind values
- Every transform listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from zerocode.transforms.claude import ClaudeTransform
from zerocode.transforms.copilot import CopilotTransform
from zerocode.transforms.cursor import CursorTransform
from zerocode.transforms.ollama import OllamaTransform
from zerocode.transforms.universal import UniversalTransform

if TYPE_CHECKING:
    from zerocode.transforms.base import BaseTransform

DEFAULT_TRANSFORM_KIND = "universal"

TRANSFORMS: Dict[str, Type[BaseTransform]] = {
    "cursor": CursorTransform,
    "claude": ClaudeTransform,
    "ollama": OllamaTransform,
    "copilot": CopilotTransform,
    "universal": UniversalTransform,
}

