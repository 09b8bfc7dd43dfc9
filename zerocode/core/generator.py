"""Prompt generator — wires assembly, transformation, and truncation.

WHY: Callers (the CLI commands, tests, library users) want one call that
turns a request into a finished prompt. The stages themselves stay
independent; this module only resolves the profile, picks the example
category, and runs the stages in order.

HOW: PromptGenerator receives its library, profile registry, and
transform registry by injection (defaults are built from the shipped
content). generate() runs:
  resolve profile → assemble → append custom rules → transform →
  character truncation → line truncation
and records every truncation as a warning on the result.

RULES:
- Unknown destinations behave exactly like the default destination
- The example category comes from the request, or from project
  detection when the request leaves it as None
- Custom rules are appended after the examples, labelled "custom_rules"
- Warnings name the limit that triggered truncation; they are never logged
- The line pass also honours the character ceiling, so the final
  document never exceeds it
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Type

from zerocode import content
from zerocode.core.assembler import Assembler
from zerocode.core.library import FragmentLibrary
from zerocode.core.models import (
    STEP_CUSTOM_RULES,
    AssemblyRequest,
    AssemblyResult,
    GeneratedPrompt,
)
from zerocode.core.patterns import PARAGRAPH_BREAK
from zerocode.core.truncator import Truncator
from zerocode.profiles import ProfileRegistry
from zerocode.profiles.base import DestinationProfile
from zerocode.project import detect_project_type
from zerocode.transforms import DEFAULT_TRANSFORM_KIND, TRANSFORMS
from zerocode.transforms.base import BaseTransform

logger = logging.getLogger(__name__)

CUSTOM_RULES_HEADING = "## Project Context"


class PromptGenerator:
    """Builds platform-tuned prompts from a fragment library."""

    def __init__(
        self,
        library: Optional[FragmentLibrary] = None,
        registry: Optional[ProfileRegistry] = None,
        transforms: Optional[Mapping[str, Type[BaseTransform]]] = None,
        assembler: Optional[Assembler] = None,
        truncator: Optional[Truncator] = None,
        project_dir: Optional[Path] = None,
    ) -> None:
        self.library = library if library is not None else FragmentLibrary.default()
        self.registry = registry if registry is not None else ProfileRegistry.default()
        self.transforms = transforms if transforms is not None else TRANSFORMS
        self.assembler = assembler if assembler is not None else Assembler(self.library)
        self.truncator = truncator if truncator is not None else Truncator()
        self.project_dir = project_dir

    def assemble(self, request: AssemblyRequest) -> AssemblyResult:
        """Return the pre-transform assembly for *request*."""
        profile = self.registry.resolve(request.destination)
        category = request.category
        if category is None:
            category = detect_project_type(self.project_dir or Path.cwd())

        result = self.assembler.assemble(profile, category)

        if request.custom_rules:
            rules = "\n".join("- {}".format(rule) for rule in request.custom_rules)
            result.document += "{}{}\n\n{}".format(PARAGRAPH_BREAK, CUSTOM_RULES_HEADING, rules)
            result.applied_steps.append(STEP_CUSTOM_RULES)

        logger.debug(
            "Assembled %d chars for %s (category=%s, steps=%s, complexity=%s, language=%s)",
            len(result.document),
            profile.key,
            category,
            result.applied_steps,
            request.complexity.value,
            request.language.value,
        )
        return result

    def generate(self, request: AssemblyRequest) -> AssemblyResult:
        """Run the full pipeline and return the finished result."""
        profile = self.registry.resolve(request.destination)
        result = self.assemble(request)

        pipeline = self._transform_for(profile).build_pipeline(profile)
        result.document, result.transforms = pipeline.run(result.document)
        logger.debug("Applied transforms for %s: %s", profile.key, result.transforms)

        self._enforce_limits(result, profile)
        return result

    def generate_prompt(self, request: AssemblyRequest) -> GeneratedPrompt:
        result = self.generate(request)
        return GeneratedPrompt(
            system_prompt=result.document,
            instructions=content.INSTRUCTIONS,
            examples=list(content.EXAMPLE_SUMMARIES),
            platform=request.destination,
            applied_steps=list(result.applied_steps),
            warnings=list(result.warnings),
        )

    def _transform_for(self, profile: DestinationProfile) -> BaseTransform:
        transform_cls = self.transforms.get(profile.transform_kind)
        if transform_cls is None:
            transform_cls = TRANSFORMS[DEFAULT_TRANSFORM_KIND]
        return transform_cls()

    def _enforce_limits(self, result: AssemblyResult, profile: DestinationProfile) -> None:
        if len(result.document) > profile.ceiling:
            result.document = self.truncator.truncate(result.document, profile.ceiling)
            result.warnings.append(
                "Prompt truncated to {} characters for {} compatibility".format(
                    profile.ceiling, profile.display_name
                )
            )

        if profile.line_limit is not None:
            line_count = result.document.count("\n") + 1
            if line_count > profile.line_limit:
                result.document = self.truncator.truncate_lines(
                    result.document, profile.line_limit, profile.ceiling
                )
                result.warnings.append(
                    "Prompt truncated to {} lines for {} compatibility".format(
                        profile.line_limit, profile.display_name
                    )
                )


def generate_prompt(request: Optional[AssemblyRequest] = None) -> GeneratedPrompt:
    """Generate a prompt with the shipped content and default profiles."""
    return PromptGenerator().generate_prompt(request or AssemblyRequest())
