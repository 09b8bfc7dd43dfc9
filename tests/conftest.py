"""Shared test fixtures for the zerocode test suite.

WHY: The assembler, truncator, and generator tests need libraries and
profiles with exactly known sizes so budget arithmetic can be checked
by hand. Building them from synthetic strings keeps the tests
independent of the shipped prompt prose.

HOW: Helper functions build text of an exact length (and therefore an
exact estimate). Fixtures expose a library factory, a profile factory,
and a generator wired to the shipped content.

RULES:
- text_of_cost(n) has estimate exactly n (length 4 * n)
- Synthetic profiles use the key "synthetic" unless told otherwise
- Synthetic extended fragments are keyed "synthetic", examples "sample"
"""

import pytest

from zerocode.core.generator import PromptGenerator
from zerocode.core.library import FragmentLibrary
from zerocode.profiles import ProfileRegistry
from zerocode.profiles.base import DestinationProfile


def text_of_cost(cost, fill="x"):
    """Return a string whose estimate is exactly *cost*."""
    return fill * (cost * 4)


@pytest.fixture
def make_library():
    """Factory: FragmentLibrary with core/extended/examples of given costs."""

    def _make(core_cost, extended_cost=None, examples_cost=None):
        extended = {}
        examples = {}
        if extended_cost is not None:
            extended["synthetic"] = text_of_cost(extended_cost, "e")
        if examples_cost is not None:
            examples["sample"] = text_of_cost(examples_cost, "s")
        return FragmentLibrary(
            core=text_of_cost(core_cost, "c"),
            extended=extended,
            examples=examples,
        )

    return _make


@pytest.fixture
def make_profile():
    """Factory: DestinationProfile with the given ceiling."""

    def _make(ceiling, key="synthetic", **kwargs):
        return DestinationProfile(
            key=key,
            display_name=kwargs.pop("display_name", key),
            ceiling=ceiling,
            **kwargs
        )

    return _make


@pytest.fixture
def generator():
    """Generator with shipped content and default profiles."""
    return PromptGenerator(registry=ProfileRegistry.default())


@pytest.fixture
def make_generator():
    """Factory: generator over shipped content with profile overrides."""

    def _make(overrides=None, project_dir=None):
        return PromptGenerator(
            registry=ProfileRegistry.default(overrides=overrides),
            project_dir=project_dir,
        )

    return _make
