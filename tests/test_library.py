"""Unit tests for the fragment library.

WHY: Absence of a fragment must degrade to "omit it", never an error,
and the extended-rules fallback decides what every unknown platform
receives.

HOW: Libraries are built from small literal strings; the shipped
library is checked for its documented keys.
"""

import pytest

from zerocode import content
from zerocode.core.library import FragmentLibrary
from zerocode.core.models import FragmentPool


class TestCoreFragment:

    def test_core_always_present(self):
        library = FragmentLibrary(core="# Core")
        fragment = library.core_fragment()
        assert fragment.text == "# Core"
        assert fragment.pool == FragmentPool.CORE

    def test_empty_core_rejected(self):
        with pytest.raises(ValueError):
            FragmentLibrary(core="")


class TestExtendedFragment:

    def test_direct_lookup(self):
        library = FragmentLibrary(core="c", extended={"cursor": "C", "claude": "L"})
        assert library.extended_fragment("claude").text == "L"

    def test_falls_back_to_cursor(self):
        library = FragmentLibrary(core="c", extended={"cursor": "C"})
        fragment = library.extended_fragment("unknown")
        assert fragment.text == "C"
        assert fragment.key == "cursor"

    def test_custom_fallback_destination(self):
        library = FragmentLibrary(
            core="c", extended={"copilot": "P"}, fallback_destination="copilot",
        )
        assert library.extended_fragment("anything").text == "P"

    def test_none_when_fallback_missing(self):
        library = FragmentLibrary(core="c", extended={"claude": "L"})
        assert library.extended_fragment("unknown") is None

    def test_empty_texts_are_dropped(self):
        library = FragmentLibrary(core="c", extended={"claude": "", "cursor": "C"})
        assert library.extended_fragment("claude").text == "C"


class TestExampleFragment:

    def test_direct_lookup(self):
        library = FragmentLibrary(core="c", examples={"react": "R"})
        fragment = library.example_fragment("react")
        assert fragment.text == "R"
        assert fragment.pool == FragmentPool.EXAMPLES

    def test_no_fallback(self):
        library = FragmentLibrary(core="c", examples={"react": "R"})
        assert library.example_fragment("vue") is None

    def test_none_category(self):
        library = FragmentLibrary(core="c", examples={"react": "R"})
        assert library.example_fragment(None) is None


class TestShippedLibrary:

    def test_default_library_keys(self):
        library = FragmentLibrary.default()
        assert library.core_fragment().text == content.CORE_PROMPT
        assert library.extended_keys == ["claude", "copilot", "cursor"]
        assert library.example_categories == ["node", "python", "react"]

    def test_core_prompt_has_title_block(self):
        assert content.CORE_PROMPT.startswith("# ")
        assert "\n\n" in content.CORE_PROMPT
