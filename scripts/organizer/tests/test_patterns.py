"""Tests for pattern matching utilities."""

from scripts.organizer.groups import PatternSpec
from scripts.organizer.patterns import (
    first_matching_pattern,
    match_exact_pattern,
    match_pattern,
    match_prefix_pattern,
    variant_suffix,
)


class TestVariantSuffix:
    """Tests for splitting off variant prefixes."""

    def test_plain_token(self):
        assert variant_suffix("flex") == "flex"

    def test_single_variant(self):
        assert variant_suffix("hover:flex") == "flex"

    def test_stacked_variants_use_last_separator(self):
        assert variant_suffix("md:hover:flex") == "flex"


class TestPrefixPatternMatching:
    """Tests for containment-based prefix matching."""

    def test_match_at_start(self):
        assert match_prefix_pattern("mt-4", "mt-")

    def test_match_after_variant(self):
        """Prefix patterns are not anchored to the start of the token."""
        assert match_prefix_pattern("sm:pb-2", "pb-")

    def test_match_inside_word(self):
        """Containment also fires inside other words."""
        assert match_prefix_pattern("custom-class", "m-")

    def test_no_match(self):
        assert not match_prefix_pattern("flex", "mt-")


class TestExactPatternMatching:
    """Tests for exact matching."""

    def test_equal_token(self):
        assert match_exact_pattern("flex", "flex")

    def test_variant_suffix_equal(self):
        assert match_exact_pattern("hover:flex", "flex")

    def test_longer_token_does_not_match(self):
        assert not match_exact_pattern("flex-row", "flex")
        assert not match_exact_pattern("border-gray-200", "border")

    def test_variant_prefix_is_not_suffix(self):
        assert not match_exact_pattern("flex:hover", "flex")


class TestMatchPattern:
    """Tests for dispatch on pattern kind."""

    def test_prefix_dispatch(self):
        assert match_pattern("inset-x-0", PatternSpec("inset-"))

    def test_exact_dispatch(self):
        assert match_pattern("lg:block", PatternSpec("block"))
        assert not match_pattern("blocky", PatternSpec("block"))

    def test_first_matching_pattern_keeps_order(self):
        """The earliest matching pattern is reported."""
        patterns = [PatternSpec("w-"), PatternSpec("max-w-")]
        assert first_matching_pattern("max-w-lg", patterns) == PatternSpec("w-")

    def test_first_matching_pattern_none(self):
        assert first_matching_pattern("card", [PatternSpec("w-")]) is None
