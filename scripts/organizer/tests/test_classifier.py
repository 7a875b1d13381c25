"""Tests for token classification."""

import pytest

from scripts.organizer.classifier import TokenClassification, classify, explain
from scripts.organizer.groups import TIER_BASE, TIER_RESPONSIVE, TIER_STATE, build_groups


class TestClassifyBaseGroups:
    """Tests for tokens that land in base groups."""

    @pytest.mark.parametrize("token,label", [
        ("flex", "Layout"),
        ("hidden", "Layout"),
        ("relative", "Position"),
        ("inset-x-0", "Coordinates"),
        ("z-10", "Coordinates"),
        ("overflow-hidden", "Display"),
        ("flex-row", "Flexbox"),
        ("flex-1", "Flexbox"),
        ("grid-cols-3", "Grid"),
        ("gap-4", "Gap"),
        ("items-center", "Alignment"),
        ("justify-between", "Alignment"),
        ("w-full", "Sizing"),
        ("min-h-[40px]", "Sizing"),
        ("mt-4", "Spacing"),
        ("px-4", "Spacing"),
        ("text-sm", "Typography"),
        ("font-bold", "Typography"),
        ("uppercase", "Text Style"),
        ("bg-white/50", "Background"),
        ("border", "Border"),
        ("ring-2", "Border"),
        ("rounded-lg", "Border Radius"),
        ("opacity-50", "Effects"),
        ("blur-sm", "Filters"),
        ("duration-300", "Transitions"),
        ("scale-105", "Transform"),
        ("cursor-pointer", "Interactivity"),
        ("fill-current", "SVG"),
        ("sr-only", "Accessibility"),
    ])
    def test_base_group(self, token, label):
        """Each base group claims its typical utilities."""
        assert classify(token) == label


class TestClassifyVariants:
    """Tests for variant-qualified tokens."""

    def test_exact_suffix_wins_over_variant_table(self):
        """hover:flex exact-matches Layout before the Hover group is scanned."""
        assert classify("hover:flex") == "Layout"

    def test_prefix_inside_variant_wins_over_variant_table(self):
        """Base prefix patterns match anywhere, so hover:bg-* is Background."""
        assert classify("hover:bg-blue-500") == "Background"
        assert classify("sm:pb-2") == "Spacing"

    def test_unknown_utility_under_hover(self):
        """Only tokens no base group claims fall through to Hover."""
        assert classify("hover:custom") == "Hover"

    def test_state_order(self):
        """Earlier state groups win over later ones."""
        assert classify("peer-focus:custom") == "Focus"
        assert classify("peer-invalid:custom") == "Peer"

    @pytest.mark.parametrize("token,label", [
        ("before:custom", "Before/After"),
        ("placeholder:custom", "Placeholder"),
        ("selection:custom", "Selection"),
        ("odd:custom", "First/Last"),
        ("sm:custom", "Responsive"),
        ("2xl:custom", "Responsive"),
        ("dark:custom", "Dark Mode"),
    ])
    def test_variant_tables(self, token, label):
        assert classify(token) == label

    def test_dark_mode_utility_classified_by_utility(self):
        assert classify("dark:bg-gray-800") == "Background"


class TestPrecedenceTieBreaks:
    """Tests for tokens that satisfy several groups."""

    def test_earlier_group_wins(self):
        """Spacing is scanned before Border."""
        assert classify("outline-mx-2") == "Spacing"

    def test_containment_inside_words(self):
        """Containment matching can claim tokens for surprising groups."""
        assert classify("custom-class") == "Spacing"  # contains "m-"
        assert classify("shadow-md") == "Sizing"  # contains "w-"
        assert classify("group-hover:custom") == "Spacing"  # contains "p-"

    def test_custom_table_order_changes_outcome(self):
        """Reordering groups changes classification of ambiguous tokens."""
        border_first = build_groups([("Border", ["outline-"]), ("Spacing", ["mx-"])])
        spacing_first = build_groups([("Spacing", ["mx-"]), ("Border", ["outline-"])])
        assert classify("outline-mx-2", border_first) == "Border"
        assert classify("outline-mx-2", spacing_first) == "Spacing"


class TestUnclassified:
    """Tests for tokens no group matches."""

    @pytest.mark.parametrize("token", ["card", "unknown-token", "another-class", "border-gray-200"])
    def test_returns_none(self, token):
        assert classify(token) is None


class TestExplain:
    """Tests for classification details."""

    def test_reports_winning_pattern(self):
        result = explain("max-w-lg")
        assert result == TokenClassification(
            token="max-w-lg", label="Sizing", matched_pattern="w-", tier=TIER_BASE
        )
        assert result.classified

    def test_reports_variant_tier(self):
        assert explain("hover:custom").tier == TIER_STATE
        assert explain("lg:custom").tier == TIER_RESPONSIVE

    def test_unclassified(self):
        result = explain("card")
        assert result.label is None
        assert result.matched_pattern is None
        assert not result.classified
