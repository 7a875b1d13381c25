"""Group table: the ordered catalog of utility class groups.

The order of ``DEFAULT_GROUPS`` is the precedence order. It decides which
group wins when a token satisfies several patterns, and the order in which
groups are emitted by every renderer. Do not reorder casually.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

OTHER_LABEL = "Other"

TIER_BASE = "base"
TIER_STATE = "state"
TIER_PSEUDO_ELEMENT = "pseudo_element"
TIER_RESPONSIVE = "responsive"
TIER_DARK_MODE = "dark_mode"

TIERS = (TIER_BASE, TIER_STATE, TIER_PSEUDO_ELEMENT, TIER_RESPONSIVE, TIER_DARK_MODE)


@dataclass(frozen=True)
class PatternSpec:
    """A single match pattern.

    Text ending in ``-`` or ``:`` is a prefix pattern, anything else is exact.
    """

    text: str

    @property
    def kind(self) -> str:
        if self.text.endswith("-") or self.text.endswith(":"):
            return "prefix"
        return "exact"


@dataclass(frozen=True)
class Group:
    """A labelled group of patterns."""

    label: str
    patterns: tuple[PatternSpec, ...] = field(default_factory=tuple)
    tier: str = TIER_BASE


def _group(label: str, patterns: Iterable[str], tier: str = TIER_BASE) -> Group:
    return Group(label=label, patterns=tuple(PatternSpec(p) for p in patterns), tier=tier)


BASE_GROUPS: tuple[Group, ...] = (
    _group("Layout", [
        "container", "box-border", "box-content", "block", "inline-block",
        "inline", "flex", "inline-flex", "table", "inline-table", "grid",
        "inline-grid", "contents", "list-item", "hidden",
    ]),
    _group("Position", ["static", "fixed", "absolute", "relative", "sticky"]),
    _group("Coordinates", ["inset-", "top-", "right-", "bottom-", "left-", "z-"]),
    _group("Display", ["visible", "invisible", "collapse", "overflow-", "overscroll-"]),
    _group("Flexbox", [
        "flex-row", "flex-col", "flex-wrap", "flex-1", "flex-auto",
        "flex-initial", "flex-none", "grow", "shrink",
    ]),
    _group("Grid", [
        "grid-cols-", "grid-rows-", "col-", "row-", "grid-flow-",
        "auto-cols-", "auto-rows-",
    ]),
    _group("Gap", ["gap-", "space-"]),
    _group("Alignment", ["justify-", "items-", "content-", "self-", "place-"]),
    _group("Sizing", ["w-", "min-w-", "max-w-", "h-", "min-h-", "max-h-", "size-"]),
    _group("Spacing", [
        "p-", "px-", "py-", "pt-", "pr-", "pb-", "pl-",
        "m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-",
    ]),
    _group("Typography", [
        "font-", "text-", "leading-", "tracking-", "line-clamp-",
        "whitespace-", "break-", "hyphens-",
    ]),
    _group("Text Style", [
        "uppercase", "lowercase", "capitalize", "normal-case", "underline",
        "overline", "line-through", "no-underline", "antialiased",
        "subpixel-antialiased", "italic", "not-italic",
    ]),
    _group("Background", ["bg-"]),
    _group("Border", ["border", "divide-", "outline-", "ring-"]),
    _group("Border Radius", ["rounded-"]),
    _group("Effects", ["shadow-", "opacity-", "mix-blend-", "bg-blend-"]),
    _group("Filters", [
        "blur-", "brightness-", "contrast-", "grayscale", "hue-rotate-",
        "invert", "saturate-", "sepia", "backdrop-", "drop-shadow-",
    ]),
    _group("Transitions", ["transition-", "duration-", "ease-", "delay-", "animate-"]),
    _group("Transform", ["scale-", "rotate-", "translate-", "skew-", "origin-", "transform"]),
    _group("Interactivity", [
        "appearance-", "cursor-", "pointer-events-", "resize-", "scroll-",
        "select-", "user-select-", "touch-", "will-change-",
    ]),
    _group("SVG", ["fill-", "stroke-"]),
    _group("Accessibility", ["sr-only", "not-sr-only"]),
)

STATE_GROUPS: tuple[Group, ...] = (
    _group("Hover", ["hover:"], TIER_STATE),
    _group("Focus", ["focus:"], TIER_STATE),
    _group("Active", ["active:"], TIER_STATE),
    _group("Disabled", ["disabled:"], TIER_STATE),
    _group("Visited", ["visited:"], TIER_STATE),
    _group("Checked", ["checked:"], TIER_STATE),
    _group("Group", ["group-"], TIER_STATE),
    _group("Peer", ["peer-"], TIER_STATE),
)

PSEUDO_ELEMENT_GROUPS: tuple[Group, ...] = (
    _group("Before/After", ["before:", "after:"], TIER_PSEUDO_ELEMENT),
    _group("Placeholder", ["placeholder:"], TIER_PSEUDO_ELEMENT),
    _group("Selection", ["selection:"], TIER_PSEUDO_ELEMENT),
    _group("First/Last", ["first:", "last:", "odd:", "even:"], TIER_PSEUDO_ELEMENT),
)

RESPONSIVE_GROUPS: tuple[Group, ...] = (
    _group("Responsive", ["sm:", "md:", "lg:", "xl:", "2xl:"], TIER_RESPONSIVE),
)

DARK_MODE_GROUPS: tuple[Group, ...] = (
    _group("Dark Mode", ["dark:"], TIER_DARK_MODE),
)

VARIANT_GROUPS: tuple[Group, ...] = (
    STATE_GROUPS + PSEUDO_ELEMENT_GROUPS + RESPONSIVE_GROUPS + DARK_MODE_GROUPS
)

DEFAULT_GROUPS: tuple[Group, ...] = BASE_GROUPS + VARIANT_GROUPS


def group_labels(groups: Sequence[Group] = DEFAULT_GROUPS) -> list[str]:
    """Return group labels in precedence order."""
    return [g.label for g in groups]


def build_groups(
    definitions: Iterable[tuple[str, Iterable[str]]],
    include_variants: bool = True,
) -> tuple[Group, ...]:
    """Build a precedence table from ``(label, patterns)`` pairs.

    The variant tables (state, pseudo-element, responsive, dark mode) are
    appended after the given groups unless ``include_variants`` is False.

    Raises:
        ValueError: If a label is empty, repeated, clashes with ``Other``,
            or a pattern is empty.
    """
    groups: list[Group] = []
    for label, patterns in definitions:
        patterns = list(patterns)
        if not label or not label.strip():
            raise ValueError("Group label must be a non-empty string")
        if label == OTHER_LABEL:
            raise ValueError(f"Group label '{OTHER_LABEL}' is reserved for unclassified tokens")
        if any(not p for p in patterns):
            raise ValueError(f"Group '{label}' has an empty pattern")
        groups.append(_group(label, patterns))

    if include_variants:
        groups.extend(VARIANT_GROUPS)

    seen: set[str] = set()
    for g in groups:
        if g.label in seen:
            raise ValueError(f"Duplicate group label: {g.label}")
        seen.add(g.label)

    return tuple(groups)
