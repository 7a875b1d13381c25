"""Renderers for organized class buckets.

The multiline form doubles as the serialization contract between the
organizer and output-shaping callers:

    // Layout
    flex
    // Spacing
    mt-4

A ``//`` line declares the label for every following non-comment line up to
the next ``//`` line or the end of input. Blank lines are skipped and do not
close the current group. ``parse_grouped_lines`` reads this form back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from scripts.organizer.partition import OrganizedResult

COMMENT_PREFIX = "//"
ARGUMENT_INDENT = "    "
CLOSE_INDENT = "  "


@dataclass(frozen=True)
class ParsedGroup:
    """One group read back from grouped lines."""

    comment: Optional[str]
    classes: str


def render_inline(result: OrganizedResult) -> str:
    """Join every bucket into a single space-separated class string."""
    return " ".join(bucket.text for bucket in result)


def render_multiline(result: OrganizedResult) -> str:
    """Render a ``// Label`` line followed by the bucket's tokens, per bucket."""
    lines: list[str] = []
    for bucket in result:
        lines.append(f"{COMMENT_PREFIX} {bucket.label}")
        lines.append(bucket.text)
    return "\n".join(lines)


def parse_grouped_lines(text: Optional[str]) -> list[ParsedGroup]:
    """Parse comment-annotated grouped lines back into groups.

    Args:
        text: Output of ``render_multiline`` or hand-written text in the
            same shape.

    Returns:
        Groups in input order. Lines before the first comment form a group
        with ``comment=None``. Groups without any classes are dropped.
    """
    groups: list[ParsedGroup] = []
    current_comment: Optional[str] = None
    current_classes: list[str] = []
    started = False

    for line in (text or "").splitlines():
        stripped = line.strip()
        if stripped.startswith(COMMENT_PREFIX):
            if started:
                groups.append(ParsedGroup(current_comment, " ".join(current_classes)))
            current_comment = stripped[len(COMMENT_PREFIX):].strip()
            current_classes = []
            started = True
        elif stripped:
            current_classes.append(stripped)
            started = True

    if started:
        groups.append(ParsedGroup(current_comment, " ".join(current_classes)))

    return [g for g in groups if g.classes]


def groups_from_result(result: OrganizedResult) -> list[ParsedGroup]:
    """Convert an OrganizedResult into labelled groups."""
    return [ParsedGroup(bucket.label, bucket.text) for bucket in result]


def _quote(classes: str) -> str:
    escaped = classes.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _arguments(groups: Iterable[ParsedGroup], comments: bool) -> list[str]:
    parts = []
    for group in groups:
        if comments and group.comment:
            parts.append(f"{ARGUMENT_INDENT}{COMMENT_PREFIX} {group.comment}\n{ARGUMENT_INDENT}{_quote(group.classes)}")
        else:
            parts.append(f"{ARGUMENT_INDENT}{_quote(group.classes)}")
    return parts


def render_with_comments(
    groups: Sequence[ParsedGroup],
    function_name: str,
    comments: bool = True,
) -> str:
    """Wrap groups as arguments of a call expression.

    Produces::

        {cn(
            // Layout
            "flex",
            // Spacing
            "mt-4"
          )}
    """
    body = ",\n".join(_arguments(groups, comments))
    return f"{{{function_name}(\n{body}\n{CLOSE_INDENT})}}"


def render_jsx_element(
    groups: Sequence[ParsedGroup],
    component_name: str,
    function_name: str,
) -> str:
    """Render a self-closing JSX element whose className is a wrapper call.

    Every argument keeps a trailing comma, so an empty group list still
    produces a well-formed (empty) call.
    """
    lines = [f"<{component_name}", f"{CLOSE_INDENT}className={{{function_name}("]
    for part in _arguments(groups, comments=True):
        lines.append(f"{part},")
    lines.append(f"{CLOSE_INDENT})}}")
    lines.append("/>")
    return "\n".join(lines)
