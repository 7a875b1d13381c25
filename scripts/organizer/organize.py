"""Public entry points: organize a class string into a requested format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from scripts.organizer.config import OrganizerConfig
from scripts.organizer.groups import DEFAULT_GROUPS, Group
from scripts.organizer.partition import OrganizedResult, partition
from scripts.organizer.render import (
    groups_from_result,
    render_inline,
    render_jsx_element,
    render_multiline,
    render_with_comments,
)


class OutputFormat(str, Enum):
    """Output formats understood by ``organize``."""

    INLINE = "inline"
    MULTILINE = "multiline"
    WITH_COMMENTS = "with-comments"


@dataclass(frozen=True)
class WrapperFunction:
    """The call wrapper used by the with-comments format.

    Only ``name`` affects output. ``import_path`` and ``imported`` are carried
    for callers that insert import statements.
    """

    name: str
    import_path: Optional[str] = None
    imported: bool = False


def resolve_wrapper(config: OrganizerConfig) -> WrapperFunction:
    """Build the wrapper from configuration, without inspecting any source."""
    return WrapperFunction(
        name=config.utility_function,
        import_path=config.utility_import_path,
    )


def _check_input(class_string: Optional[str]) -> None:
    if class_string is not None and not isinstance(class_string, str):
        raise TypeError(
            f"class_string must be a str or None, not {type(class_string).__name__}"
        )


def _collapse_or_wrap(result: OrganizedResult, original: str, function_name: str) -> str:
    if result.is_empty:
        return original
    # A single bucket carries no grouping worth annotating
    if len(result) == 1:
        return render_inline(result)
    return render_with_comments(groups_from_result(result), function_name)


def organize(
    class_string: Optional[str],
    format: OutputFormat | str = OutputFormat.INLINE,
    function_name: Optional[str] = None,
    groups: Sequence[Group] = DEFAULT_GROUPS,
) -> str:
    """Classify, reorder and render a class string.

    Args:
        class_string: Whitespace-separated class tokens. None is treated as
            an empty string.
        format: One of ``inline``, ``multiline`` or ``with-comments``.
        function_name: Call wrapper for ``with-comments``; defaults to "cn".
        groups: Precedence table to classify against.

    Returns:
        The rendered string.

    Raises:
        TypeError: If class_string is neither a str nor None.
        ValueError: If format is not a known output format.
    """
    _check_input(class_string)
    fmt = OutputFormat(format)
    result = partition(class_string, groups)

    if fmt is OutputFormat.MULTILINE:
        return render_multiline(result)
    if fmt is OutputFormat.WITH_COMMENTS:
        return _collapse_or_wrap(result, class_string or "", function_name or "cn")
    return render_inline(result)


def format_with_comments(
    class_string: Optional[str],
    function_name: str = "cn",
    groups: Sequence[Group] = DEFAULT_GROUPS,
) -> str:
    """Render a class string as a commented wrapper call.

    Empty input is returned unchanged. Input that falls into a single group
    is returned as a plain inline string, with no wrapper.
    """
    return organize(class_string, OutputFormat.WITH_COMMENTS, function_name, groups)


def generate_jsx_class_name(
    class_string: Optional[str],
    component_name: str = "select",
    function_name: str = "clsx",
    groups: Sequence[Group] = DEFAULT_GROUPS,
) -> str:
    """Render a JSX element snippet with a grouped ``className`` wrapper call."""
    _check_input(class_string)
    result = partition(class_string, groups)
    return render_jsx_element(groups_from_result(result), component_name, function_name)


def organize_with_config(class_string: Optional[str], config: OrganizerConfig) -> str:
    """Organize a class string using format, wrapper and groups from config."""
    wrapper = resolve_wrapper(config)
    return organize(class_string, config.format, wrapper.name, config.precedence())
