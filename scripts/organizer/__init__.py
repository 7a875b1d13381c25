"""Tailwind-style utility class organizer.

Classifies class tokens into named groups, reorders them by a fixed
precedence table and renders the result inline, as ``// Label`` grouped
lines, or as a commented wrapper call such as ``{cn(...)}``.
"""

from scripts.organizer.organize import (
    OutputFormat,
    WrapperFunction,
    format_with_comments,
    generate_jsx_class_name,
    organize,
)

__version__ = "0.1.0"

__all__ = [
    "OutputFormat",
    "WrapperFunction",
    "format_with_comments",
    "generate_jsx_class_name",
    "organize",
]
