"""Pattern matching utilities for token classification."""

from __future__ import annotations

from typing import Iterable, Optional

from scripts.organizer.groups import PatternSpec

VARIANT_SEPARATOR = ":"


def variant_suffix(token: str) -> str:
    """Return the part of a token after its last variant separator.

    ``md:hover:flex`` -> ``flex``; tokens without a separator are returned as is.
    """
    return token.rsplit(VARIANT_SEPARATOR, 1)[-1]


def match_prefix_pattern(token: str, pattern: str) -> bool:
    """Match a prefix pattern against a token.

    Prefix patterns match anywhere in the token, not only at its start:
    ``sm:pb-2`` matches ``pb-`` and ``custom-class`` matches ``m-``.
    """
    return pattern in token


def match_exact_pattern(token: str, pattern: str) -> bool:
    """Match an exact pattern against a token or its variant suffix.

    Args:
        token: The class token to check.
        pattern: A bare utility name like "flex" or "sr-only".

    Returns:
        True if the token equals the pattern, or the text after its last
        ``:`` does.
    """
    return token == pattern or variant_suffix(token) == pattern


def match_pattern(token: str, pattern: PatternSpec) -> bool:
    """Match a token against a single pattern, dispatching on its kind."""
    if pattern.kind == "prefix":
        return match_prefix_pattern(token, pattern.text)
    return match_exact_pattern(token, pattern.text)


def first_matching_pattern(token: str, patterns: Iterable[PatternSpec]) -> Optional[PatternSpec]:
    """Return the first pattern that matches the token, or None."""
    for pattern in patterns:
        if match_pattern(token, pattern):
            return pattern
    return None
