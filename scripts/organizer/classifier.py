"""Token classification engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from scripts.organizer.groups import DEFAULT_GROUPS, Group
from scripts.organizer.patterns import first_matching_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClassification:
    """Classification result for a single token."""

    token: str
    label: Optional[str] = None  # None when no group matched
    matched_pattern: Optional[str] = None
    tier: Optional[str] = None

    @property
    def classified(self) -> bool:
        return self.label is not None


def explain(token: str, groups: Sequence[Group] = DEFAULT_GROUPS) -> TokenClassification:
    """Classify a token and report which pattern decided it.

    Groups are scanned in precedence order and the first group with any
    matching pattern wins, even if a later group would also match.

    Args:
        token: A single class token (no whitespace).
        groups: Precedence table to scan.

    Returns:
        TokenClassification with label, pattern and tier, or an empty
        classification when nothing matched.
    """
    for group in groups:
        pattern = first_matching_pattern(token, group.patterns)
        if pattern is not None:
            return TokenClassification(
                token=token,
                label=group.label,
                matched_pattern=pattern.text,
                tier=group.tier,
            )

    logger.debug("Unclassified token: %s", token)
    return TokenClassification(token=token)


def classify(token: str, groups: Sequence[Group] = DEFAULT_GROUPS) -> Optional[str]:
    """Return the label of the first matching group, or None."""
    return explain(token, groups).label
