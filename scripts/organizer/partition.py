"""Split a class string into ordered group buckets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from scripts.organizer.classifier import classify
from scripts.organizer.groups import DEFAULT_GROUPS, OTHER_LABEL, Group


@dataclass(frozen=True)
class Bucket:
    """Tokens assigned to one group, in arrival order."""

    label: str
    tokens: tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class OrganizedResult:
    """Non-empty buckets in precedence order, ``Other`` last."""

    buckets: tuple[Bucket, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    @property
    def is_empty(self) -> bool:
        return not self.buckets

    @property
    def labels(self) -> list[str]:
        return [b.label for b in self.buckets]

    @property
    def tokens(self) -> list[str]:
        """All tokens in output order."""
        return [t for b in self.buckets for t in b.tokens]

    def get(self, label: str) -> Optional[Bucket]:
        for bucket in self.buckets:
            if bucket.label == label:
                return bucket
        return None


def tokenize(class_string: Optional[str]) -> list[str]:
    """Split a class string on runs of whitespace.

    None, empty and whitespace-only strings yield no tokens.
    """
    if not class_string:
        return []
    return class_string.split()


def partition(
    class_string: Optional[str],
    groups: Sequence[Group] = DEFAULT_GROUPS,
) -> OrganizedResult:
    """Bucket every token of a class string into its group.

    Args:
        class_string: Whitespace-separated class tokens.
        groups: Precedence table used for classification and output order.

    Returns:
        OrganizedResult with one bucket per non-empty group in precedence
        order, followed by an ``Other`` bucket for unclassified tokens.
    """
    organized: dict[str, list[str]] = {}
    ungrouped: list[str] = []

    for token in tokenize(class_string):
        label = classify(token, groups)
        if label is None:
            ungrouped.append(token)
        else:
            organized.setdefault(label, []).append(token)

    buckets = [
        Bucket(label=g.label, tokens=tuple(organized[g.label]))
        for g in groups
        if organized.get(g.label)
    ]
    if ungrouped:
        buckets.append(Bucket(label=OTHER_LABEL, tokens=tuple(ungrouped)))

    return OrganizedResult(buckets=tuple(buckets))
