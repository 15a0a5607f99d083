"""Ordered first-match rule tables keyed on signal names."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

NamePredicate = Callable[[str], bool]


def contains(*needles: str) -> NamePredicate:
    """Match names containing any of the substrings."""
    return lambda name: any(n in name for n in needles)


def contains_all(*needles: str) -> NamePredicate:
    """Match names containing every substring."""
    return lambda name: all(n in name for n in needles)


def excluding(predicate: NamePredicate, *needles: str) -> NamePredicate:
    """Narrow a predicate so names containing any of the substrings are rejected."""
    return lambda name: predicate(name) and not any(n in name for n in needles)


def exactly(*names: str) -> NamePredicate:
    """Match one of the given names exactly."""
    allowed = frozenset(names)
    return lambda name: name in allowed


@dataclass(frozen=True)
class RuleTable(Generic[T]):
    """Rules evaluated in order against a lower-cased name; the first hit wins."""

    rules: Sequence[Tuple[Callable[..., bool], T]]

    def match(self, *args) -> Optional[T]:
        for predicate, result in self.rules:
            if predicate(*args):
                return result
        return None
