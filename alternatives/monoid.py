"""
Monoid
======

Caller-supplied algebra used to accumulate failures.

A monoid is a pair (empty, combine) where:
- Left identity: combine(empty(), a) == a
- Right identity: combine(a, empty()) == a
- Associativity: combine(combine(a, b), c) == combine(a, combine(b, c))

The laws are documented, never checked at runtime. Combinators that take
a monoid give unspecified results for a pair that breaks them.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Nothing, Some

from ._types import Maybe
from .writer import Log


@dataclass(frozen=True, slots=True)
class Monoid[A]:
    """
    Explicit monoid instance.

    `empty` is a supplier rather than a value, so mutable identities
    (lists, logs) are never shared between reductions.
    """

    empty: Callable[[], A]
    combine: Callable[[A, A], A]

    def concat_all(self, items: Iterable[A], /) -> A:
        """Left-to-right fold of items, seeded with empty()."""
        return functools.reduce(self.combine, items, self.empty())


# ============================================================================
# Instances
# ============================================================================


def _concat_lists[A](left: list[A], right: list[A]) -> list[A]:
    return [*left, *right]


def list_monoid[A]() -> Monoid[list[A]]:
    """Concatenation of lists. Operands are never mutated."""
    return Monoid(empty=list, combine=_concat_lists)


def log_monoid[W]() -> Monoid[Log[W]]:
    return Monoid(empty=Log, combine=Log.combine)


def string_monoid() -> Monoid[str]:
    """
    Plain string concatenation.

    NOTE: No separator argument: "a" + sep + "" != "a" breaks right identity.
    """
    return Monoid(empty=str, combine=lambda left, right: left + right)


def tuple_monoid[A]() -> Monoid[tuple[A, ...]]:
    return Monoid(empty=tuple, combine=lambda left, right: (*left, *right))


def _first_present[T](left: Maybe[T], right: Maybe[T]) -> Maybe[T]:
    match left:
        case Some():
            return left
        case _:
            return right


def first_option_monoid[T]() -> Monoid[Maybe[T]]:
    """
    Keep the leftmost Some.

    Example:
        first_option_monoid().concat_all([Nothing(), Some(1), Some(2)])  # Some(1)
    """
    return Monoid(empty=Nothing, combine=_first_present)


__all__ = (
    "Monoid",
    "list_monoid",
    "log_monoid",
    "string_monoid",
    "tuple_monoid",
    "first_option_monoid",
)
