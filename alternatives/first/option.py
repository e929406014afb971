"""
First present
=============

First Some of a sequence of optional values, synchronous and deferred.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Some

from .._types import Maybe
from ..alternative import OPTION, alt_all
from ..option import LazyCoroOption


def first_present[T](items: Iterable[Maybe[T]]) -> Maybe[T]:
    """
    First Some scanning left to right, Nothing() if there is none.

    Example:
        first_present([Nothing(), Some(1), Some(2)])  # Some(1)
        first_present([])                             # Nothing()
    """
    return alt_all(OPTION, items)


def first_deferred_present[T](items: Iterable[LazyCoroOption[T]]) -> LazyCoroOption[T]:
    """
    Run candidates in order, stop at the first that yields Some.

    Candidates are never in flight together: the next one starts only
    after the previous one completed with Nothing(). Candidates after the
    winner are never started. An empty sequence completes to Nothing()
    without doing any work.

    NOTE: `items` is consumed when this is called, not when the result runs.
    """
    candidates = tuple(items)

    async def run() -> Maybe[T]:
        for candidate in candidates:
            option = await candidate()
            match option:
                case Some():
                    return option
                case _:
                    pass
        return Nothing()

    return LazyCoroOption(run)


__all__ = ("first_present", "first_deferred_present")
