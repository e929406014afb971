"""Internal helpers for alternatives.

Extract / wrap / merge functions plugged into the generic (*M) combinators.
Not part of the public API, but usable when adding a custom monad."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, Result

from .writer import LazyCoroResultWriter, Log, WriterResult


# Extract functions (Raw -> Result[T, E])
def extract_result[T, E](r: Result[T, E]) -> Result[T, E]:
    """LazyCoroResult's Raw type IS Result[T, E], so extract is identity."""
    return r


def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    return wr.result


# Fail functions (E -> Raw)
def fail_result[E](error: E) -> Result[typing.Never, E]:
    return Error(error)


def fail_writer_result[E, W](error: E) -> WriterResult[typing.Never, E, Log[W]]:
    """Failure with an empty log."""
    return WriterResult(Error(error), Log[W]())


# Merge functions (Raw, Raw, outcome -> Raw)
def merge_result[T, E](
    first: Result[T, E],
    second: Result[T, E],
    outcome: Result[T, E],
) -> Result[T, E]:
    """Plain results carry nothing besides the outcome."""
    _ = first, second
    return outcome


def merge_writer_result[T, E, W](
    first: WriterResult[T, E, Log[W]],
    second: WriterResult[T, E, Log[W]],
    outcome: Result[T, E],
) -> WriterResult[T, E, Log[W]]:
    """Keep the outcome, concatenate both logs in evaluation order."""
    return WriterResult(outcome, first.log.combine(second.log))


# Wrap functions (Fn -> M)
def wrap_lazy_coro_result_writer[T, E, W](
    fn: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]
) -> LazyCoroResultWriter[T, E, W]:
    return LazyCoroResultWriter(fn)


__all__ = (
    # Extract functions
    "extract_result",
    "extract_writer_result",
    # Fail functions
    "fail_result",
    "fail_writer_result",
    # Merge functions
    "merge_result",
    "merge_writer_result",
    # Wrap functions
    "wrap_lazy_coro_result_writer",
)
