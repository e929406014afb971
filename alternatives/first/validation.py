"""
First success or accumulate
===========================

First Ok of a sequence of validated computations. When every candidate
fails, their errors are combined left to right through a monoid, starting
from monoid.empty().
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    extract_result,
    extract_writer_result,
    fail_result,
    fail_writer_result,
    merge_result,
    merge_writer_result,
    wrap_lazy_coro_result_writer,
)
from .._types import CoroFn
from ..alternative import Validation, alt_all
from ..monoid import Monoid
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def first_success_or_accumulateM[M: CoroFn[typing.Any], T, E, Raw](
    monoid: Monoid[E],
    interps: Iterable[M],
    *,
    extract: Callable[[Raw], Result[T, E]],
    fail: Callable[[E], Raw],
    merge: Callable[[Raw, Raw, Result[T, E]], Raw],
    wrap: Callable[[CoroFn[Raw]], M],
) -> M:
    """
    Generic first-success combinator.

    Runs interps one at a time. Returns the first Ok; later interps are
    never started. If all fail, returns the monoidal combination of their
    errors, in order. No interps: fail(monoid.empty()).

    Args:
        monoid: How errors combine
        interps: Candidates, tried in order
        extract: Function to extract Result[T, E] from Raw
        fail: Build Raw for a bare failure
        merge: Fold the Raw of the next evaluated candidate into the running
               Raw, given the outcome so far
        wrap: Constructor to wrap thunk back into monad M
    """
    candidates = tuple(interps)

    async def run() -> Raw:
        errors = monoid.empty()
        acc = fail(errors)
        for interp in candidates:
            raw = await interp()
            result = extract(raw)
            match result:
                case Ok(_):
                    return merge(acc, raw, result)
                case Error(e):
                    errors = monoid.combine(errors, e)
                    acc = merge(acc, raw, Error(errors))
                case _ as unreachable:
                    assert_never(unreachable)
        return acc

    return wrap(run)


# ============================================================================
# Sugar for Result
# ============================================================================


def first_valid[T, E](monoid: Monoid[E], results: Iterable[Result[T, E]]) -> Result[T, E]:
    """
    Synchronous counterpart over already computed results.

    Example:
        first_valid(list_monoid(), [Error(["a"]), Ok(1)])            # Ok(1)
        first_valid(list_monoid(), [Error(["a"]), Error(["b"])])     # Error(["a", "b"])
    """
    return alt_all(Validation(monoid), results)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def first_success_or_accumulate[T, E](
    monoid: Monoid[E],
    interps: Iterable[LazyCoroResult[T, E]],
) -> LazyCoroResult[T, E]:
    """First Ok, or all errors combined through monoid."""
    return first_success_or_accumulateM(
        monoid,
        interps,
        extract=extract_result,
        fail=fail_result,
        merge=merge_result,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def first_success_or_accumulate_w[T, E, W](
    monoid: Monoid[E],
    interps: Iterable[LazyCoroResultWriter[T, E, W]],
) -> LazyCoroResultWriter[T, E, W]:
    """
    First Ok, or all errors combined through monoid.

    NOTE: The log holds the entries of every candidate that ran, in order,
          failed ones included. Skipped candidates contribute nothing.
    """
    return first_success_or_accumulateM(
        monoid,
        interps,
        extract=extract_writer_result,
        fail=fail_writer_result,
        merge=merge_writer_result,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = (
    "first_valid",
    "first_success_or_accumulate",
    "first_success_or_accumulate_w",
    "first_success_or_accumulateM",
)
