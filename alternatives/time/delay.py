"""Delay combinators

Sleep before running, with extract + wrap pattern."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine

from kungfu import LazyCoroResult

from .._helpers import wrap_lazy_coro_result_writer
from ..option import LazyCoroOption
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def delayM[M, Raw](
    interp: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    seconds: float,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic delay combinator.

    Suspends for `seconds` before starting interp. Non-positive values
    start it right away.
    """

    async def run() -> Raw:
        if seconds > 0.0:
            await asyncio.sleep(seconds)
        return await interp()

    return wrap(run)


# ============================================================================
# Sugar
# ============================================================================


def delay[T, E](
    interp: LazyCoroResult[T, E],
    *,
    seconds: float,
) -> LazyCoroResult[T, E]:
    """Sleep before running."""
    return delayM(interp, seconds=seconds, wrap=LazyCoroResult)


def delay_option[T](
    interp: LazyCoroOption[T],
    *,
    seconds: float,
) -> LazyCoroOption[T]:
    """Sleep before running."""
    return delayM(interp, seconds=seconds, wrap=LazyCoroOption)


def delay_w[T, E, W](
    interp: LazyCoroResultWriter[T, E, W],
    *,
    seconds: float,
) -> LazyCoroResultWriter[T, E, W]:
    """Sleep before running. Preserves log."""
    return delayM(interp, seconds=seconds, wrap=wrap_lazy_coro_result_writer)


__all__ = ("delay", "delay_option", "delay_w", "delayM")
