from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path

from kungfu import Error, LazyCoroResult, Nothing, Ok, Result, Some

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from alternatives import (  # noqa: E402
    LazyCoroOption,
    LazyCoroResultWriter,
    Log,
    Maybe,
    WriterResult,
    delay,
    delay_option,
    delay_w,
)

# Illustration only, no timing contract.
STEP_DELAY_SECONDS = 0.5


def _step_message(n: int, step: int) -> str:
    return f"Handler {n}: Step {step}/2"


def option_handler[T](n: int, outcome: Maybe[T]) -> LazyCoroOption[T]:
    """Print two delayed steps, then resolve to `outcome`."""

    def step(i: int) -> LazyCoroOption[None]:
        async def run() -> Maybe[None]:
            print(_step_message(n, i))
            return Some(None)

        return delay_option(LazyCoroOption(run), seconds=STEP_DELAY_SECONDS)

    async def finish(_: None) -> Maybe[T]:
        return outcome

    return step(1).then(lambda _: step(2)).then(finish)


def result_handler[T, E](n: int, outcome: Result[T, E]) -> LazyCoroResult[T, E]:
    """Print two delayed steps, then resolve to `outcome`."""

    def step(i: int) -> LazyCoroResult[None, E]:
        async def run() -> Result[None, E]:
            print(_step_message(n, i))
            return Ok(None)

        return delay(LazyCoroResult(run), seconds=STEP_DELAY_SECONDS)

    async def finish(_: None) -> Result[T, E]:
        return outcome

    return step(1).then(lambda _: step(2)).then(finish)


def writer_handler[T, E](n: int, outcome: Result[T, E]) -> LazyCoroResultWriter[T, E, str]:
    """Record two delayed steps in the log, then resolve to `outcome`."""

    def step(i: int) -> LazyCoroResultWriter[None, E, str]:
        return delay_w(LazyCoroResultWriter.tell(_step_message(n, i)), seconds=STEP_DELAY_SECONDS)

    async def finish(_: None) -> WriterResult[T, E, Log[str]]:
        return WriterResult(outcome, Log[str]())

    return step(1).then(lambda _: step(2)).then(finish)


def describe(value: object) -> object:
    """Plain-data view of an outcome, for comparisons and diagnostics."""
    match value:
        case Some(inner):
            return ("some", inner)
        case Nothing():
            return ("nothing",)
        case Ok(inner):
            return ("ok", inner)
        case Error(inner):
            return ("error", inner)
        case WriterResult(result, log):
            return (describe(result), list(log))
        case _:
            return value


def check(actual: object, expected: object) -> None:
    """Abort with expected vs actual when they differ."""
    got, want = describe(actual), describe(expected)
    assert got == want, f"expected {want!r}, got {got!r}"
    print(f"ok: {got!r}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
