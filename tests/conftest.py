"""Shared fixtures: recording handlers and a plain-data view of outcomes."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from kungfu import Error, LazyCoroResult, Nothing, Ok, Result, Some

from alternatives import LazyCoroOption, LazyCoroResultWriter, Log, Maybe, WriterResult


def _describe(value: object) -> object:
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
            return (_describe(result), list(log))
        case _:
            return value


@pytest.fixture
def describe() -> Callable[[object], object]:
    """Turn Some/Nothing/Ok/Error/WriterResult into tuples for assertions."""
    return _describe


@dataclass
class Recorder:
    """Builds handlers that record each step they execute."""

    steps: list[str] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    async def _step(self, n: int, i: int) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        self.steps.append(f"Handler {n}: Step {i}/2")
        # Yield to the loop so overlapping handlers would be visible
        await asyncio.sleep(0)
        self.in_flight -= 1

    def option_handler[T](self, n: int, outcome: Maybe[T]) -> LazyCoroOption[T]:
        async def run() -> Maybe[T]:
            await self._step(n, 1)
            await self._step(n, 2)
            return outcome

        return LazyCoroOption(run)

    def result_handler[T, E](self, n: int, outcome: Result[T, E]) -> LazyCoroResult[T, E]:
        async def run() -> Result[T, E]:
            await self._step(n, 1)
            await self._step(n, 2)
            return outcome

        return LazyCoroResult(run)

    def writer_handler[T, E](self, n: int, outcome: Result[T, E]) -> LazyCoroResultWriter[T, E, str]:
        async def run() -> WriterResult[T, E, Log[str]]:
            await self._step(n, 1)
            await self._step(n, 2)
            return WriterResult(outcome, Log.of(f"Handler {n}: done"))

        return LazyCoroResultWriter(run)

    def handlers_run(self) -> list[int]:
        """Handler numbers that started, in order."""
        seen: list[int] = []
        for step in self.steps:
            n = int(step.split(":")[0].removeprefix("Handler "))
            if n not in seen:
                seen.append(n)
        return seen


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
