"""LazyCoroResultWriter Monad

Deferred validated computation that also records a log:
- Lazy (nothing runs until called)
- Coro (asynchronous)
- Result[T, E] (success/error)
- Writer[Log[W]] (log accumulation)

Built on top of kungfu library patterns."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, Ok, Result

from .log import Log
from .result import WriterResult


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer Monad.

    A run produces `WriterResult(result, log)`. Since a writer is only a
    recipe, building one has no effect: entries appear in the log only for
    computations that were actually awaited.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    @staticmethod
    def tell[LogEntry](
        *entries: LogEntry,
    ) -> LazyCoroResultWriter[None, typing.Never, LogEntry]:
        """Write entries to the log without producing a value."""

        async def wrapper() -> WriterResult[None, typing.Never, Log[LogEntry]]:
            return WriterResult(Ok(None), Log.of(*entries))

        return LazyCoroResultWriter(wrapper)

    @staticmethod
    def from_result[V, Err, LogT](
        result: Result[V, Err],
        log_type: type[LogT],
    ) -> LazyCoroResultWriter[V, Err, LogT]:
        """Lift an already computed Result with an empty log."""
        _ = log_type  # Used only for type inference

        async def wrapper() -> WriterResult[V, Err, Log[LogT]]:
            return WriterResult(result, Log[LogT]())

        return LazyCoroResultWriter(wrapper)

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        async def wrapper() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    def map_err[F](self, f: Callable[[E], F], /) -> LazyCoroResultWriter[T, F, W]:
        """Map over error type, log untouched."""

        async def wrapper() -> WriterResult[T, F, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map_err(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    def then[U](
        self,
        f: Callable[[T], typing.Awaitable[WriterResult[U, E, Log[W]]]],
        /,
    ) -> LazyCoroResultWriter[U, E, W]:
        """
        Monadic bind.

        - On Ok: runs f, log of f is appended after ours
        - On Error: f is never called, our log is kept
        """

        async def wrapper() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    next_wr = await f(value)
                    return WriterResult(next_wr.result, wr.log.combine(next_wr.log))
                case Error(err):
                    return WriterResult(Error(err), wr.log)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResultWriter(wrapper)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation finishes."""

        async def wrapper() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(wrapper)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        """Start the computation."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


def writer_ok[T, W](
    value: T,
    *log_entries: W,
) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Successful writer with value and optional log entries."""

    async def wrapper() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*log_entries))

    return LazyCoroResultWriter(wrapper)


def writer_error[E, W](
    error: E,
    *log_entries: W,
) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Failed writer with error and optional log entries."""

    async def wrapper() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*log_entries))

    return LazyCoroResultWriter(wrapper)


__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
