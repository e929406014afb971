"""LazyCoroOption

Deferred optional value:
- Lazy (nothing runs until called)
- Coro (asynchronous, may suspend before producing its result)
- Maybe[T] (Some(value) or Nothing())

Same calling convention as kungfu's LazyCoroResult: call to get a coroutine,
or await directly."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Nothing, Ok, Result, Some
from kungfu.library.caching import acache

from .._types import Maybe


class LazyCoroOption[T]:
    """Lazy Coroutine Option.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(LazyCoroOption.pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))

    `or_else` is the lazy alternative: the fallback thunk is only invoked,
    and its computation only started, when this one resolves to Nothing().
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, Maybe[T]]],
        /,
    ) -> None:
        """Create LazyCoroOption from a fn returning coroutine."""
        self._value = value

    @staticmethod
    def pure[V](value: V) -> LazyCoroOption[V]:
        """Always-present computation."""

        async def wrapper() -> Maybe[V]:
            return Some(value)

        return LazyCoroOption(wrapper)

    @staticmethod
    def nothing() -> LazyCoroOption[typing.Never]:
        """Always-absent computation. Does no work when run."""

        async def wrapper() -> Maybe[typing.Never]:
            return Nothing()

        return LazyCoroOption(wrapper)

    @staticmethod
    def from_option[V](value: Maybe[V]) -> LazyCoroOption[V]:
        """Lift an already computed Maybe."""

        async def wrapper() -> Maybe[V]:
            return value

        return LazyCoroOption(wrapper)

    @staticmethod
    def from_lazy_coro_result[V, Err](lazy: LazyCoroResult[V, Err]) -> LazyCoroOption[V]:
        """Ok(value) becomes Some(value), any Error becomes Nothing()."""

        async def wrapper() -> Maybe[V]:
            match await lazy:
                case Ok(value):
                    return Some(value)
                case Error(_):
                    return Nothing()
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroOption(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroOption[U]:
        async def wrapper() -> Maybe[U]:
            match await self():
                case Some(value):
                    return Some(f(value))
                case _:
                    return Nothing()

        return LazyCoroOption(wrapper)

    # Monad operations

    def then[U](
        self,
        f: Callable[[T], typing.Awaitable[Maybe[U]]],
        /,
    ) -> LazyCoroOption[U]:
        """
        Monadic bind.

        - On Some: awaits f(value)
        - On Nothing: short-circuit, f is never called
        """

        async def wrapper() -> Maybe[U]:
            match await self():
                case Some(value):
                    return await f(value)
                case _:
                    return Nothing()

        return LazyCoroOption(wrapper)

    # Alternative operations

    def or_else(self, other: Callable[[], LazyCoroOption[T]], /) -> LazyCoroOption[T]:
        """
        Lazy alternative.

        Runs self; if it resolves to Nothing(), builds and runs other().
        Evaluation is strictly sequential: other is not started before
        self has completed.
        """

        async def wrapper() -> Maybe[T]:
            option = await self()
            match option:
                case Some():
                    return option
                case _:
                    return await other()()

        return LazyCoroOption(wrapper)

    # Utility operations

    def cache(self) -> LazyCoroOption[T]:
        """Cache the result - only compute once."""
        return LazyCoroOption(acache(self))

    def to_lazy_coro_result[E](self, error: Callable[[], E], /) -> LazyCoroResult[T, E]:
        """
        Convert to kungfu LazyCoroResult. Nothing() becomes Error(error()).

        NOTE: error is a thunk, only called when the value is absent.
        """

        async def wrapper() -> Result[T, E]:
            match await self():
                case Some(value):
                    return Ok(value)
                case _:
                    return Error(error())

        return LazyCoroResult(wrapper)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Maybe[T]]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, Maybe[T]]:
        """Allow direct await on the option."""
        return self().__await__()


__all__ = ("LazyCoroOption",)
