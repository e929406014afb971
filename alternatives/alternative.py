"""
Alternative
===========

Capability shared by every wrapper the first-success combinators support:

- zero(): the "nothing found yet" value (Nothing(), Error(empty), ...)
- alt(first, second): first if it signals success, otherwise the result of
  second(). `second` is a thunk, so it is only evaluated (and, for lazy
  wrappers, only started) when needed.

`alt_all` folds a sequence through alt, which yields the first success or
the accumulated zero. It nests one alt per element, so the deferred
combinators in `first` loop over their candidates instead.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable, Coroutine, Iterable
from typing import assert_never

from kungfu import Error, Nothing, Ok, Result, Some

from ._types import CoroFn, Maybe, Thunk
from .monoid import Monoid
from .option import LazyCoroOption


class Alternative[F](typing.Protocol):
    """Monoid-like structure with a lazy right operand."""

    def zero(self) -> F: ...

    def alt(self, first: F, second: Thunk[F], /) -> F: ...


def alt_all[F](alternative: Alternative[F], items: Iterable[F]) -> F:
    """
    Reduce items left to right through alternative.alt, seeded with zero().

    Items are never mutated. An empty sequence yields zero().
    """
    return functools.reduce(
        lambda acc, cur: alternative.alt(acc, lambda: cur),
        items,
        alternative.zero(),
    )


# ============================================================================
# Option
# ============================================================================


class OptionAlternative:
    """Maybe[T]: keep the first Some."""

    __slots__ = ()

    def zero(self) -> Maybe[typing.Any]:
        return Nothing()

    def alt[T](self, first: Maybe[T], second: Thunk[Maybe[T]], /) -> Maybe[T]:
        match first:
            case Some():
                return first
            case _:
                return second()


class LazyCoroOptionAlternative:
    """LazyCoroOption[T]: run candidates one by one until one yields Some."""

    __slots__ = ()

    def zero(self) -> LazyCoroOption[typing.Any]:
        return LazyCoroOption.nothing()

    def alt[T](
        self,
        first: LazyCoroOption[T],
        second: Thunk[LazyCoroOption[T]],
        /,
    ) -> LazyCoroOption[T]:
        return first.or_else(second)


OPTION: typing.Final = OptionAlternative()
LAZY_CORO_OPTION: typing.Final = LazyCoroOptionAlternative()


# ============================================================================
# Validation
# ============================================================================


class Validation[E]:
    """
    Result[T, E] with failures accumulated through a monoid.

    - zero: Error(monoid.empty())
    - alt: Ok wins, two Errors combine left to right
    """

    __slots__ = ("_monoid",)

    def __init__(self, monoid: Monoid[E]) -> None:
        self._monoid = monoid

    def zero(self) -> Result[typing.Any, E]:
        return Error(self._monoid.empty())

    def alt[T](self, first: Result[T, E], second: Thunk[Result[T, E]], /) -> Result[T, E]:
        match first:
            case Ok(_):
                return first
            case Error(left):
                nxt = second()
                match nxt:
                    case Ok(_):
                        return nxt
                    case Error(right):
                        return Error(self._monoid.combine(left, right))
                    case _ as unreachable:
                        assert_never(unreachable)
            case _ as unreachable:
                assert_never(unreachable)


class ValidationM[M: Callable[[], Coroutine[typing.Any, typing.Any, typing.Any]], T, E, Raw]:
    """
    Generic validation over any lazy coroutine monad (extract + wrap pattern).

    Args:
        monoid: How failures combine
        extract: Function to extract Result[T, E] from Raw
        fail: Build the Raw value of a bare failure (used for zero)
        merge: Build the Raw value of alt(first, second) once both ran:
               merge(first_raw, second_raw, outcome) where outcome is
               second's Ok, or the combined Error
        wrap: Constructor to wrap thunk back into monad M

    M values must be zero-arg callables returning a coroutine of Raw
    (LazyCoroResult, LazyCoroResultWriter).
    """

    __slots__ = ("_monoid", "_extract", "_fail", "_merge", "_wrap")

    def __init__(
        self,
        monoid: Monoid[E],
        *,
        extract: Callable[[Raw], Result[T, E]],
        fail: Callable[[E], Raw],
        merge: Callable[[Raw, Raw, Result[T, E]], Raw],
        wrap: Callable[[CoroFn[Raw]], M],
    ) -> None:
        self._monoid = monoid
        self._extract = extract
        self._fail = fail
        self._merge = merge
        self._wrap = wrap

    def zero(self) -> M:
        async def run() -> Raw:
            return self._fail(self._monoid.empty())

        return self._wrap(run)

    def alt(self, first: M, second: Thunk[M], /) -> M:
        async def run() -> Raw:
            first_raw = await first()
            match self._extract(first_raw):
                case Ok(_):
                    return first_raw
                case Error(left):
                    second_raw = await second()()
                    outcome = self._extract(second_raw)
                    match outcome:
                        case Ok(_):
                            return self._merge(first_raw, second_raw, outcome)
                        case Error(right):
                            combined: Result[T, E] = Error(self._monoid.combine(left, right))
                            return self._merge(first_raw, second_raw, combined)
                        case _ as unreachable:
                            assert_never(unreachable)
                case _ as unreachable:
                    assert_never(unreachable)

        return self._wrap(run)


__all__ = (
    "Alternative",
    "alt_all",
    "OptionAlternative",
    "LazyCoroOptionAlternative",
    "OPTION",
    "LAZY_CORO_OPTION",
    "Validation",
    "ValidationM",
)
