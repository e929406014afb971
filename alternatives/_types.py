"""
Core type definitions for alternatives.

Aliases shared by the whole library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Nothing, Some

# ============================================================================
# Type aliases
# ============================================================================

# Maybe = optional value: Some(value) when present, Nothing() when absent
# NOTE: Not `T | None`, so that Some(None) stays distinguishable from absence.
type Maybe[T] = Some[T] | Nothing

# Thunk = zero-arg callable producing a value on demand (lazy alternative branch)
type Thunk[T] = Callable[[], T]

# CoroFn = zero-arg callable returning a coroutine (the Raw side of lazy monads)
type CoroFn[Raw] = Callable[[], Coroutine[typing.Any, typing.Any, Raw]]

__all__ = (
    "Maybe",
    "Thunk",
    "CoroFn",
)
