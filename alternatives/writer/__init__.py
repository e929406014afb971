"""
Writer Monad
============

LazyCoroResultWriter - deferred validated computation with a log:
- Lazy (deferred computations)
- Coro (asynchronous)
- Result[T, E] (success/error)
- Writer[Log[W]] (log accumulation)

Handlers record their steps here, so a test can see exactly which
alternatives were evaluated.
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter, writer_ok, writer_error

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
