"""
First-success combinators over optional and validated computations.

Scan an ordered sequence of wrapped values and return the first one that
signals success, either short-circuiting (optional values) or accumulating
failures through a monoid (validated values).

Architecture:
- Alternative capability (zero + lazy alt) with one instance per wrapper
- alt_all: the shared left-to-right reduction
- Generic combinators (*M functions) work with any monad via extract + wrap pattern
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_w suffix)
"""

# Core types
from ._types import CoroFn, Maybe, Thunk

# Internal helpers (for custom monads)
from . import _helpers

# Monoid
from .monoid import (
    Monoid,
    first_option_monoid,
    list_monoid,
    log_monoid,
    string_monoid,
    tuple_monoid,
)

# Deferred optional
from .option import LazyCoroOption

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok

# Alternative capability
from .alternative import (
    LAZY_CORO_OPTION,
    OPTION,
    Alternative,
    LazyCoroOptionAlternative,
    OptionAlternative,
    Validation,
    ValidationM,
    alt_all,
)

# First success
from .first import (
    first_deferred_present,
    first_present,
    first_success_or_accumulate,
    first_success_or_accumulate_w,
    first_success_or_accumulateM,
    first_valid,
)

# Time operations
from .time import delay, delay_option, delay_w, delayM

__all__ = (
    # Types
    "CoroFn",
    "Maybe",
    "Thunk",
    # Internal helpers (for custom monads)
    "_helpers",
    # Monoid
    "Monoid",
    "first_option_monoid",
    "list_monoid",
    "log_monoid",
    "string_monoid",
    "tuple_monoid",
    # Deferred optional
    "LazyCoroOption",
    # Writer module
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "writer_error",
    "writer_ok",
    # Alternative
    "Alternative",
    "LazyCoroOptionAlternative",
    "OptionAlternative",
    "Validation",
    "ValidationM",
    "LAZY_CORO_OPTION",
    "OPTION",
    "alt_all",
    # First - Option
    "first_present",
    "first_deferred_present",
    # First - Result
    "first_valid",
    # First - LazyCoroResult
    "first_success_or_accumulate",
    # First - LazyCoroResultWriter
    "first_success_or_accumulate_w",
    # First - Generic
    "first_success_or_accumulateM",
    # Time
    "delay",
    "delay_option",
    "delay_w",
    "delayM",
)
