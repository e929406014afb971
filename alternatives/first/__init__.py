from .option import first_deferred_present, first_present
from .validation import (
    first_success_or_accumulate,
    first_success_or_accumulate_w,
    first_success_or_accumulateM,
    first_valid,
)

__all__ = (
    # Option
    "first_present",
    "first_deferred_present",
    # Validation
    "first_valid",
    "first_success_or_accumulate",
    "first_success_or_accumulate_w",
    "first_success_or_accumulateM",
)
