from __future__ import annotations

from _infra import banner, check, run

from alternatives import first_option_monoid, first_present
from kungfu import Nothing, Some


async def main() -> None:
    banner("01_first_option: first Some of plain optional values")

    check(first_present([Nothing(), Some(1), Some(2)]), Some(1))
    check(first_present([Nothing()]), Nothing())

    # Same answer through the "keep first Some" monoid.
    check(first_option_monoid().concat_all([Nothing(), Some(1), Some(2)]), Some(1))


if __name__ == "__main__":
    run(main)
