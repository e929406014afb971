from __future__ import annotations

from _infra import banner, check, option_handler, run

from alternatives import first_deferred_present
from kungfu import Nothing, Some


async def main() -> None:
    banner("02_first_deferred_option: handlers run one by one until one yields Some")

    # Handler 2 never prints: handler 1 already produced a value.
    result = await first_deferred_present(
        [
            option_handler(0, Nothing()),
            option_handler(1, Some(1)),
            option_handler(2, Some(2)),
        ]
    )
    check(result, Some(1))


if __name__ == "__main__":
    run(main)
