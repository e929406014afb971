from __future__ import annotations

from _infra import banner, check, result_handler, run

from alternatives import first_success_or_accumulate, list_monoid
from kungfu import Error, LazyCoroResult, Result


def as_errors[T](interp: LazyCoroResult[T, str]) -> LazyCoroResult[T, list[str]]:
    """Lift each single error into a one-element list, so errors can concatenate."""

    async def run_() -> Result[T, list[str]]:
        r = await interp
        return r.map_err(lambda err: [err])

    return LazyCoroResult(run_)


async def main() -> None:
    banner("03_first_validation: every handler fails, errors accumulate in order")

    result = await first_success_or_accumulate(
        list_monoid(),
        [
            as_errors(result_handler(0, Error("e0"))),
            as_errors(result_handler(1, Error("e1"))),
        ],
    )
    check(result, Error(["e0", "e1"]))


if __name__ == "__main__":
    run(main)
