from __future__ import annotations

from _infra import banner, check, run, writer_handler

from alternatives import Log, WriterResult, first_success_or_accumulate_w, list_monoid
from kungfu import Error, Ok


def as_errors(error: str) -> list[str]:
    return [error]


async def main() -> None:
    banner("04_first_validation_writer: the log shows which handlers ran")

    writer = first_success_or_accumulate_w(
        list_monoid(),
        [
            writer_handler(0, Error("e0")).map_err(as_errors),
            writer_handler(1, Ok("from handler 1")),
            writer_handler(2, Ok("from handler 2")),
        ],
    )
    wr = await writer
    for entry in wr.log:
        print(f"log: {entry}")

    expected_log = Log.of(
        "Handler 0: Step 1/2",
        "Handler 0: Step 2/2",
        "Handler 1: Step 1/2",
        "Handler 1: Step 2/2",
    )
    check(wr, WriterResult(Ok("from handler 1"), expected_log))


if __name__ == "__main__":
    run(main)
