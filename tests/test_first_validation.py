"""first_success_or_accumulate and friends: first Ok, or all errors combined."""

import pytest
from kungfu import Error, LazyCoroResult, Ok

from alternatives import (
    Monoid,
    first_success_or_accumulate,
    first_success_or_accumulateM,
    first_valid,
    list_monoid,
    string_monoid,
)
from alternatives._helpers import extract_result, fail_result, merge_result


@pytest.mark.asyncio
async def test_all_fail_errors_concatenate(recorder, describe):
    result = await first_success_or_accumulate(
        list_monoid(),
        [
            recorder.result_handler(0, Error(["e0"])),
            recorder.result_handler(1, Error(["e1"])),
        ],
    )

    assert describe(result) == ("error", ["e0", "e1"])
    assert recorder.handlers_run() == [0, 1]


@pytest.mark.asyncio
async def test_errors_combine_left_associated_in_order(recorder, describe):
    calls: list[tuple[str, str]] = []

    def combine(left: str, right: str) -> str:
        calls.append((left, right))
        return f"({left}+{right})" if left else right

    monoid = Monoid(empty=str, combine=combine)
    result = await first_success_or_accumulate(
        monoid,
        [recorder.result_handler(n, Error(f"e{n}")) for n in (1, 2, 3)],
    )

    assert describe(result) == ("error", "((e1+e2)+e3)")
    assert calls == [("", "e1"), ("e1", "e2"), ("(e1+e2)", "e3")]


@pytest.mark.asyncio
async def test_first_success_short_circuits(recorder, describe):
    result = await first_success_or_accumulate(
        list_monoid(),
        [
            recorder.result_handler(0, Error(["e0"])),
            recorder.result_handler(1, Ok(1)),
            recorder.result_handler(2, Ok(2)),
            recorder.result_handler(3, Error(["e3"])),
        ],
    )

    assert describe(result) == ("ok", 1)
    assert recorder.handlers_run() == [0, 1]


@pytest.mark.asyncio
async def test_empty_sequence_is_empty_error(describe):
    result = await first_success_or_accumulate(string_monoid(), [])

    assert describe(result) == ("error", "")


@pytest.mark.asyncio
async def test_candidates_never_overlap(recorder):
    await first_success_or_accumulate(
        list_monoid(),
        [recorder.result_handler(n, Error([n])) for n in range(4)],
    )

    assert recorder.max_in_flight == 1


@pytest.mark.asyncio
async def test_error_inputs_not_mutated(recorder, describe):
    first_errors = ["e0"]
    second_errors = ["e1"]

    result = await first_success_or_accumulate(
        list_monoid(),
        [
            recorder.result_handler(0, Error(first_errors)),
            recorder.result_handler(1, Error(second_errors)),
        ],
    )

    assert describe(result) == ("error", ["e0", "e1"])
    assert first_errors == ["e0"]
    assert second_errors == ["e1"]


@pytest.mark.asyncio
async def test_generic_combinator_with_lazy_coro_result(recorder, describe):
    combined = first_success_or_accumulateM(
        string_monoid(),
        [recorder.result_handler(0, Error("a")), recorder.result_handler(1, Error("b"))],
        extract=extract_result,
        fail=fail_result,
        merge=merge_result,
        wrap=LazyCoroResult,
    )

    assert describe(await combined) == ("error", "ab")


def test_first_valid_returns_first_ok(describe):
    result = first_valid(list_monoid(), [Error(["a"]), Ok(1), Ok(2)])

    assert describe(result) == ("ok", 1)


def test_first_valid_accumulates(describe):
    result = first_valid(list_monoid(), [Error(["a"]), Error(["b"]), Error(["c"])])

    assert describe(result) == ("error", ["a", "b", "c"])


def test_first_valid_empty(describe):
    assert describe(first_valid(list_monoid(), [])) == ("error", [])


@pytest.mark.asyncio
async def test_long_sequence_does_not_nest(describe):
    async def failing():
        return Error(1)

    count = Monoid(empty=lambda: 0, combine=lambda a, b: a + b)
    failures = [LazyCoroResult(failing) for _ in range(5000)]

    assert describe(await first_success_or_accumulate(count, failures)) == ("error", 5000)
