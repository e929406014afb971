"""Alternative capability and the shared alt_all reduction."""

import pytest
from kungfu import Error, LazyCoroResult, Nothing, Ok, Some

from alternatives import (
    LAZY_CORO_OPTION,
    OPTION,
    LazyCoroOption,
    Validation,
    ValidationM,
    alt_all,
    list_monoid,
)
from alternatives._helpers import extract_result, fail_result, merge_result


class FirstTruthy:
    """Toy instance over plain values: first truthy item, else empty string."""

    def zero(self):
        return ""

    def alt(self, first, second):
        return first or second()


def test_alt_all_with_custom_instance():
    assert alt_all(FirstTruthy(), ["", "", "x", "y"]) == "x"
    assert alt_all(FirstTruthy(), []) == ""


def test_option_alt_does_not_call_thunk_when_present(describe):
    def explode():
        raise AssertionError("fallback evaluated")

    assert describe(OPTION.alt(Some(1), explode)) == ("some", 1)


def test_option_alt_uses_thunk_when_absent(describe):
    assert describe(OPTION.alt(Nothing(), lambda: Some(2))) == ("some", 2)
    assert describe(OPTION.zero()) == ("nothing",)


@pytest.mark.asyncio
async def test_lazy_coro_option_zero_does_no_work(describe):
    assert describe(await LAZY_CORO_OPTION.zero()) == ("nothing",)


@pytest.mark.asyncio
async def test_lazy_coro_option_alt_builds_fallback_only_on_nothing(describe):
    built = []

    def fallback():
        built.append(True)
        return LazyCoroOption.pure(2)

    combined = LAZY_CORO_OPTION.alt(LazyCoroOption.pure(1), fallback)

    assert describe(await combined) == ("some", 1)
    assert built == []


def test_validation_alt(describe):
    validation = Validation(list_monoid())

    assert describe(validation.zero()) == ("error", [])
    assert describe(validation.alt(Ok(1), lambda: Ok(2))) == ("ok", 1)
    assert describe(validation.alt(Error(["a"]), lambda: Ok(2))) == ("ok", 2)
    assert describe(validation.alt(Error(["a"]), lambda: Error(["b"]))) == ("error", ["a", "b"])


def test_validation_alt_short_circuits():
    def explode():
        raise AssertionError("fallback evaluated")

    validation = Validation(list_monoid())
    validation.alt(Ok(1), explode)


@pytest.mark.asyncio
async def test_validation_m_single_alt(recorder, describe):
    validation = ValidationM(
        list_monoid(),
        extract=extract_result,
        fail=fail_result,
        merge=merge_result,
        wrap=LazyCoroResult,
    )

    both_fail = validation.alt(
        recorder.result_handler(0, Error(["a"])),
        lambda: recorder.result_handler(1, Error(["b"])),
    )
    assert describe(await both_fail) == ("error", ["a", "b"])

    first_wins = validation.alt(
        recorder.result_handler(2, Ok(1)),
        lambda: recorder.result_handler(3, Ok(2)),
    )
    assert describe(await first_wins) == ("ok", 1)
    assert recorder.handlers_run() == [0, 1, 2]
    assert describe(await validation.zero()) == ("error", [])
