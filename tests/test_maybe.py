import dataclasses

import pytest

from monadlaws import Err, Just, NoValueError, Nothing, Ok, bind, extract, just, nothing


def test_just_holds_value() -> None:
    m = just(10)
    assert m == Just(10)
    assert extract(m) == Ok(10)


def test_nothing_extracts_to_error() -> None:
    match extract(nothing()):
        case Err(NoValueError() as e):
            assert str(e) == "no value for this type"
        case other:
            pytest.fail(f"expected Err(NoValueError), got {other!r}")


def test_bind_just_returns_f_result_unwrapped() -> None:
    target = just("sentinel")
    assert just(1).bind(lambda _: target) is target


def test_bind_nothing_never_calls_f() -> None:
    calls: list[int] = []

    def f(x: int) -> Just[int]:
        calls.append(x)
        return Just(x)

    m = nothing()
    assert bind(m, f) is m
    assert calls == []


def test_bind_can_produce_nothing() -> None:
    assert just(3).bind(lambda _: nothing()) == Nothing()


def test_chained_binds() -> None:
    result = just(10).bind(lambda x: just(x + 1)).bind(lambda x: just(x * 2))
    assert result.extract() == Ok(22)


def test_variants_are_frozen() -> None:
    m = just(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.value = 2  # type: ignore[misc]


def test_generic_over_non_numeric_values() -> None:
    assert just("abc").bind(lambda s: just(s.upper())).extract() == Ok("ABC")


def test_non_maybe_is_rejected() -> None:
    with pytest.raises(TypeError):
        extract(10)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        bind(None, just)  # type: ignore[arg-type]


def test_f_exceptions_propagate() -> None:
    def boom(_: int) -> Just[int]:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        just(1).bind(boom)
