import math

import pytest

from euphrates.types import (
    EuBool,
    EuChar,
    EuF32,
    EuF64,
    EuFn,
    EuI32,
    EuI64,
    EuIsize,
    EuOpt,
    EuStr,
    EuU32,
    EuU64,
    EuUsize,
    EuVec,
    EuWord,
    State,
)


@pytest.mark.parametrize("cls", [EuIsize, EuUsize, EuI32, EuU32, EuI64, EuU64])
def test_int_bounds_accepted(cls):
    assert cls(cls.MIN).value == cls.MIN
    assert cls(cls.MAX).value == cls.MAX


@pytest.mark.parametrize("cls", [EuIsize, EuUsize, EuI32, EuU32, EuI64, EuU64])
def test_int_out_of_range(cls):
    with pytest.raises(ValueError):
        cls(cls.MAX + 1)
    with pytest.raises(ValueError):
        cls(cls.MIN - 1)


def test_i32_max_is_fixed_by_width():
    assert EuI32(2147483647).value == 2147483647
    with pytest.raises(ValueError):
        EuI32(2147483648)
    assert EuI32(-2147483648).value == -2147483648
    with pytest.raises(ValueError):
        EuI32(-2147483649)


def test_int_rejects_non_int():
    with pytest.raises(TypeError):
        EuI64(1.5)
    with pytest.raises(TypeError):
        EuI64(True)


def test_bool_requires_bool():
    assert EuBool(True).value is True
    with pytest.raises(TypeError):
        EuBool(1)


def test_classes_with_same_value_differ():
    assert not EuI32(1) == EuI64(1)
    assert not EuStr("a") == EuWord("a")
    assert EuI64(5) == EuI64(5)


def test_f32_rounding_is_idempotent():
    rounded = EuF32(0.1)
    assert EuF32(rounded.value) == rounded
    assert rounded.value != 0.1
    assert abs(rounded.value - 0.1) < 1e-7


def test_f32_overflow_becomes_infinity():
    assert EuF32(1e300).value == math.inf
    assert EuF32(-1e300).value == -math.inf


def test_f64_keeps_value():
    assert EuF64(0.1).value == 0.1
    assert EuF64(3).value == 3.0


def test_char_single_character():
    assert EuChar("a").value == "a"
    with pytest.raises(ValueError):
        EuChar("ab")
    with pytest.raises(ValueError):
        EuChar("")


def test_text_types_need_str():
    assert str(EuStr("hello")) == "hello"
    assert EuWord("map").value == "map"
    with pytest.raises(TypeError):
        EuWord(3)


def test_opt():
    assert EuOpt().value is None
    assert EuOpt(EuBool(True)).value == EuBool(True)
    with pytest.raises(TypeError):
        EuOpt(3)


def test_sequences_accept_any_iterable():
    items = [EuI64(1), EuWord("x")]
    fn = EuFn(items)
    assert fn == EuFn(tuple(items))
    assert list(fn) == items
    assert len(fn) == 2
    assert fn[1] == EuWord("x")
    assert not EuFn(items) == EuVec(items)


def test_sequences_are_hashable():
    assert hash(EuFn([EuI64(1)])) == hash(EuFn([EuI64(1)]))
    assert len({EuVec([EuI64(1)]), EuVec([EuI64(1)])}) == 1


def test_sequence_rejects_raw_values():
    with pytest.raises(TypeError):
        EuVec([1, 2])


def test_nested_fn_equality():
    inner = EuFn([EuI64(1), EuStr("2")])
    assert EuFn([inner, EuWord("+")]) == EuFn([EuFn([EuI64(1), EuStr("2")]), EuWord("+")])


def test_state_defaults():
    state = State()
    assert state.stack == EuVec()
    assert state.ast == EuFn()
    assert state.scope == {}
    other = State()
    other.scope["x"] = EuI64(1)
    assert state.scope == {}