import io
from fractions import Fraction

import pytest

from ripplecore.value import (
    ZERO_NATIVE,
    ZERO_NON_NATIVE,
    Value,
    ValueError_,
    native_value,
    new_value,
    non_native_value,
)

M123 = 123 * 10**13


def val(text):
    native = text.startswith("n")
    if native:
        text = text[1:]
    return new_value(text, native)


def canon(native, negative, num, offset):
    return Value.canonical(native, negative, num, offset)


@pytest.mark.parametrize(
    "native, negative, num, offset, expected",
    [
        (False, False, 0, -15, "0"),
        (False, False, 0, -25, "0"),
        (False, False, 0, -26, "0"),
        (False, False, 0, -5, "0"),
        (False, False, 0, -4, "0"),
        (False, True, 0, -15, "0"),
        (False, True, 0, -25, "0"),
        (False, True, 0, -26, "0"),
        (False, True, 0, -5, "0"),
        (False, True, 0, -4, "0"),
        (True, False, 0, 0, "0"),
        (True, False, 0, 6, "0"),
        (True, False, 0, -6, "0"),
        (False, False, M123, -15, "1.23"),
        (False, False, M123, -25, "0.000000000123"),
        (False, False, M123, -26, "123e-13"),
        (False, False, M123, -5, "12300000000"),
        (False, False, M123, -4, "123e9"),
        (False, False, 9999999999999999, 80, "9999999999999999e80"),
        (False, False, 1000000000000000, -96, "1e-81"),
        (False, True, M123, -15, "-1.23"),
        (False, True, M123, -25, "-0.000000000123"),
        (False, True, M123, -26, "-123e-13"),
        (False, True, M123, -5, "-12300000000"),
        (False, True, M123, -4, "-123e9"),
        (False, True, 9999999999999999, 80, "-9999999999999999e80"),
        (False, True, 1000000000000000, -96, "-1e-81"),
        (True, False, 1, 0, "0.000001"),
        (True, False, 1, 10, "10000"),
        (True, False, 1, 5, "0.1"),
        (True, False, 400, 5, "40"),
        (True, True, 1, 0, "-0.000001"),
        (True, True, 1, 10, "-10000"),
        (True, True, 1, 5, "-0.1"),
        (True, True, 400, 5, "-40"),
    ],
)
def test_canonical_string(native, negative, num, offset, expected):
    assert str(canon(native, negative, num, offset)) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (canon(False, False, 0, 0), Fraction(0)),
        (canon(False, False, M123, -15), Fraction(123, 100)),
        (canon(True, False, 1, 0), Fraction(1)),
        (canon(True, False, 4000000, 0), Fraction(4000000)),
    ],
)
def test_rat(value, expected):
    assert value.rat() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", (False, False, 0, -100)),
        ("1", (False, False, 1000000000000000, -15)),
        ("0.01", (False, False, 1000000000000000, -17)),
        ("-0", (False, False, 0, -100)),
        ("-1", (False, True, 1000000000000000, -15)),
        ("-0.01", (False, True, 1000000000000000, -17)),
        ("9999999999999999e80", (False, False, 9999999999999999, 80)),
        ("1e-81", (False, False, 1000000000000000, -96)),
        ("n0", (True, False, 0, 0)),
        ("n0.0", (True, False, 0, 0)),
        ("n9000000", (True, False, 9000000, 0)),
        ("n-9000000", (True, True, 9000000, 0)),
        ("n9000000000000.", (True, False, 9000000000000000000, 0)),
        ("n-9000000000000.", (True, True, 9000000000000000000, 0)),
    ],
)
def test_parse(text, expected):
    assert val(text) == canon(*expected)


def test_parse_silent_underflow():
    assert val("1e-82").is_zero() is True
    assert val("n0.0000001").is_zero() is True


@pytest.mark.parametrize(
    "text, native, pattern",
    [
        ("1e96", False, "Value overflow: .*"),
        ("foo", False, "Invalid Number: .*"),
        ("9000000000000.000001", True, "Native amount out of range: .*"),
        ("1" * 33, False, "Overlong Number: .*"),
    ],
)
def test_parse_errors(text, native, pattern):
    with pytest.raises(ValueError_, match=pattern):
        new_value(text, native)


def test_zero_clone_and_is_zero():
    assert val("123").zero_clone().is_zero() is True
    assert val("123").zero_clone().is_native() is False
    assert val("0").is_zero() is True
    assert val("123").is_zero() is False
    assert val("n123").zero_clone().is_zero() is True
    assert val("n123").zero_clone().is_native() is True
    assert val("n0").is_zero() is True
    assert val("n123").is_zero() is False


def test_zero_constants():
    assert ZERO_NON_NATIVE.is_native() is False
    assert ZERO_NATIVE.is_native() is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-0.01", "0.01"),
        ("0.01", "0.01"),
        ("n-0.01", "0.01"),
        ("n0.01", "0.01"),
        ("n-20000", "0.02"),
        ("n20000", "0.02"),
    ],
)
def test_abs(text, expected):
    assert str(val(text).abs()) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", "-123"),
        ("-123", "123"),
        ("0", "0"),
        ("n123.", "-123"),
        ("n-123.", "123"),
        ("n0", "0"),
    ],
)
def test_negate(text, expected):
    assert str(val(text).negate()) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("0", "0", True),
        ("1", "1", True),
        ("1", "0.1", False),
        ("10", "0.1", False),
        ("-1", "1", False),
        ("n0", "0", True),
        ("n1", "1", True),
        ("n1", "0", False),
        ("n1", "n1", True),
    ],
)
def test_equals(a, b, expected):
    assert val(a).equals(val(b)) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("0", "0", "0"),
        ("0", "1", "1"),
        ("0", "0.0001", "0.0001"),
        ("1", "0", "1"),
        ("1", "1", "2"),
        ("-1", "1", "0"),
        ("-1", "-1", "-2"),
        ("1", "-1", "0"),
        ("n0", "n0", "0"),
        ("n0", "n1", "0.000001"),
        ("n0", "n0.0001", "0.0001"),
        ("n1", "n0", "0.000001"),
        ("n1", "n1", "0.000002"),
        ("n-1", "n1", "0"),
        ("n-1", "n-1", "-0.000002"),
        ("n1", "n-1", "0"),
    ],
)
def test_add(a, b, expected):
    assert str(val(a).add(val(b))) == expected


def test_add_mixed_kinds_fails():
    with pytest.raises(ValueError_, match="Cannot add native and non-native values"):
        val("n1").add(val("1"))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("0", "0", "0"),
        ("1", "1", "0"),
        ("-1", "0", "-1"),
        ("1", "-1", "2"),
        ("0", "0.0001", "-0.0001"),
        ("n0", "n0", "0"),
        ("n1", "n1", "0"),
        ("n-1", "n0", "-0.000001"),
        ("n1", "n-1", "0.000002"),
        ("n0", "n0.0001", "-0.0001"),
    ],
)
def test_subtract(a, b, expected):
    assert str(val(a).subtract(val(b))) == expected


def test_subtract_mixed_kinds_fails():
    with pytest.raises(ValueError_, match="Cannot add native and non-native values"):
        val("n1").subtract(val("1"))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("0", "0", "0"),
        ("1", "0", "0"),
        ("0", "1", "0"),
        ("1", "1", "1"),
        ("1000", "0.001", "1"),
        ("1000", "2", "2000"),
        ("1000", "-2", "-2000"),
        ("-1000", "2", "-2000"),
        ("-1000", "-2", "2000"),
        ("n0", "n0", "0"),
        ("n1", "n0", "0"),
        ("n0", "n1", "0"),
        ("n1", "n1", "0.000001"),
        ("n1.", "n1.", "1000000"),
        ("n1.", "2", "2"),
        ("n1.", "0.000001", "0.000001"),
        ("n-1000.", "2", "-2000"),
        ("n-1000.", "-2", "2000"),
    ],
)
def test_multiply(a, b, expected):
    assert str(val(a).multiply(val(b))) == expected


def test_divide_by_zero():
    with pytest.raises(ValueError_, match="Division by zero"):
        val("0").divide(val("0"))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("0", "1", "0"),
        ("1", "2", "0.5"),
        ("-1", "2", "-0.5"),
        ("1", "-200", "-0.005"),
        ("n0.", "n1.", "0"),
        ("n1.", "n2.", "0"),
        ("n-1.", "n2.", "0"),
        ("n1.", "n-200.", "0"),
        ("0", "n1", "0"),
        ("1", "n2000000", "0.0000005"),
        ("n-1000000", "2", "-0.5"),
        ("1", "n-200000000", "-0.000000005"),
    ],
)
def test_divide(a, b, expected):
    assert str(val(a).divide(val(b))) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("n1.", "n2.", "0.5"),
        ("n-1.", "n2.", "-0.5"),
        ("n1.", "n-200.", "-0.005"),
        ("0", "n1", "0"),
        ("1", "n2000000", "0.5"),
        ("n-1000000", "2", "-0.5"),
        ("1", "n-200000000", "-0.005"),
    ],
)
def test_ratio(a, b, expected):
    result = val(a).ratio(val(b))
    assert str(result) == expected
    assert result.is_native() is False


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("1", "1", 0),
        ("0", "1", -1),
        ("1", "0", 1),
        ("0", "0", 0),
        ("0", "-1", 1),
        ("-1", "0", -1),
        ("-1", "1", -1),
        ("1", "-1", 1),
        ("-1", "2", -1),
        ("-2", "1", -1),
        ("1", "0.002", 1),
        ("-1", "0.002", -1),
        ("1", "-0.002", 1),
        ("-1", "-0.002", -1),
        ("0.002", "1", -1),
        ("-0.002", "1", -1),
        ("0.002", "-1", 1),
        ("-0.002", "-1", 1),
        ("n1", "n1", 0),
        ("n0", "n1", -1),
        ("n1", "n0", 1),
        ("n0", "n0", 0),
        ("n0", "n-1", 1),
        ("n-1", "n0", -1),
        ("n-1", "n1", -1),
        ("n1", "n-1", 1),
        ("n-1", "n2", -1),
        ("n-2", "n1", -1),
        ("n2000", "2000", 0),
        ("n1", "0.002", 1),
        ("n0", "0.002", -1),
        ("n1000000", "-0.002", 1),
    ],
)
def test_compare(a, b, expected):
    assert val(a).compare(val(b)) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("1", "1", False),
        ("0", "1", True),
        ("n1", "1", False),
        ("n1.", "1", False),
    ],
)
def test_less(a, b, expected):
    assert val(a).less(val(b)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", "0"),
        ("n0.1", "0.1"),
        ("n-0.1", "-0.1"),
        ("0.1", "0.1"),
        ("-0.1", "-0.1"),
    ],
)
def test_binary_round_trip(text, expected):
    original = val(text)
    decoded = Value.from_bytes(original.to_bytes())
    assert str(decoded) == expected
    assert decoded.equals(original)


def test_zero_hex():
    assert canon(False, False, 0, -15).to_bytes().hex().upper() == "8000000000000000"


def test_stream_round_trip():
    values = [val("1.23"), val("n-42"), val("-9999999999999999e80")]
    buffer = io.BytesIO()
    for value in values:
        value.write(buffer)
    buffer.seek(0)
    assert [Value.read(buffer) for _ in values] == values


def test_read_short_stream():
    with pytest.raises(EOFError):
        Value.read(io.BytesIO(b"\x80\x00"))


def test_native_and_non_native_conversion():
    drops = val("n1.")
    assert drops.non_native().equals(drops)
    assert drops.non_native().is_native() is False
    assert val("2000").native() == val("n2000")


def test_constructors():
    assert str(native_value(1000000)) == "1"
    assert native_value(-1000000).is_negative() is True
    assert str(non_native_value(123, -2)) == "1.23"
    assert str(non_native_value(-123, -2)) == "-1.23"


def test_native_multiply_overflow():
    with pytest.raises(ValueError_, match="Native value overflow"):
        native_value(9 * 10**15).multiply(native_value(9 * 10**15))