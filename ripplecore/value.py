"""Ledger amounts: native drops or decimal values with a 16-digit mantissa."""

from __future__ import annotations

import re
from fractions import Fraction
from typing import BinaryIO

MIN_OFFSET = -96
MAX_OFFSET = 80
MIN_VALUE = 10**15
MAX_VALUE = 10**16 - 1
MAX_NATIVE = 9 * 10**18
MAX_NATIVE_NETWORK = 10**17
MAX_NATIVE_SQRT = 3_000_000_000
MAX_NATIVE_DIV = 2_095_475_792  # MAX_NATIVE / 2**32
XRP_PRECISION = 1_000_000

_TEN_TO_14 = 10**14
_TEN_TO_17 = 10**17
_UINT64_MAX = 2**64 - 1
_INT64_MAX = 2**63 - 1
_NOT_NATIVE = 1 << 63
_POSITIVE = 1 << 62
_MASK_62 = (1 << 62) - 1
_MASK_54 = (1 << 54) - 1
# Any native shift beyond this many decimal places under- or overflows.
_MAX_NATIVE_SHIFT = 40

# Groups: sign, integer part, whole fraction, fraction digits,
# whole exponent, exponent sign, exponent digits.
_VALUE_RE = re.compile(r"([+-]?)(\d*)(\.(\d*))?([eE]([+-]?)(\d+))?", re.ASCII)


class ValueError_(ValueError):
    """Raised when a value cannot be parsed, represented or computed."""


def _debug(native: bool, negative: bool, num: int, offset: int) -> str:
    return (
        f"Native: {str(native).lower()} Negative: {str(negative).lower()} "
        f"Value: {num} Offset: {offset}"
    )


def _canonicalise(
    native: bool, negative: bool, num: int, offset: int
) -> tuple[bool, bool, int, int]:
    if native:
        if num == 0:
            return native, False, 0, 0
        if offset < 0:
            num = 0 if -offset > _MAX_NATIVE_SHIFT else num // 10 ** (-offset)
        elif offset > 0:
            if offset > _MAX_NATIVE_SHIFT:
                raise ValueError_(
                    "Native amount out of range: " + _debug(native, negative, num, offset)
                )
            num *= 10**offset
        offset = 0
        if num > MAX_NATIVE:
            raise ValueError_(
                "Native amount out of range: " + _debug(native, negative, num, offset)
            )
        return native, negative, num, offset

    if num == 0:
        return native, False, 0, -100
    while num < MIN_VALUE and offset > MIN_OFFSET:
        num *= 10
        offset -= 1
    while num > MAX_VALUE:
        if offset >= MAX_OFFSET:
            raise ValueError_("Value overflow: " + _debug(native, negative, num, offset))
        num //= 10
        offset += 1
    if offset < MIN_OFFSET or num < MIN_VALUE:
        num, offset, negative = 0, 0, False
    if offset > MAX_OFFSET:
        raise ValueError_("Value overflow: " + _debug(native, negative, num, offset))
    return native, negative, num, offset


def _trunc_div10(x: int) -> int:
    return -((-x) // 10) if x < 0 else x // 10


def _float_string(x: Fraction, prec: int) -> str:
    """Decimal rendering of x with prec digits, rounding half away from zero."""
    a, b = x.numerator, x.denominator
    if b == 1:
        text = str(a)
        return text + ("." + "0" * prec if prec > 0 else "")
    q, r = divmod(abs(a), b)
    p = 10**prec if prec > 0 else 1
    r, r2 = divmod(r * p, b)
    if b <= 2 * r2:
        r += 1
        if r >= p:
            q += 1
            r -= p
    text = ("-" if a < 0 else "") + str(q)
    if prec > 0:
        text += "." + str(r).zfill(prec)
    return text


class Value:
    """A number stored either as native drops or as mantissa and exponent.

    Non-native numbers keep a mantissa in [1e15, 1e16) and an exponent in
    [-96, 80]. Native numbers are whole drops, each 1/1000000 of an XRP.
    Equality with ``==`` is structural; use :meth:`equals` for numeric equality.
    """

    __slots__ = ("_native", "_negative", "_num", "_offset")

    def __init__(self, native: bool = False, negative: bool = False, num: int = 0, offset: int = 0):
        self._native = bool(native)
        self._negative = bool(negative)
        self._num = num
        self._offset = offset

    @classmethod
    def canonical(cls, native: bool, negative: bool, num: int, offset: int) -> Value:
        """Build a value brought into canonical form; raises on overflow."""
        return cls(*_canonicalise(native, negative, num, offset))

    @property
    def num(self) -> int:
        return self._num

    @property
    def offset(self) -> int:
        return self._offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Value(native={self._native}, negative={self._negative}, "
            f"num={self._num}, offset={self._offset})"
        )

    def _key(self) -> tuple[bool, bool, int, int]:
        return self._native, self._negative, self._num, self._offset

    def _debug(self) -> str:
        return _debug(*self._key())

    def native(self) -> Value:
        """A copy of the value in native form."""
        return Value.canonical(True, self._negative, self._num, self._offset)

    def non_native(self) -> Value:
        """A copy of the value in non-native form."""
        return Value.canonical(False, self._negative, self._num, self._offset)

    def clone(self) -> Value:
        return Value(*self._key())

    def zero_clone(self) -> Value:
        """A zero of the same kind, native or not."""
        return (ZERO_NATIVE if self._native else ZERO_NON_NATIVE).clone()

    def abs(self) -> Value:
        return Value(self._native, False, self._num, self._offset)

    def negate(self) -> Value:
        return Value(self._native, not self._negative, self._num, self._offset)

    def _signed(self) -> int:
        return -self._num if self._negative else self._num

    def _factor(self, other: Value) -> tuple[int, int, int]:
        av, bv = self._signed(), other._signed()
        ao, bo = self._offset, other._offset
        while ao < bo:
            av = _trunc_div10(av)
            ao += 1
        while bo < ao:
            bv = _trunc_div10(bv)
            bo += 1
        return av, bv, ao

    def add(self, other: Value) -> Value:
        if self._native != other._native:
            raise ValueError_("Cannot add native and non-native values")
        if self.is_zero():
            return other.clone()
        if other.is_zero():
            return self.clone()
        av, bv, offset = self._factor(other)
        total = av + bv
        return Value.canonical(self._native, total < 0, abs(total), offset)

    def subtract(self, other: Value) -> Value:
        return self.add(other.negate())

    def _normalised(self) -> tuple[int, int]:
        num, offset = self._num, self._offset
        if self._native:
            while num < MIN_VALUE:
                num *= 10
                offset -= 1
        return num, offset

    def multiply(self, other: Value) -> Value:
        if self.is_zero() or other.is_zero():
            return self.zero_clone()
        negative = self._negative != other._negative
        if self._native and other._native:
            low, high = sorted((self._num, other._num))
            if low > MAX_NATIVE_SQRT or (high >> 32) * low > MAX_NATIVE_DIV:
                raise ValueError_(f"Native value overflow: {self._debug()}*{other._debug()}")
            return Value.canonical(True, negative, low * high, 0)
        av, ao = self._normalised()
        bv, bo = other._normalised()
        product = (av * bv // _TEN_TO_14) & _UINT64_MAX
        return Value.canonical(self._native, negative, product + 7, ao + bo + 14)

    def divide(self, other: Value) -> Value:
        if other.is_zero():
            raise ValueError_("Division by zero")
        if self.is_zero():
            return self.zero_clone()
        av, ao = self._normalised()
        bv, bo = other._normalised()
        quotient = (av * _TEN_TO_17 // bv) & _UINT64_MAX
        return Value.canonical(
            self._native, self._negative != other._negative, quotient + 5, ao - bo - 17
        )

    def ratio(self, other: Value) -> Value:
        """self/other as a non-native value, reading native values as XRP."""
        num, den = self, other
        if num.is_native():
            num = num.non_native().divide(XRP_MULTIPLIER)
        if den.is_native():
            den = den.non_native().divide(XRP_MULTIPLIER)
        return num.divide(den)

    def less(self, other: Value) -> bool:
        return self.compare(other) < 0

    def equals(self, other: Value) -> bool:
        return self.compare(other) == 0

    def compare(self, other: Value) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        a, b = self.rat(), other.rat()
        return (a > b) - (a < b)

    def is_native(self) -> bool:
        return self._native

    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return self._num == 0

    def _is_scientific(self) -> bool:
        return self._offset != 0 and (self._offset < -25 or self._offset > -5)

    def to_bytes(self) -> bytes:
        """The 8-byte wire encoding."""
        u = 0
        if not self._negative and (self._num > 0 or self._native):
            u |= _POSITIVE
        if self._native:
            u |= self._num & _MASK_62
        else:
            u |= _NOT_NATIVE
            u |= self._num & _MASK_54
            if self._num > 0:
                u |= ((self._offset + 97) & _UINT64_MAX) << 54
        return (u & _UINT64_MAX).to_bytes(8, "big")

    @classmethod
    def _decode(cls, u: int) -> Value:
        native = (u >> 63) == 0
        negative = (u >> 62) & 1 == 0
        if native:
            return cls(native, negative, u & _MASK_62, 0)
        return cls(native, negative, u & _MASK_54, ((u >> 54) & 0xFF) - 97)

    @classmethod
    def read(cls, stream: BinaryIO) -> Value:
        """Read one 8-byte encoded value from a binary stream."""
        data = stream.read(8)
        if len(data) < 8:
            raise EOFError("unexpected end of data reading value")
        return cls._decode(int.from_bytes(data, "big"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Value:
        import io

        return cls.read(io.BytesIO(data))

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.to_bytes())

    def rat(self) -> Fraction:
        """The exact value; native values are counted in drops."""
        signed = self._signed()
        if self._offset < 0:
            return Fraction(signed, 10 ** (-self._offset))
        return Fraction(signed * 10**self._offset)

    def float(self) -> float:
        """Approximate value; native values are given in XRP."""
        if self._native:
            result = self._num / XRP_PRECISION
        else:
            result = float(self._num) * 10.0**self._offset
        return -result if self._negative else result

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        if not self._native and self._is_scientific():
            digits = str(self._num)
            stripped = digits.rstrip("0")
            exponent = self._offset + len(digits) - len(stripped)
            return f"{'-' if self._negative else ''}{stripped}e{exponent}"
        rat = self.rat()
        if self._native:
            rat /= XRP_PRECISION
        left = _float_string(rat, 0)
        if rat.denominator == 1:
            return left
        length = len(left) - (1 if self._negative else 0)
        return _float_string(rat, 32 - length).rstrip("0")


def _parse_uint(text: str, digits: str) -> int:
    if not digits:
        raise ValueError_(f'Invalid Number: {text} Reason: parsing "{digits}": invalid syntax')
    number = int(digits)
    if number > _UINT64_MAX:
        raise ValueError_(f'Invalid Number: {text} Reason: parsing "{digits}": value out of range')
    return number


def new_value(s: str, native: bool) -> Value:
    """Parse a decimal string.

    A native value written with a decimal point is read as XRP; without one
    it is read as drops.
    """
    match = _VALUE_RE.search(s)
    sign, integer, whole_fraction, fraction, exponent, exp_sign, exp_digits = match.groups(
        default=""
    )
    if len(integer) + len(fraction) > 32:
        raise ValueError_(f"Overlong Number: {s}")
    num = _parse_uint(s, integer + fraction)
    offset = -len(fraction)
    if exponent:
        exp = int(exp_digits)
        if exp > _INT64_MAX:
            raise ValueError_(f"Invalid Number: {s} exponent out of range")
        offset = offset - exp if exp_sign == "-" else offset + exp
    if native and whole_fraction:
        offset += 6
    return Value.canonical(native, sign == "-", num, offset)


def native_value(n: int) -> Value:
    """A native value of n drops."""
    return Value.canonical(True, n < 0, abs(n), 0)


def non_native_value(n: int, offset: int) -> Value:
    """A non-native value of n * 10**offset."""
    return Value.canonical(False, n < 0, abs(n), offset)


ZERO_NATIVE = Value.canonical(True, False, 0, 0)
ZERO_NON_NATIVE = Value.canonical(False, False, 0, 0)
XRP_MULTIPLIER = Value.canonical(True, False, XRP_PRECISION, 0)