"""Checked integer arithmetic for token amounts.

Every amount held by an Asset is an atomic unit count that must fit in an
unsigned 64-bit integer. SafeInt wraps a Python int so that intermediate
math stays exact while the dangerous cases fail loudly:
- Subtraction below zero raises Underflow
- Division by zero raises DivisionByZero
- Values above 2^64-1 raise Overflow when converted back with to_uint64()

Usage pattern:
    from pairswap.safe_int import S

    def share(amount: int, reserve: int, supply: int) -> int:
        return (S(amount) * S(reserve) // S(supply)).to_uint64()
"""

from __future__ import annotations

UINT64_MAX = 2**64 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Result would be negative."""

    pass


class Overflow(SafeIntError):
    """Result exceeds the uint64 maximum."""

    pass


class SafeInt:
    """Integer with checked arithmetic operations.

    Products and sums are kept exact (no wrapping), so a multiplication
    followed by a division never loses precision. The uint64 bound is only
    enforced at the exit point, to_uint64(), which is where a value is
    turned back into an amount.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool is rejected)
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __truediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division, use // instead")

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def to_uint64(self) -> int:
        """Convert to int, validating uint64 bounds.

        Raises:
            Underflow: If value is negative
            Overflow: If value exceeds 2^64-1
        """
        if self._value < 0:
            raise Underflow(f"Negative value cannot be uint64: {self._value}")
        if self._value > UINT64_MAX:
            raise Overflow(f"Value exceeds uint64 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
