"""
Fixed-width bit manipulation and integer arithmetic.

Values are numpy signed scalars (int8, int16, int32, int64). Every entry point
looks up the concrete type in a fixed table of IntKind descriptors, so the
width decides the behaviour: results wrap with two's-complement rules of that
width, exactly as the hardware word would.

    >>> set_bit(np.int8(0), 7)
    np.int8(-128)
    >>> to_hex_string(np.int64(-1))
    'ffffffffffffffff'

Anything outside the table (Python int, float, unsigned numpy types) raises
UnsupportedKindError.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


class UnsupportedKindError(TypeError):
    """Raised when a value is not one of the supported fixed-width integer kinds."""


@dataclass(frozen=True)
class IntKind:
    """
    Descriptor for one fixed-width signed integer type.

    Attributes:
        name: Short name ("int8", ...)
        bits: Width in bits
        dtype: numpy scalar type used for results
        text_bits: Width used when rendering as binary/hex text
    """
    name: str
    bits: int
    dtype: type
    text_bits: int

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def wrap(self, n: int) -> int:
        """Reduce an unbounded Python int to this width's signed range."""
        n &= self.mask
        if n >> (self.bits - 1):
            n -= 1 << self.bits
        return n

    def unsigned(self, n: int) -> int:
        """Two's-complement bit pattern of n as a non-negative int."""
        return int(n) & self.mask

    def box(self, n: int):
        return self.dtype(self.wrap(n))

    # Bit operations

    def set_bit(self, value: int, position: int) -> int:
        return self.wrap(int(value) | (1 << position))

    def clear_bit(self, value: int, position: int) -> int:
        return self.wrap(int(value) & ~(1 << position))

    def toggle_bit(self, value: int, position: int) -> int:
        return self.wrap(int(value) ^ (1 << position))

    def get_bit(self, value: int, position: int) -> int:
        return (self.wrap(int(value)) >> position) & 1

    def count_bits(self, value: int) -> int:
        # Kernighan: each iteration clears the lowest set bit
        n = self.unsigned(value)
        count = 0
        while n:
            n &= n - 1
            count += 1
        return count

    # Arithmetic

    def add(self, a: int, b: int) -> int:
        return self.wrap(int(a) + int(b))

    def subtract(self, a: int, b: int) -> int:
        return self.wrap(int(a) - int(b))

    def multiply(self, a: int, b: int) -> int:
        return self.wrap(int(a) * int(b))

    def divide(self, a: int, b: int) -> int:
        a, b = self.wrap(int(a)), self.wrap(int(b))
        if b == 0:
            raise ZeroDivisionError("Division by zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self.wrap(quotient)

    # Formatting

    def to_binary_string(self, value: int) -> str:
        pattern = int(value) & ((1 << self.text_bits) - 1)
        return format(pattern, f"0{self.text_bits}b")

    def to_hex_string(self, value: int) -> str:
        pattern = int(value) & ((1 << self.text_bits) - 1)
        return format(pattern, "x")


INT8 = IntKind("int8", 8, np.int8, 32)
INT16 = IntKind("int16", 16, np.int16, 32)
INT32 = IntKind("int32", 32, np.int32, 32)
INT64 = IntKind("int64", 64, np.int64, 64)

KINDS: dict[type, IntKind] = {
    np.int8: INT8,
    np.int16: INT16,
    np.int32: INT32,
    np.int64: INT64,
}


def kind_of(value) -> IntKind:
    """Return the IntKind for value's concrete type."""
    try:
        return KINDS[type(value)]
    except KeyError:
        raise UnsupportedKindError(
            f"Unsupported number type: {type(value).__name__}"
        ) from None


def set_bit(value, position: int):
    """Return value with the bit at position set to 1."""
    kind = kind_of(value)
    return kind.box(kind.set_bit(value, position))


def clear_bit(value, position: int):
    """Return value with the bit at position set to 0."""
    kind = kind_of(value)
    return kind.box(kind.clear_bit(value, position))


def toggle_bit(value, position: int):
    """Return value with the bit at position flipped."""
    kind = kind_of(value)
    return kind.box(kind.toggle_bit(value, position))


def get_bit(value, position: int) -> int:
    """Return 1 if the bit at position is set, 0 otherwise."""
    return kind_of(value).get_bit(value, position)


def add(a, b):
    kind = kind_of(a)
    return kind.box(kind.add(a, b))


def subtract(a, b):
    kind = kind_of(a)
    return kind.box(kind.subtract(a, b))


def multiply(a, b):
    kind = kind_of(a)
    return kind.box(kind.multiply(a, b))


def divide(a, b):
    """
    Integer quotient of a / b, truncated toward zero.

    Raises ZeroDivisionError if b is zero, whatever the width.
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero")
    kind = kind_of(a)
    return kind.box(kind.divide(a, b))


def to_binary_string(value) -> str:
    """
    Zero-padded binary text, most significant bit first.

    64 characters for int64, 32 for the narrower kinds (sign-extended).
    """
    return kind_of(value).to_binary_string(value)


def to_hex_string(value) -> str:
    """Lowercase hex of the 32/64-bit two's-complement pattern, no padding."""
    return kind_of(value).to_hex_string(value)


def count_bits(value) -> int:
    """Number of set bits in value's two's-complement pattern."""
    return kind_of(value).count_bits(value)
