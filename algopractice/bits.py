"""Bit manipulation on 32-bit signed integers."""

from __future__ import annotations

from enum import Enum

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - (1 << _WIDTH) if value >> (_WIDTH - 1) else value


class Parity(str, Enum):
    """Whether a number is odd or even."""

    ODD = "ODD"
    EVEN = "EVEN"


class BinaryNumber:
    """A 32-bit signed integer with bit-level queries.

    Bits are numbered from 0 (least significant) to 31 (most significant).
    """

    def __init__(self, value: int) -> None:
        self.value = _to_int32(value)

    def __repr__(self) -> str:
        return f"BinaryNumber({self.value})"

    @staticmethod
    def _check_position(i: int) -> None:
        if not 0 <= i < _WIDTH:
            raise ValueError(f"bit position must be in 0..{_WIDTH - 1}, got {i}")

    def to_binary(self) -> str:
        """Return the 32-bit two's complement form, most significant bit first."""
        return format(self.value & _MASK, f"0{_WIDTH}b")

    def is_bit_set(self, i: int) -> bool:
        """Tell whether bit ``i`` is set."""
        self._check_position(i)
        return bool(self.value & (1 << i))

    def unset_bit(self, i: int) -> int:
        """Return the value with bit ``i`` cleared."""
        self._check_position(i)
        return _to_int32(self.value & ~(1 << i))

    def count_set_bits(self) -> int:
        """Return the number of set bits among the 32."""
        return (self.value & _MASK).bit_count() if hasattr(int, "bit_count") else bin(
            self.value & _MASK
        ).count("1")

    def parity(self) -> Parity:
        """Return whether the value is odd or even."""
        return Parity.ODD if self.value & 1 else Parity.EVEN

    def clear_lsbs(self, i: int) -> int:
        """Return the value with bits 0..i cleared."""
        self._check_position(i)
        return _to_int32(self.value & ~((1 << (i + 1)) - 1))

    def clear_msbs(self, i: int) -> int:
        """Return the value keeping only bits 0..i."""
        self._check_position(i)
        return _to_int32(self.value & ((1 << (i + 1)) - 1))

    def check_power_of_two(self) -> bool:
        """Return ``value & (value - 1)`` as a flag.

        The flag is False for powers of two and for zero, and True otherwise.
        """
        return bool(_to_int32(self.value & (self.value - 1)))