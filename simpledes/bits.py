"""Helpers for fixed-width sequences of bits held as tuples of 0 and 1."""

from collections.abc import Sequence

Bits = tuple[int, ...]


class BitFormatError(ValueError):
    """Raised when a text is not a binary word of the expected size."""


def xor(left: Sequence[int], right: Sequence[int]) -> Bits:
    """Return the bitwise exclusive-or of two sequences of equal length."""
    if len(left) != len(right):
        raise ValueError(
            f"cannot xor sequences of different lengths ({len(left)} and {len(right)})"
        )
    return tuple(int(a != b) for a, b in zip(left, right))


def split(bits: Sequence[int]) -> tuple[Bits, Bits]:
    """Split a sequence of even length into its left and right halves."""
    if len(bits) % 2:
        raise ValueError(f"cannot split a sequence of odd length {len(bits)}")
    half = len(bits) // 2
    return tuple(bits[:half]), tuple(bits[half:])


def permute(bits: Sequence[int], table: Sequence[int]) -> Bits:
    """Pick bits in the order given by a table of zero-based positions."""
    return tuple(bits[position] for position in table)


def int_to_bits(value: int, width: int) -> Bits:
    """Return the big-endian binary form of a non-negative integer."""
    if value < 0 or value >= 1 << width:
        raise ValueError(f"{value} does not fit in {width} bits")
    return tuple((value >> shift) & 1 for shift in range(width - 1, -1, -1))


def parse_bits(text: str, size: int) -> Bits:
    """Parse a string of exactly ``size`` characters, each '0' or '1'."""
    if len(text) != size or any(char not in "01" for char in text):
        raise BitFormatError(f"expected a binary word of {size} bits, got {text!r}")
    return tuple(int(char) for char in text)


def format_bits(bits: Sequence[int]) -> str:
    """Render a sequence of bits as a string of digits."""
    return "".join(str(bit) for bit in bits)