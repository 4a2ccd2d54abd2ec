"""Subkey schedule: derives the two 8-bit round keys from a 10-bit key."""

from collections.abc import Sequence

from simpledes.bits import Bits, permute, split

KEY_LENGTH = 10
P10 = (2, 4, 1, 6, 3, 9, 0, 8, 7, 5)
P8 = (5, 2, 6, 3, 7, 4, 9, 8)


def shift_halves(key: Sequence[int], shift: int) -> Bits:
    """Rotate each half of the key left by ``shift`` positions."""
    left, right = split(key)
    shift %= len(left) or 1
    return left[shift:] + left[:shift] + right[shift:] + right[:shift]


def generate_subkeys(key: Sequence[int]) -> tuple[Bits, Bits]:
    """Return the round keys K1 and K2 for a 10-bit key."""
    if len(key) != KEY_LENGTH:
        raise ValueError(f"key must have {KEY_LENGTH} bits, got {len(key)}")
    shifted = shift_halves(permute(key, P10), 1)
    first = permute(shifted, P8)
    shifted = shift_halves(shifted, 2)
    second = permute(shifted, P8)
    return first, second