"""Simplified DES encryption of one 8-bit block under a 10-bit key."""

from collections.abc import Sequence

from simpledes.bits import Bits, int_to_bits, permute, split, xor
from simpledes.keys import generate_subkeys

BLOCK_LENGTH = 8
IP = (1, 5, 2, 0, 3, 7, 4, 6)
FP = (3, 0, 2, 4, 6, 1, 7, 5)
EP = (3, 0, 1, 2, 1, 2, 3, 0)
P4 = (1, 3, 2, 0)
S0 = ((1, 0, 3, 2), (3, 2, 1, 0), (0, 2, 1, 3), (3, 1, 3, 2))
S1 = ((0, 1, 2, 3), (2, 0, 1, 3), (3, 0, 1, 0), (2, 1, 0, 3))


def sbox_lookup(bits: Sequence[int], box: Sequence[Sequence[int]]) -> Bits:
    """Map four bits to two through an S-box.

    The outer bits pick the row and the inner bits pick the column.
    """
    if len(bits) != 4:
        raise ValueError(f"S-box input must have 4 bits, got {len(bits)}")
    row = bits[0] * 2 + bits[3]
    column = bits[1] * 2 + bits[2]
    return int_to_bits(box[row][column], 2)


def round_function(right: Sequence[int], subkey: Sequence[int]) -> Bits:
    """Mix a 4-bit half block with an 8-bit subkey."""
    mixed = xor(permute(right, EP), subkey)
    left_half, right_half = split(mixed)
    return permute(sbox_lookup(left_half, S0) + sbox_lookup(right_half, S1), P4)


def encrypt(plaintext: Sequence[int], key: Sequence[int]) -> Bits:
    """Encrypt an 8-bit block with a 10-bit key."""
    if len(plaintext) != BLOCK_LENGTH:
        raise ValueError(
            f"plaintext must have {BLOCK_LENGTH} bits, got {len(plaintext)}"
        )
    first, second = generate_subkeys(key)
    left, right = split(permute(plaintext, IP))
    left = xor(left, round_function(right, first))
    left, right = right, left
    left = xor(left, round_function(right, second))
    return permute(left + right, FP)