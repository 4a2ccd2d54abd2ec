from itertools import product

import pytest

from simpledes.bits import int_to_bits, parse_bits
from simpledes.cipher import S0, S1, encrypt, round_function, sbox_lookup

ALL_BLOCKS = list(product((0, 1), repeat=8))


def test_worked_example():
    plain_bits = parse_bits("10010111", 8)
    key_bits = parse_bits("1010000010", 10)
    assert encrypt(plain_bits, key_bits) == parse_bits("00111000", 8)


@pytest.mark.parametrize("row,column", list(product(range(4), repeat=2)))
def test_sbox_lookup_reads_rows_and_columns(row, column):
    row_bits = int_to_bits(row, 2)
    column_bits = int_to_bits(column, 2)
    bits = (row_bits[0], column_bits[0], column_bits[1], row_bits[1])
    assert sbox_lookup(bits, S0) == int_to_bits(S0[row][column], 2)
    assert sbox_lookup(bits, S1) == int_to_bits(S1[row][column], 2)


def test_sbox_lookup_rejects_wrong_size():
    with pytest.raises(ValueError):
        sbox_lookup((0, 1, 0), S0)


def test_round_function_gives_four_bits():
    result = round_function((1, 1, 0, 1), (1, 0, 1, 0, 0, 1, 0, 0))
    assert len(result) == 4
    assert set(result) <= {0, 1}


def test_encryption_is_a_permutation_of_blocks():
    key_bits = parse_bits("0101001100", 10)
    ciphertexts = {encrypt(block, key_bits) for block in ALL_BLOCKS}
    assert len(ciphertexts) == 256


def test_encryption_is_deterministic():
    plain_bits = parse_bits("01010001", 8)
    key_bits = parse_bits("0101001100", 10)
    assert encrypt(plain_bits, key_bits) == encrypt(list(plain_bits), list(key_bits))


def test_rejects_wrong_block_length():
    with pytest.raises(ValueError):
        encrypt((0,) * 7, (0,) * 10)


def test_rejects_wrong_key_length():
    with pytest.raises(ValueError):
        encrypt((0,) * 8, (0,) * 9)