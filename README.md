# simpledes

Simplified DES (S-DES), the small teaching cipher: one 8-bit block of
plaintext, one 10-bit key, two Feistel rounds with the two S-boxes S0 and S1.

It is meant for learning how DES is put together and not for protecting
anything.

## Installing

```
pip install .
```

## Command line

```
simpledes PLAINTEXT KEY
```

`PLAINTEXT` is a string of exactly 8 binary digits and `KEY` a string of
exactly 10 binary digits. The encrypted block is printed as 8 binary digits:

```
$ simpledes 01010001 0101001100
00011110
```

Run with no arguments to encrypt the built-in example block `01010001`
with the built-in example key `0101001100`, which prints the same result.

If either argument is not a binary string of the right length, a message
saying which one is wrong is printed and the command exits with status 1.
Giving a plaintext without a key is a usage error.

The same command can be run as `python -m simpledes.cli`.

## Library

Bits are held as tuples of the integers 0 and 1.

- `simpledes.bits` – helpers: `xor`, `split`, `permute`, `int_to_bits`,
  `parse_bits` and `format_bits`. `parse_bits` raises `BitFormatError`
  (a `ValueError`) for text that is not a binary string of the requested
  size.
- `simpledes.keys` – the key schedule: `shift_halves` rotates both halves
  of a key left, and `generate_subkeys` derives the two 8-bit round keys
  K1 and K2 from a 10-bit key.
- `simpledes.cipher` – `sbox_lookup`, the round function `round_function`
  and `encrypt`, which runs the whole encryption (initial permutation, two
  rounds with a swap in between, and the final permutation).
- `simpledes.cli` – `main`, the entry point behind the `simpledes` command.

```python
from simpledes.bits import format_bits, parse_bits
from simpledes.cipher import encrypt

block = parse_bits("01010001", 8)
key = parse_bits("0101001100", 10)
print(format_bits(encrypt(block, key)))  # 00011110
```

## What it does not do

Only encryption is provided; there is no decryption function or command.

## Running the tests

```
pip install .[test]
pytest
```