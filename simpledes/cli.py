"""Command line entry point: encrypts one block and prints it in binary."""

import argparse
import sys

from simpledes.bits import BitFormatError, format_bits, parse_bits
from simpledes.cipher import BLOCK_LENGTH, encrypt
from simpledes.keys import KEY_LENGTH

DEFAULT_PLAINTEXT = (0, 1, 0, 1, 0, 0, 0, 1)
DEFAULT_KEY = (0, 1, 0, 1, 0, 0, 1, 1, 0, 0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simpledes",
        description="Encrypt an 8-bit block with a 10-bit key using simplified DES.",
    )
    parser.add_argument("plaintext", nargs="?", help="8-bit binary plaintext")
    parser.add_argument("key", nargs="?", help="10-bit binary key")
    return parser


def main(argv=None) -> int:
    """Run the command; without arguments the built-in block and key are used."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.plaintext is None:
        plaintext, key = DEFAULT_PLAINTEXT, DEFAULT_KEY
    else:
        if args.key is None:
            parser.error("a key is required when a plaintext is given")
        try:
            plaintext = parse_bits(args.plaintext, BLOCK_LENGTH)
        except BitFormatError:
            print(
                f"Wrong input, plaintext should be a binary with size {BLOCK_LENGTH}!"
            )
            return 1
        try:
            key = parse_bits(args.key, KEY_LENGTH)
        except BitFormatError:
            print(f"Wrong input, key should be a binary with size {KEY_LENGTH}!")
            return 1

    print(format_bits(encrypt(plaintext, key)))
    return 0


if __name__ == "__main__":
    sys.exit(main())