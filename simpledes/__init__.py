"""Simplified DES (S-DES) encryption of 8-bit blocks with 10-bit keys."""

__version__ = "0.1.0"