import pytest

from simpledes.bits import format_bits
from simpledes.cipher import encrypt
from simpledes.cli import DEFAULT_KEY, DEFAULT_PLAINTEXT, main


def test_encrypts_given_block(capsys):
    assert main(["10010111", "1010000010"]) == 0
    assert capsys.readouterr().out == "00111000\n"


def test_uses_defaults_without_arguments(capsys):
    assert main([]) == 0
    expected = format_bits(encrypt(DEFAULT_PLAINTEXT, DEFAULT_KEY))
    assert capsys.readouterr().out == expected + "\n"


def test_default_values_match_source():
    assert format_bits(DEFAULT_PLAINTEXT) == "01010001"
    assert format_bits(DEFAULT_KEY) == "0101001100"


def test_bad_plaintext_reports_error(capsys):
    assert main(["1001011", "1010000010"]) == 1
    out = capsys.readouterr().out
    assert "plaintext should be a binary with size 8!" in out


def test_bad_key_reports_error(capsys):
    assert main(["10010111", "10100000x0"]) == 1
    out = capsys.readouterr().out
    assert "key should be a binary with size 10!" in out


def test_plaintext_checked_before_key(capsys):
    assert main(["abc", "def"]) == 1
    out = capsys.readouterr().out
    assert "plaintext" in out
    assert "key should" not in out


def test_missing_key_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["10010111"])
    assert excinfo.value.code == 2