"""Tests for the byte-level style name parser."""

from __future__ import annotations

import string

import pytest

from snn.domain.errors import EmptyInputError, InputTooLongError, InvalidFormatError
from snn.domain.parser import (
    ACCEPTING_STATES,
    ScanState,
    is_valid,
    parse_name,
    scan,
    split_suffix,
)


class TestParseNameValid:
    @pytest.mark.parametrize(
        "name",
        ["Chess", "Shogi", "Xiangqi", "Makruk", "Go", "CHESS", "ABC", "ChEsS"],
    )
    def test_letters_only(self, name: str) -> None:
        assert parse_name(name) == name

    @pytest.mark.parametrize("letter", list(string.ascii_uppercase))
    def test_single_uppercase_letter(self, letter: str) -> None:
        assert parse_name(letter) == letter

    @pytest.mark.parametrize("name", ["Chess960", "Shogi2", "G5", "XY123", "A1"])
    def test_numeric_suffix(self, name: str) -> None:
        assert parse_name(name) == name

    def test_leading_zero_suffix_kept_verbatim(self) -> None:
        assert parse_name("Chess01") == "Chess01"

    def test_exact_max_length(self) -> None:
        name = "Abcdefghijklmnopqrstuvwxyz123456"
        assert len(name.encode("utf-8")) == 32
        assert parse_name(name) == name

    def test_returns_same_object(self) -> None:
        name = "Chess"
        assert parse_name(name) is name


class TestParseNameErrors:
    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            parse_name("")

    def test_33_bytes(self) -> None:
        name = "Abcdefghijklmnopqrstuvwxyz1234567"
        assert len(name.encode("utf-8")) == 33
        with pytest.raises(InputTooLongError):
            parse_name(name)

    def test_very_long(self) -> None:
        with pytest.raises(InputTooLongError):
            parse_name("Chess" * 100)

    def test_length_counts_bytes_not_characters(self) -> None:
        """11 three-byte characters are 33 bytes."""
        name = "中" * 11
        assert len(name) == 11
        with pytest.raises(InputTooLongError):
            parse_name(name)

    def test_length_checked_before_format(self) -> None:
        with pytest.raises(InputTooLongError):
            parse_name("-" * 40)

    def test_type_checked_before_length(self) -> None:
        with pytest.raises(InvalidFormatError):
            parse_name(["A"] * 40)

    @pytest.mark.parametrize("value", [None, 123, 4.2, b"Chess", ["Chess"], {"a": 1}])
    def test_non_string(self, value: object) -> None:
        with pytest.raises(InvalidFormatError):
            parse_name(value)

    @pytest.mark.parametrize(
        "name",
        [
            "chess",  # lowercase start
            "1Chess",  # digit start
            "Chess960A",  # letters after digits
            "Chess-960",  # hyphen
            "Chess_Variant",  # underscore
            "Chess 960",  # space
            " Chess",  # leading space
            "Chess ",  # trailing space
            "Chess.",  # punctuation
            "C9h",  # letter after single digit
        ],
    )
    def test_bad_format(self, name: str) -> None:
        with pytest.raises(InvalidFormatError):
            parse_name(name)

    @pytest.mark.parametrize("char", ["\n", "\r", "\t", "\x00", "\x7f", "\x1b"])
    def test_control_characters(self, char: str) -> None:
        with pytest.raises(InvalidFormatError):
            parse_name(f"Chess{char}")

    @pytest.mark.parametrize(
        "name",
        [
            "Chéss",  # accented letter
            "Échecs",  # accented first letter
            "Chess\u200b",  # zero-width space
            "Che\u0301ss",  # combining mark
            "\u0421hess",  # Cyrillic homoglyph of C
            "象棋",  # CJK
            "Chess\uff19",  # fullwidth digit
            "Chess\ud800",  # lone surrogate
        ],
    )
    def test_non_ascii_rejected(self, name: str) -> None:
        with pytest.raises(InvalidFormatError):
            parse_name(name)


class TestIsValid:
    def test_true(self) -> None:
        assert is_valid("Chess960") is True

    @pytest.mark.parametrize("value", ["", "chess", "A" * 33, None, 0, [], {}])
    def test_false_never_raises(self, value: object) -> None:
        assert is_valid(value) is False


class TestScan:
    def test_empty_stays_in_start(self) -> None:
        assert scan(b"") is ScanState.START
        assert ScanState.START not in ACCEPTING_STATES

    def test_letters(self) -> None:
        assert scan(b"Chess") is ScanState.LETTERS

    def test_digits(self) -> None:
        assert scan(b"Chess960") is ScanState.DIGITS

    def test_reject_is_absorbing(self) -> None:
        assert scan(b"Chess960A123") is ScanState.REJECT

    def test_lowercase_start_rejected(self) -> None:
        assert scan(b"c") is ScanState.REJECT

    def test_high_bytes_rejected(self) -> None:
        assert scan("Chéss".encode()) is ScanState.REJECT

    def test_accepting_states(self) -> None:
        assert ACCEPTING_STATES == {ScanState.LETTERS, ScanState.DIGITS}


class TestSplitSuffix:
    def test_with_suffix(self) -> None:
        assert split_suffix("Chess960") == ("Chess", "960")

    def test_without_suffix(self) -> None:
        assert split_suffix("Shogi") == ("Shogi", "")

    def test_leading_zeros(self) -> None:
        assert split_suffix("Chess01") == ("Chess", "01")
