"""Tests for the top-level snn API."""

from __future__ import annotations

import pytest

import snn
from snn import (
    MAX_LENGTH,
    EmptyInputError,
    InputTooLongError,
    InvalidFormatError,
    StyleName,
    StyleNameError,
)


class TestParse:
    def test_returns_style_name(self) -> None:
        result = snn.parse("Chess")
        assert isinstance(result, StyleName)
        assert str(result) == "Chess"

    def test_numeric_suffix(self) -> None:
        assert str(snn.parse("Chess960")) == "Chess960"

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError, match="^empty input$"):
            snn.parse("")

    def test_lowercase_start(self) -> None:
        with pytest.raises(InvalidFormatError, match="^invalid format$"):
            snn.parse("chess")

    def test_too_long(self) -> None:
        with pytest.raises(InputTooLongError, match="^input too long$"):
            snn.parse("A" * 33)

    def test_errors_share_base(self) -> None:
        with pytest.raises(StyleNameError):
            snn.parse(None)


class TestValid:
    @pytest.mark.parametrize(
        "value",
        [None, 123, 1.5, True, [], ["Chess"], {}, {"name": "Chess"}, b"Chess", object()],
    )
    def test_non_strings_are_false(self, value: object) -> None:
        assert snn.valid(value) is False

    def test_hyphen(self) -> None:
        assert snn.valid("Chess-960") is False

    def test_valid(self) -> None:
        assert snn.valid("Xiangqi") is True


def test_max_length_constant() -> None:
    assert MAX_LENGTH == 32
    assert StyleName.MAX_LENGTH == 32


def test_version_exposed() -> None:
    assert isinstance(snn.__version__, str)
