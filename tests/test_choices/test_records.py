"""Tests for Choice/Separator records and single-entry normalization."""

from __future__ import annotations

import pytest

from prompt_question.choices import Choice, Separator, normalize_choice
from prompt_question.config import DEFAULT_SEPARATOR_LINE
from prompt_question.errors import InvalidArgument


class TestChoice:
    def test_value_and_short_default_to_name(self) -> None:
        choice = Choice(name="red")
        assert choice.value == "red"
        assert choice.short == "red"
        assert choice.checked is False
        assert choice.disabled is False
        assert choice.type == "option"

    def test_enabled(self) -> None:
        assert Choice(name="a").enabled is True
        assert Choice(name="a", disabled=True).enabled is False
        assert Choice(name="a", disabled="Out of stock").enabled is False
        assert Choice(name="a", disabled="").enabled is True


class TestSeparator:
    def test_default_line(self) -> None:
        sep = Separator()
        assert sep.line == DEFAULT_SEPARATOR_LINE
        assert str(sep) == DEFAULT_SEPARATOR_LINE
        assert sep.type == "separator"

    def test_to_dict(self) -> None:
        assert Separator("--").to_dict() == {"type": "separator", "line": "--"}


class TestNormalizeChoice:
    def test_string(self) -> None:
        assert normalize_choice("red") == Choice(name="red", value="red", short="red")

    def test_mapping(self) -> None:
        choice = normalize_choice({"name": "Red", "value": "#f00", "checked": True})
        assert choice.name == "Red"
        assert choice.value == "#f00"
        assert choice.short == "Red"
        assert choice.checked is True

    def test_mapping_name_falls_back_to_value(self) -> None:
        choice = normalize_choice({"value": "red"})
        assert choice.name == "red"

    def test_null_disabled_is_enabled(self) -> None:
        choice = normalize_choice({"name": "a", "disabled": None})
        assert choice.disabled is False
        assert choice.enabled is True

    def test_mapping_without_name_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            normalize_choice({"short": "r"})

    def test_separator_mapping(self) -> None:
        assert normalize_choice({"type": "separator", "line": "=="}) == Separator("==")

    def test_number(self) -> None:
        choice = normalize_choice(3)
        assert choice.name == "3"
        assert choice.value == 3

    def test_records_are_copied(self) -> None:
        original = Choice(name="a", checked=True)
        copied = normalize_choice(original)
        assert copied == original
        assert copied is not original

        sep = Separator("--")
        assert normalize_choice(sep) is not sep

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            normalize_choice(object())
