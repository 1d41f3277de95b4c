"""Choice and Separator records plus single-entry normalization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from prompt_question.config import DEFAULT_SEPARATOR_LINE
from prompt_question.errors import InvalidArgument


@dataclass
class Choice:
    """A single selectable item."""

    name: str
    value: Any = None
    short: str | None = None
    checked: bool = False
    disabled: bool | str = False

    type = "option"

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.name
        if self.short is None:
            self.short = self.name

    @property
    def enabled(self) -> bool:
        return not self.disabled

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "short": self.short,
            "checked": self.checked,
            "disabled": self.disabled,
        }


@dataclass
class Separator:
    """Display-only marker placed between choices."""

    line: str = DEFAULT_SEPARATOR_LINE

    type = "separator"

    def __str__(self) -> str:
        return self.line

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "line": self.line}


def normalize_choice(raw: Any) -> Choice | Separator:
    """Turn a string, mapping, Choice or Separator into a fresh record.

    - ``"red"`` -> ``Choice(name="red", value="red", short="red")``
    - ``{"name": "Red", "value": "#f00"}`` -> value kept, short from name
    - ``{"type": "separator", "line": "--"}`` -> ``Separator("--")``

    Raises InvalidArgument for entries without a usable name.
    """
    if isinstance(raw, Separator):
        return Separator(raw.line)
    if isinstance(raw, Choice):
        return Choice(
            name=raw.name,
            value=raw.value,
            short=raw.short,
            checked=raw.checked,
            disabled=raw.disabled,
        )
    if isinstance(raw, str):
        return Choice(name=raw)
    if isinstance(raw, Mapping):
        if raw.get("type") == "separator":
            return Separator(raw.get("line") or DEFAULT_SEPARATOR_LINE)
        name = raw.get("name")
        if name is None:
            name = raw.get("value")
        if name is None or name == "":
            raise InvalidArgument(f"choice has no name or value: {raw!r}", field="choices")
        return Choice(
            name=str(name),
            value=raw.get("value"),
            short=raw.get("short"),
            checked=bool(raw.get("checked", False)),
            disabled=raw.get("disabled") or False,
        )
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return Choice(name=str(raw), value=raw)
    raise InvalidArgument(f"unsupported choice type: {type(raw).__name__}", field="choices")
