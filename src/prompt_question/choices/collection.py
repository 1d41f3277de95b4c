"""Choices: the default collection backing Question.choices."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from prompt_question.choices.records import Choice, Separator, normalize_choice
from prompt_question.config import DEFAULT_SEPARATOR_LINE

log = logging.getLogger("prompt_question")


class Choices:
    """Ordered, de-duplicated collection of choices.

    ``options`` is the owning question's options mapping. It is kept by
    reference so a later ``options["radio"] = True`` changes toggle behavior.
    """

    def __init__(
        self,
        choices: Iterable[Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self.options: Mapping[str, Any] = options if options is not None else {}
        self.items: list[Choice | Separator] = []
        if choices:
            self.add_choices(choices)

    # --- lookup ---------------------------------------------------------------

    @property
    def choices(self) -> list[Choice]:
        """Selectable records, separators excluded."""
        return [item for item in self.items if isinstance(item, Choice)]

    @property
    def keys(self) -> list[str]:
        return [choice.name for choice in self.choices]

    @property
    def checked(self) -> list[Any]:
        """Values of checked choices, in order."""
        return [choice.value for choice in self.choices if choice.checked]

    @property
    def radio(self) -> bool:
        return bool(self.options.get("radio"))

    def get(self, key: str | int) -> Choice | None:
        """Find a choice by name, or by position among selectable records."""
        choices = self.choices
        if isinstance(key, int) and not isinstance(key, bool):
            if 0 <= key < len(choices):
                return choices[key]
            return None
        for choice in choices:
            if choice.name == key:
                return choice
        return None

    def is_checked(self, key: str | int) -> bool:
        choice = self.get(key)
        return choice is not None and choice.checked

    # --- mutation -------------------------------------------------------------

    def add_choice(self, choice: Any) -> Choice | Separator | None:
        """Normalize and append one entry. Returns None for a duplicate name."""
        item = normalize_choice(choice)
        if isinstance(item, Choice) and item.name in self.keys:
            log.debug("Skipping duplicate choice %r", item.name)
            return None
        self.items.append(item)
        return item

    def add_choices(self, choices: Iterable[Any]) -> list[Choice | Separator]:
        added = []
        for choice in choices:
            item = self.add_choice(choice)
            if item is not None:
                added.append(item)
        return added

    def toggle(self, key: str | int) -> None:
        """Flip one choice. In radio mode checking it clears every other choice."""
        target = self.get(key)
        if target is None or not target.enabled:
            log.debug("Toggle ignored for %r", key)
            return
        if self.radio and not target.checked:
            for choice in self.choices:
                if choice.enabled:
                    choice.checked = False
        target.checked = not target.checked

    def toggle_all(self) -> None:
        if self.radio:
            for choice in self.choices:
                if choice.enabled:
                    choice.checked = False
            return
        for choice in self.choices:
            if choice.enabled:
                choice.checked = not choice.checked

    def separator(self, line: str | None = None) -> Separator:
        return Separator(line if line is not None else DEFAULT_SEPARATOR_LINE)

    # --- dunder helpers -------------------------------------------------------

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Choice | Separator]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Choices(keys={self.keys}, checked={self.checked})"
