"""Protocols describing the choices collaborator of a Question."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from prompt_question.choices.records import Choice, Separator


class ChoicesCollection(Protocol):
    """A normalized, ordered collection of selectable items.

    Toggle operations are optional: a Question treats a collection without
    ``toggle``/``toggle_all`` as read-only and skips those calls.
    Checked state is read from the ``checked`` flag of each record in ``items``.
    """

    items: list[Choice | Separator]

    @property
    def keys(self) -> list[str]: ...

    def get(self, key: str | int) -> Choice | None: ...

    def add_choice(self, choice: Any) -> Any: ...

    def add_choices(self, choices: Iterable[Any]) -> Any: ...

    def separator(self, line: str | None = None) -> Separator: ...


class ChoicesFactory(Protocol):
    """Builds a collection from a raw list and the owning question's options."""

    def __call__(
        self, choices: Iterable[Any] | None, options: Mapping[str, Any] | None
    ) -> ChoicesCollection: ...
