"""Question: a normalized description of one prompt."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from types import FunctionType
from typing import Any

from prompt_question.choices import Choices, ChoicesCollection, ChoicesFactory, Separator
from prompt_question.config import QuestionConfig
from prompt_question.errors import InvalidArgument

log = logging.getLogger("prompt_question")

_MISSING: Any = object()


def is_question(value: Any) -> bool:
    """Return True if *value* carries the ``is_question`` marker."""
    return getattr(value, "is_question", False) is True


def normalize_fields(
    name: Any,
    message: Any = None,
    options: Any = None,
    *,
    config: QuestionConfig | None = None,
) -> dict[str, Any]:
    """Collapse the accepted argument shapes into one flat field mapping.

    Accepted shapes:
    - ``("color")``
    - ``("color", "Favorite color?")``
    - ``("color", "Favorite color?", {"default": "blue"})``
    - ``("color", ["red", "blue"])`` -- a list message is the choices list
    - ``("color", "Favorite color?", ["red", "blue"])`` -- likewise for options
    - ``({"name": "color", ...})`` -- any mapping argument is merged as fields

    ``message`` falls back to ``name``, ``options`` to ``{}`` and ``type`` to
    the configured default. A ``radio`` field is moved into ``options``.
    """
    config = config or QuestionConfig()

    args: dict[str, Any] = {"name": name, "message": message, "options": options}
    if isinstance(message, (list, tuple)):
        args["message"] = None
        args["choices"] = list(message)
    if isinstance(options, (list, tuple)):
        args["options"] = {"choices": list(options)}

    fields: dict[str, Any] = {}
    for key, value in args.items():
        if isinstance(value, Mapping):
            fields.update(value)
        elif value is not None:
            fields[key] = value

    for key in fields:
        if not isinstance(key, str):
            raise InvalidArgument(f"question field names must be strings, got {key!r}")

    name_value = fields.get("name")
    if not isinstance(name_value, str) or not name_value:
        raise InvalidArgument(
            f"expected question name to be a non-empty string, got {name_value!r}",
            field="name",
        )

    opts = fields.get("options") or {}
    if not isinstance(opts, Mapping):
        raise InvalidArgument(
            f"expected options to be a mapping, got {type(opts).__name__}", field="options"
        )
    fields["options"] = dict(opts)
    if "radio" in fields:
        fields["options"]["radio"] = fields.pop("radio")

    fields["message"] = fields.get("message") or name_value
    if fields.get("type") is None:
        fields["type"] = config.default_type
    return fields


class Question:
    """A normalized description of one prompt question.

    Every normalized field becomes an instance attribute (``name``,
    ``message``, ``type``, ``options``, ``default`` and anything else the
    caller supplied). The ``choices`` collection is built on first use by the
    injected factory, over this question's ``options``.
    """

    is_question = True
    default: Any = None

    def __init__(
        self,
        name: str | Mapping[str, Any],
        message: str | Iterable[Any] | Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | Iterable[Any] | None = None,
        *,
        choices_factory: ChoicesFactory | None = None,
        config: QuestionConfig | None = None,
    ) -> None:
        self._config = config or QuestionConfig()
        self._choices_factory: ChoicesFactory = choices_factory or Choices
        self._choices: ChoicesCollection | None = None

        fields = normalize_fields(name, message, options, config=self._config)
        reserved = sorted(key for key in fields if key.startswith("_") or key in _RESERVED)
        if reserved:
            raise InvalidArgument(
                f"reserved question field(s): {', '.join(reserved)}", field=reserved[0]
            )

        self._cache = fields
        for key, value in fields.items():
            if key != "choices":
                setattr(self, key, value)
        if "choices" in fields:
            self.choices = fields["choices"]

    # --- construction ---------------------------------------------------------

    @classmethod
    def create(
        cls,
        name: Any = _MISSING,
        message: Any = None,
        options: Any = None,
        *,
        choices_factory: ChoicesFactory | None = None,
        config: QuestionConfig | None = None,
    ) -> Question:
        """Build a question from any accepted argument shape.

        An existing question is returned unchanged rather than copied.
        """
        if name is _MISSING:
            raise InvalidArgument("expected a question name or a mapping of fields")
        if is_question(name):
            return name
        return cls(name, message, options, choices_factory=choices_factory, config=config)

    @classmethod
    def from_name(cls, name: str, **kwargs: Any) -> Question:
        return cls(name, **kwargs)

    @classmethod
    def from_name_and_message(cls, name: str, message: str, **kwargs: Any) -> Question:
        return cls(name, message, **kwargs)

    @classmethod
    def from_full(
        cls, name: str, message: str, options: Mapping[str, Any], **kwargs: Any
    ) -> Question:
        return cls(name, message, options, **kwargs)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], **kwargs: Any) -> Question:
        return cls(dict(fields), **kwargs)

    # --- choices --------------------------------------------------------------

    @property
    def choices(self) -> ChoicesCollection:
        if self._choices is None:
            log.debug("Materializing choices for question %r", self.name)
            self._choices = self._choices_factory(self.options.get("choices"), self.options)
        return self._choices

    @choices.setter
    def choices(self, value: Iterable[Any] | None) -> None:
        items = list(value) if value is not None else []
        self._cache["choices"] = items
        self._choices = self._choices_factory(items, self.options)

    @property
    def has_choices(self) -> bool:
        """True once the choices collection has been built."""
        return self._choices is not None

    def ensure_choices(self) -> ChoicesCollection:
        return self.choices

    def get_choice(self, key: str | int) -> Any:
        return self.choices.get(key)

    def add_choice(self, choice: Any) -> Question:
        self.choices.add_choice(choice)
        return self

    def add_choices(self, choices: Iterable[Any]) -> Question:
        self.choices.add_choices(choices)
        return self

    def toggle_choice(self, key: str | int) -> Question:
        toggle = getattr(self.choices, "toggle", None)
        if toggle is None:
            log.debug("%s has no toggle(); ignoring", type(self.choices).__name__)
        else:
            toggle(key)
        return self

    def toggle_all_choices(self) -> Question:
        toggle_all = getattr(self.choices, "toggle_all", None)
        if toggle_all is None:
            log.debug("%s has no toggle_all(); ignoring", type(self.choices).__name__)
        else:
            toggle_all()
        return self

    def separator(self, text: str | None = None) -> Separator:
        return self.choices.separator(text if text is not None else self._config.separator_line)

    # --- answers --------------------------------------------------------------

    @property
    def has_default(self) -> bool:
        return self._is_present(self.default)

    def get_answer(self, value: Any = None) -> Any:
        """Resolve the answer for this question.

        Checked choices win over everything else. Otherwise *value* is
        returned when present, then ``default``, then ``""``.
        """
        if self._choices is not None:
            checked = self._checked_answer()
            if checked is not None:
                return checked
        if self._is_present(value):
            return value
        return self.default if self.has_default else ""

    def _checked_values(self) -> list[Any]:
        return [
            getattr(item, "value", None)
            for item in self._choices.items
            if getattr(item, "checked", False)
        ]

    def _checked_answer(self) -> Any:
        choices = self._choices
        default = self.default
        is_index = isinstance(default, int) and not isinstance(default, bool)
        if is_index and not self._checked_values():
            toggle = getattr(choices, "toggle", None)
            if toggle is not None:
                toggle(default)
        checked = self._checked_values()
        if not checked:
            return None
        if self.options.get("radio"):
            return checked[0]
        return checked

    def _is_present(self, value: Any) -> bool:
        if value is None:
            return False
        if self._config.strict_answers:
            return str(value) != ""
        return True

    # --- copying --------------------------------------------------------------

    def clone(self) -> Question:
        """Return an independent copy sharing no mutable state with this one."""
        fields = copy.deepcopy(self._cache)
        fields.pop("choices", None)
        other = type(self)(
            fields, choices_factory=self._choices_factory, config=self._config
        )
        if self._choices is not None:
            other.choices = copy.deepcopy(list(self._choices.items))

        for key, value in vars(self).items():
            if key not in vars(other):
                setattr(other, key, copy.deepcopy(value))
        log.debug("Cloned question %r", self.name)
        return other

    def to_dict(self) -> dict[str, Any]:
        """Public fields, plus the serialized choices once they exist."""
        data = {key: value for key, value in vars(self).items() if not key.startswith("_")}
        if self._choices is not None:
            data["choices"] = [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self._choices.items
            ]
        return data

    def __repr__(self) -> str:
        return f"Question(name={self.name!r}, type={self.type!r}, message={self.message!r})"


_RESERVED = frozenset(
    key
    for key, attr in vars(Question).items()
    if not key.startswith("_")
    and key != "choices"
    and isinstance(attr, (FunctionType, property, classmethod, staticmethod))
) | {"is_question"}
