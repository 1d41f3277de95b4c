"""Choice normalization: records, the default collection, and its protocols."""

from prompt_question.choices.base import ChoicesCollection, ChoicesFactory
from prompt_question.choices.collection import Choices
from prompt_question.choices.records import Choice, Separator, normalize_choice

__all__ = [
    "ChoicesCollection",
    "ChoicesFactory",
    "Choices",
    "Choice",
    "Separator",
    "normalize_choice",
]
