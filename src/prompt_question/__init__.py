"""prompt_question: normalized question objects for command-line prompt libraries."""

from __future__ import annotations

__version__ = "0.1.0"

from prompt_question.choices import Choice, Choices, ChoicesCollection, ChoicesFactory, Separator
from prompt_question.config import QuestionConfig
from prompt_question.errors import InvalidArgument, QuestionError
from prompt_question.model import Question, is_question

__all__ = [
    "__version__",
    # model
    "Question",
    "is_question",
    # choices
    "Choice",
    "Separator",
    "Choices",
    "ChoicesCollection",
    "ChoicesFactory",
    # config
    "QuestionConfig",
    # errors
    "QuestionError",
    "InvalidArgument",
]
