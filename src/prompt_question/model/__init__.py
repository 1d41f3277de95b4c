"""Question model layer -- public type re-exports."""

from prompt_question.model.question import Question, is_question, normalize_fields

__all__ = [
    "Question",
    "is_question",
    "normalize_fields",
]
