from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SEPARATOR_LINE = "─" * 8


@dataclass(frozen=True)
class QuestionConfig:
    default_type: str = "input"
    separator_line: str = DEFAULT_SEPARATOR_LINE
    strict_answers: bool = False  # empty-string defaults and answers count as missing
