"""Error types for question construction."""


class QuestionError(Exception):
    """Base error for all prompt_question errors."""


class InvalidArgument(QuestionError, ValueError):
    """Raised when a question cannot be built from the given arguments."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
