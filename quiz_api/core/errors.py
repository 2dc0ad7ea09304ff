"""Exceptions raised by the quiz service and translated by the HTTP layer."""

from __future__ import annotations

from quiz_api.constants.api_constants import VALIDATION_FAILED_MESSAGE


class QuizServiceError(Exception):
    """Base class for every error the service reports to its callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QuizValidationError(QuizServiceError):
    """Raised when an input is missing a field or carries a malformed value."""

    status_code = 400

    def __init__(
        self,
        message: str = VALIDATION_FAILED_MESSAGE,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []


class QuizNotFoundError(QuizServiceError):
    """Raised when a referenced quiz or question does not exist."""

    status_code = 404
