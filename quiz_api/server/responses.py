"""Response envelope and payload shaping shared by all endpoints.

Every body has the form ``{"status": {"code", "message"}, "data"}``. Error
responses omit ``data`` unless there are field-level details to report.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from quiz_api.core.models import Quiz, SubmissionFeedback

_NO_DATA = object()


def envelope(status_code: int, message: str, data: Any = _NO_DATA) -> dict[str, Any]:
    body: dict[str, Any] = {"status": {"code": status_code, "message": message}}
    if data is not _NO_DATA:
        body["data"] = jsonable_encoder(data)
    return body


def respond(status_code: int, message: str, data: Any = _NO_DATA) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(status_code, message, data))


def respond_error(
    status_code: int,
    message: str,
    errors: list[dict[str, str]] | None = None,
) -> JSONResponse:
    if errors:
        return respond(status_code, message, {"errors": errors})
    return respond(status_code, message)


def redact_quiz(quiz: Quiz) -> dict[str, Any]:
    """Public view of a quiz: every question loses its ``correct_option``."""
    return {
        "id": quiz.id,
        "title": quiz.title,
        "questions": [
            {"id": question.id, "text": question.text, "options": list(question.options)}
            for question in quiz.questions
        ],
    }


def feedback_payload(feedback: SubmissionFeedback) -> dict[str, Any]:
    return {"isCorrect": feedback.is_correct, "correctOption": feedback.correct_option}
