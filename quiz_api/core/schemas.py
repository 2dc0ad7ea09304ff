"""Input schemas evaluated at the service boundary.

The models run in strict mode so a numeric string is not accepted where an
integer is expected and a number is not accepted where text is expected. A
float with no fractional part (``1.0``) still counts as an integer, since JSON
clients do not always tell the two apart. The HTTP layer declares its request
bodies with the same models, which keeps the generated OpenAPI document in
line with what the service accepts.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from quiz_api.core.errors import QuizValidationError


def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _tuple_to_list(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value


NonEmptyText = Annotated[StrictStr, Field(min_length=1)]
# Strict mode still rejects bool, str and fractional floats.
WholeNumber = Annotated[int, BeforeValidator(_integral_float_to_int)]
OptionList = Annotated[list[NonEmptyText], BeforeValidator(_tuple_to_list)]

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class QuestionInput(BaseModel):
    """A question as supplied by the quiz author, without an identifier."""

    model_config = ConfigDict(strict=True)

    text: NonEmptyText
    options: OptionList = Field(min_length=1)
    correct_option: WholeNumber = Field(ge=0)


class CreateQuizInput(BaseModel):
    """Payload schema for quiz creation."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {
                "title": "Sample Quiz",
                "questions": [
                    {"text": "2+2?", "options": ["2", "4", "6"], "correct_option": 1},
                ],
            }
        },
    )

    title: NonEmptyText
    questions: Annotated[list[QuestionInput], BeforeValidator(_tuple_to_list)] = Field(
        min_length=1
    )


class SubmitAnswerInput(BaseModel):
    """Payload schema for answer submission."""

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "quizId": "3f0c1e8e-0c47-4a4e-8f2e-1d3c2b7f9a10",
                "userId": "u1",
                "questionId": "b2a1d9c4-58a7-4d8e-9f61-0e4d2c6a7b35",
                "selectedOption": 1,
            }
        },
    )

    quiz_id: NonEmptyText = Field(alias="quizId")
    user_id: NonEmptyText = Field(alias="userId")
    question_id: NonEmptyText = Field(alias="questionId")
    selected_option: WholeNumber = Field(alias="selectedOption", ge=0)


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error entries into ``{"field", "message"}`` pairs."""
    described: list[dict[str, str]] = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] == "body":
            location = location[1:]
        if error.get("type") == "json_invalid":
            # loc carries the character offset of the decode failure
            location = []
        described.append(
            {
                "field": ".".join(location) or "body",
                "message": str(error.get("msg", "")),
            }
        )
    return described


def validate_input(model: type[_ModelT], data: Mapping[str, Any]) -> _ModelT:
    """Validate ``data`` against ``model`` or raise ``QuizValidationError``."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise QuizValidationError(errors=describe_errors(exc.errors())) from exc
