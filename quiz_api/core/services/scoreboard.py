"""Result aggregation: folds graded answers into a quiz's result list."""

from __future__ import annotations

from quiz_api.core.models import Answer, Result


def find_result(results: list[Result], user_id: str) -> Result | None:
    return next((r for r in results if r.user_id == user_id), None)


def find_answer_index(result: Result, question_id: str) -> int:
    return next(
        (i for i, a in enumerate(result.answers) if a.question_id == question_id),
        -1,
    )


def record_answer(
    results: list[Result],
    quiz_id: str,
    user_id: str,
    answer: Answer,
) -> Result:
    """Apply ``answer`` to the user's result inside ``results`` and return it.

    A user gets a fresh result (score 0) on their first answer. Answering the
    same question again replaces the earlier answer in place: the earlier
    answer's point is taken back if it was correct, then the new answer's
    point is added if it is correct. The score therefore always equals the
    number of correct answers held by the result.
    """
    result = find_result(results, user_id)
    if result is None:
        result = Result(quiz_id=quiz_id, user_id=user_id)
        results.append(result)

    existing_index = find_answer_index(result, answer.question_id)
    if existing_index >= 0:
        if result.answers[existing_index].is_correct:
            result.score -= 1
        result.answers[existing_index] = answer
    else:
        result.answers.append(answer)

    if answer.is_correct:
        result.score += 1
    return result
