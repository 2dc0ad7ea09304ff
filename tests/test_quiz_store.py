"""Tests for the in-memory quiz store."""

from __future__ import annotations

from quiz_api.core.models import Question, Quiz, Result
from quiz_api.core.services.quiz_store import QuizStore


def _quiz(quiz_id: str, title: str = "Quiz") -> Quiz:
    return Quiz(
        id=quiz_id,
        title=title,
        questions=[Question(id="q1", text="?", options=["a", "b"], correct_option=0)],
    )


def test_create_quiz_returns_stored_quiz() -> None:
    store = QuizStore()
    quiz = _quiz("a")

    assert store.create_quiz(quiz) is quiz
    assert store.get_quiz("a") is quiz


def test_create_quiz_overwrites_same_id() -> None:
    store = QuizStore()
    store.create_quiz(_quiz("a", title="first"))
    store.create_quiz(_quiz("a", title="second"))

    assert store.get_quiz("a").title == "second"
    assert len(store.get_all_quizzes()) == 1


def test_missing_entries_return_none() -> None:
    store = QuizStore()

    assert store.get_quiz("nope") is None
    assert store.get_results("nope") is None


def test_get_all_quizzes_keeps_insertion_order() -> None:
    store = QuizStore()
    for quiz_id in ("c", "a", "b"):
        store.create_quiz(_quiz(quiz_id))

    assert [quiz.id for quiz in store.get_all_quizzes()] == ["c", "a", "b"]


def test_save_results_replaces_whole_list() -> None:
    store = QuizStore()
    store.save_results("a", [Result(quiz_id="a", user_id="u1")])
    store.save_results("a", [Result(quiz_id="a", user_id="u2")])

    assert [r.user_id for r in store.get_results("a")] == ["u2"]
