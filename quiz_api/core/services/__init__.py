"""Collaborators used by the quiz service facade."""

from quiz_api.core.services.quiz_store import QuizStore
from quiz_api.core.services.scoreboard import record_answer

__all__ = ["QuizStore", "record_answer"]
