"""Shared fixtures: every test gets its own store, service and app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from quiz_api.core.quiz_service import QuizService
from quiz_api.core.services.quiz_store import QuizStore
from quiz_api.server.api_server import create_api_app

SAMPLE_QUESTIONS = [
    {"text": "2+2?", "options": ["2", "4", "6"], "correct_option": 1},
    {"text": "Capital of France?", "options": ["Paris", "Rome"], "correct_option": 0},
]


@pytest.fixture
def store() -> QuizStore:
    return QuizStore()


@pytest.fixture
def service(store: QuizStore) -> QuizService:
    return QuizService(store)


@pytest.fixture
def sample_quiz(service: QuizService):
    return service.create_quiz("Sample Quiz", SAMPLE_QUESTIONS)


@pytest.fixture
def client(service: QuizService) -> TestClient:
    return TestClient(create_api_app(service))
