"""FastAPI server that exposes the quiz endpoints."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from quiz_api.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from quiz_api.constants.api_constants import (
    ANSWER_SUBMITTED_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    QUIZ_CREATED_MESSAGE,
    QUIZ_RETRIEVED_MESSAGE,
    QUIZZES_RETRIEVED_MESSAGE,
    RESULTS_RETRIEVED_MESSAGE,
    VALIDATION_FAILED_MESSAGE,
)
from quiz_api.constants.network_constants import (
    API_PREFIX,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DOCS_PATH,
    OPENAPI_PATH,
)
from quiz_api.core.errors import QuizServiceError, QuizValidationError
from quiz_api.core.quiz_service import QuizService
from quiz_api.core.schemas import CreateQuizInput, SubmitAnswerInput, describe_errors
from quiz_api.server.responses import (
    feedback_payload,
    redact_quiz,
    respond,
    respond_error,
)

logger = logging.getLogger(__name__)

_QUIZ_TAG = "quizzes"
_ANSWER_TAG = "answers"


def _get_quiz_service_dependency(quiz_service: QuizService):
    def dependency() -> QuizService:
        return quiz_service

    return dependency


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuizServiceError)
    async def handle_service_error(request: Request, exc: QuizServiceError) -> JSONResponse:
        errors = exc.errors if isinstance(exc, QuizValidationError) else None
        return respond_error(exc.status_code, exc.message, errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return respond_error(400, VALIDATION_FAILED_MESSAGE, describe_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return respond_error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return respond_error(500, INTERNAL_ERROR_MESSAGE)


def create_api_app(quiz_service: QuizService) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz service."""
    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description=APP_ABOUT_TEXT,
        docs_url=DOCS_PATH,
        redoc_url=None,
        openapi_url=OPENAPI_PATH,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)
    quiz_service_dep = _get_quiz_service_dependency(quiz_service)

    @app.post(f"{API_PREFIX}/quizzes", status_code=201, tags=[_QUIZ_TAG])
    def create_quiz(
        payload: CreateQuizInput,
        service: QuizService = Depends(quiz_service_dep),
    ) -> JSONResponse:
        """Create a quiz. IDs are generated for the quiz and each question."""
        quiz = service.create_quiz(
            payload.title,
            [question.model_dump() for question in payload.questions],
        )
        return respond(201, QUIZ_CREATED_MESSAGE, quiz)

    @app.get(f"{API_PREFIX}/quizzes", tags=[_QUIZ_TAG])
    def list_quizzes(service: QuizService = Depends(quiz_service_dep)) -> JSONResponse:
        """List every quiz with the correct options hidden."""
        quizzes = [redact_quiz(quiz) for quiz in service.list_quizzes()]
        return respond(200, QUIZZES_RETRIEVED_MESSAGE, quizzes)

    @app.post(f"{API_PREFIX}/quizzes/answers", tags=[_ANSWER_TAG])
    def submit_answer(
        payload: SubmitAnswerInput,
        service: QuizService = Depends(quiz_service_dep),
    ) -> JSONResponse:
        """Submit or change one user's answer. The correct option is always returned."""
        feedback = service.submit_answer(
            payload.quiz_id,
            payload.user_id,
            payload.question_id,
            payload.selected_option,
        )
        return respond(200, ANSWER_SUBMITTED_MESSAGE, feedback_payload(feedback))

    @app.get(f"{API_PREFIX}/quizzes/{{quiz_id}}", tags=[_QUIZ_TAG])
    def get_quiz(quiz_id: str, service: QuizService = Depends(quiz_service_dep)) -> JSONResponse:
        """Fetch a quiz without revealing the correct options."""
        quiz = service.get_quiz_by_id(quiz_id)
        return respond(200, QUIZ_RETRIEVED_MESSAGE, redact_quiz(quiz))

    @app.get(f"{API_PREFIX}/quizzes/{{quiz_id}}/results", tags=[_ANSWER_TAG])
    def get_results(quiz_id: str, service: QuizService = Depends(quiz_service_dep)) -> JSONResponse:
        """Score and answer history of every user who answered the quiz."""
        results = service.get_results(quiz_id)
        return respond(200, RESULTS_RETRIEVED_MESSAGE, results)

    return app


def run_api_server(
    quiz_service: QuizService,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the API with uvicorn until the process is stopped."""
    app = create_api_app(quiz_service)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    logger.info("Docs available at http://%s:%d%s", host, port, DOCS_PATH)
    server.run()
