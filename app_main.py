"""Application entry point for the quiz API."""

from __future__ import annotations

import os

from quiz_api.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, PORT_ENV_VAR
from quiz_api.core.quiz_service import QuizService
from quiz_api.core.services.quiz_store import QuizStore
from quiz_api.server.api_server import run_api_server
from quiz_api.utils.logging_config import configure_logging


def resolve_port(environ: dict[str, str] | None = None) -> int:
    """Return the listening port, honouring the ``PORT`` environment variable."""
    environ = dict(os.environ) if environ is None else environ
    raw_value = environ.get(PORT_ENV_VAR, "").strip()
    if not raw_value:
        return DEFAULT_PORT
    try:
        port = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{PORT_ENV_VAR} must be an integer, got {raw_value!r}.") from exc
    if not 0 < port < 65536:
        raise ValueError(f"{PORT_ENV_VAR} must be between 1 and 65535, got {port}.")
    return port


def main() -> None:
    """Initialize logging, wire the service to a fresh store and serve the API."""
    logger = configure_logging()
    port = resolve_port()
    logger.info("Starting quiz API on port %d", port)

    quiz_service = QuizService(QuizStore())
    run_api_server(quiz_service=quiz_service, host=DEFAULT_HOST, port=port)


if __name__ == "__main__":
    main()
