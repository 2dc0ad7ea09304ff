"""Network configuration constants for the quiz API."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 5000
PORT_ENV_VAR: str = "PORT"
API_PREFIX: str = "/api"
DOCS_PATH: str = "/api-docs"
OPENAPI_PATH: str = "/openapi.json"
