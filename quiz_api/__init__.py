"""Quiz API: in-memory quiz taking service exposed over FastAPI."""
