"""HTTP layer: FastAPI application, auth and endpoints."""
