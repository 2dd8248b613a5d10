"""Web layer: FastAPI app, templates, settings."""
