"""Persistence layer: engine/session management, ORM models, view schemas and repositories."""
