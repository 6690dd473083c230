"""
Error taxonomy for repository functions.

Callers see exactly two outcomes besides success: ``NotFound`` when a
single-row lookup or id-targeted update matched nothing, and ``StoreError``
for every other failure raised by the underlying store.
"""
from __future__ import annotations

from typing import Any, Optional


class RepositoryError(Exception):
    """Base class for data-access failures."""


class NotFound(RepositoryError):
    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key!r}")


class StoreError(RepositoryError):
    """Wraps a SQLAlchemy error; the original is kept on ``orig`` and as ``__cause__``."""

    def __init__(self, message: str, orig: Optional[BaseException] = None):
        self.orig = orig
        super().__init__(message)
