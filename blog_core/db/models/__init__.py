"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes from one place so callers can
write ``from blog_core.db import models``.
"""

from .base import Base, Model, now_utc  # re-export

from .users import UserInfo, UserAuth
from .roles import Role, UserAuthRole

__all__ = [
    # base
    "Base",
    "Model",
    "now_utc",
    # users
    "UserInfo",
    "UserAuth",
    # roles
    "Role",
    "UserAuthRole",
]
