"""
Pydantic view objects built from ORM rows. These are never persisted.
"""

from .users import RoleVO, UserInfoBase, UserInfo, UserInfoVO, UserVO

__all__ = [
    "RoleVO",
    "UserInfoBase",
    "UserInfo",
    "UserInfoVO",
    "UserVO",
]
