from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class RoleVO(BaseModel):
    id: int
    name: str | None = None
    label: str | None = None
    is_disable: bool = False
    model_config = ConfigDict(from_attributes=True)


class UserInfoBase(BaseModel):
    email: str | None = None
    nickname: str
    avatar: str
    intro: str | None = None
    website: str | None = None


class UserInfo(UserInfoBase):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)


class UserInfoVO(UserInfo):
    """Profile plus the ids of articles and comments the user has liked."""
    article_like_set: List[str] = Field(default_factory=list)
    comment_like_set: List[str] = Field(default_factory=list)


class UserVO(BaseModel):
    """Flattened auth + profile view used by user list/detail pages."""
    id: int
    user_info_id: int
    avatar: str | None = None
    nickname: str | None = None
    login_type: int
    ip_address: str | None = None
    ip_source: str | None = None
    created_at: datetime | None = None
    last_login_time: datetime | None = None
    is_disable: bool
    roles: List[RoleVO] = Field(default_factory=list)

    @classmethod
    def from_auth(cls, user_auth) -> "UserVO":
        info = user_auth.user_info
        return cls(
            id=user_auth.id,
            user_info_id=user_auth.user_info_id,
            avatar=info.avatar if info is not None else None,
            nickname=info.nickname if info is not None else None,
            login_type=user_auth.login_type,
            ip_address=user_auth.ip_address,
            ip_source=user_auth.ip_source,
            created_at=user_auth.created_at,
            last_login_time=user_auth.last_login_time,
            is_disable=user_auth.is_disable,
            roles=[RoleVO.model_validate(role) for role in user_auth.roles],
        )
