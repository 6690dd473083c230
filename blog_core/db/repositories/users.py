"""
User repository functions.

Reads and writes over user profiles (``user_info``), credentials
(``user_auth``) and the ``user_role`` join table. Every function takes the
caller's session; single-row misses raise ``NotFound`` and any SQLAlchemy
failure is rolled back and re-raised as ``StoreError``.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from blog_core.db import models, schemas
from blog_core.db.errors import NotFound, StoreError
from blog_core.db.pagination import paginate

logger = logging.getLogger(__name__)


def _store_failure(db: Session, action: str, exc: SQLAlchemyError) -> StoreError:
    db.rollback()
    logger.exception("Store error during %s", action)
    return StoreError(f"{action} failed: {exc}", orig=exc)


def _update_columns(db: Session, model, row_id: int, values: dict) -> None:
    """Write exactly ``values`` to the row with ``row_id``; no commit."""
    matched = db.query(model).filter(model.id == row_id).update(values)
    if matched == 0:
        db.rollback()
        logger.debug("%s %s not found for update", model.__name__, row_id)
        raise NotFound(model.__name__, row_id)


def get_user_info_by_id(db: Session, user_info_id: int) -> models.UserInfo:
    try:
        user_info = db.query(models.UserInfo).filter(models.UserInfo.id == user_info_id).first()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "get_user_info_by_id", exc) from exc
    if user_info is None:
        logger.debug("UserInfo %s not found", user_info_id)
        raise NotFound("UserInfo", user_info_id)
    return user_info


def get_user_auth_by_id(db: Session, user_auth_id: int) -> models.UserAuth:
    try:
        user_auth = db.query(models.UserAuth).filter(models.UserAuth.id == user_auth_id).first()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "get_user_auth_by_id", exc) from exc
    if user_auth is None:
        logger.debug("UserAuth %s not found", user_auth_id)
        raise NotFound("UserAuth", user_auth_id)
    return user_auth


def get_user_auth_by_username(db: Session, username: str) -> models.UserAuth:
    try:
        user_auth = db.query(models.UserAuth).filter(models.UserAuth.username == username).first()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "get_user_auth_by_username", exc) from exc
    if user_auth is None:
        logger.debug("UserAuth with username %r not found", username)
        raise NotFound("UserAuth", username)
    return user_auth


def get_user_list(
    db: Session,
    page: int,
    size: int,
    login_type: int = 0,
    nickname: str = "",
    username: str = "",
) -> Tuple[List[models.UserAuth], int]:
    """Return one page of credentials with profile and roles loaded, plus the unpaginated total.

    ``login_type`` 0 means any type; an empty ``username`` skips that filter.
    The nickname filter always applies, so an empty pattern matches every row
    that has a profile. Patterns are literal substrings.
    """
    q = db.query(models.UserAuth)
    if login_type != 0:
        q = q.filter(models.UserAuth.login_type == login_type)
    if username:
        q = q.filter(models.UserAuth.username.contains(username, autoescape=True))
    q = (
        q.outerjoin(models.UserInfo, models.UserInfo.id == models.UserAuth.user_info_id)
        .filter(models.UserInfo.nickname.contains(nickname, autoescape=True))
    )
    try:
        total = q.count()
        rows = paginate(
            q.options(
                selectinload(models.UserAuth.user_info),
                selectinload(models.UserAuth.roles),
            ).order_by(models.UserAuth.id),
            page,
            size,
        ).all()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "get_user_list", exc) from exc
    return rows, total


def get_user_vo_list(
    db: Session,
    page: int,
    size: int,
    login_type: int = 0,
    nickname: str = "",
    username: str = "",
) -> Tuple[List[schemas.UserVO], int]:
    rows, total = get_user_list(db, page, size, login_type, nickname, username)
    return [schemas.UserVO.from_auth(row) for row in rows], total


def get_user_info_vo(
    db: Session,
    user_info_id: int,
    article_like_set: Iterable[str] = (),
    comment_like_set: Iterable[str] = (),
) -> schemas.UserInfoVO:
    """Profile projection; the like sets come from the caller (e.g. a cache)."""
    user_info = get_user_info_by_id(db, user_info_id)
    return schemas.UserInfoVO(
        **schemas.UserInfo.model_validate(user_info).model_dump(),
        article_like_set=list(article_like_set),
        comment_like_set=list(comment_like_set),
    )


def update_user_nickname_and_roles(db: Session, auth_id: int, nickname: str, role_ids: Sequence[int]) -> None:
    """Rename the user's profile and, when ``role_ids`` is non-empty, replace their role set.

    An empty ``role_ids`` leaves the current roles as they are. Both writes
    commit together.
    """
    user_auth = get_user_auth_by_id(db, auth_id)
    user_auth_id, user_info_id = user_auth.id, user_auth.user_info_id
    try:
        _update_columns(db, models.UserInfo, user_info_id, {"nickname": nickname})
        if role_ids:
            db.query(models.UserAuthRole).filter(
                models.UserAuthRole.user_auth_id == user_auth_id
            ).delete(synchronize_session=False)
            db.add_all(
                models.UserAuthRole(user_auth_id=user_auth_id, role_id=role_id)
                for role_id in dict.fromkeys(role_ids)
            )
        db.commit()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "update_user_nickname_and_roles", exc) from exc
    logger.info(
        "Updated nickname for user_auth %s (roles replaced: %s)",
        user_auth_id,
        list(dict.fromkeys(role_ids)) if role_ids else "no",
    )


def update_user_password(db: Session, user_auth_id: int, password: str) -> None:
    try:
        _update_columns(db, models.UserAuth, user_auth_id, {"password": password})
        db.commit()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "update_user_password", exc) from exc
    logger.info("Updated password for user_auth %s", user_auth_id)


def update_user_info(
    db: Session,
    user_info_id: int,
    nickname: str,
    avatar: str,
    intro: str,
    website: str,
) -> None:
    """Overwrite the four editable profile columns; empty strings are written as given."""
    values = {"nickname": nickname, "avatar": avatar, "intro": intro, "website": website}
    try:
        _update_columns(db, models.UserInfo, user_info_id, values)
        db.commit()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "update_user_info", exc) from exc
    logger.info("Updated profile for user_info %s", user_info_id)


def update_user_disable(db: Session, user_auth_id: int, is_disable: bool) -> None:
    try:
        _update_columns(db, models.UserAuth, user_auth_id, {"is_disable": is_disable})
        db.commit()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "update_user_disable", exc) from exc
    logger.info("Set is_disable=%s for user_auth %s", is_disable, user_auth_id)


def update_user_login_info(db: Session, user_auth_id: int, ip_address: str, ip_source: str) -> None:
    values = {
        "ip_address": ip_address,
        "ip_source": ip_source,
        "last_login_time": models.now_utc(),
    }
    try:
        _update_columns(db, models.UserAuth, user_auth_id, values)
        db.commit()
    except SQLAlchemyError as exc:
        raise _store_failure(db, "update_user_login_info", exc) from exc
    logger.info("Recorded login for user_auth %s from %s", user_auth_id, ip_address)
