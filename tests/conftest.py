import os
import pytest

# Keep the module-level engine off any real database during tests
os.environ.setdefault("BLOG_TEST_DB", "sqlite+pysqlite:///:memory:")

from blog_core.db import models
from blog_core.db.database import create_store_engine, init_schema, make_session_factory
from blog_core.utils.settings import refresh_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    refresh_settings_cache()
    yield
    refresh_settings_cache()


@pytest.fixture
def engine():
    eng = create_store_engine("sqlite+pysqlite:///:memory:", echo=False)
    init_schema(eng)
    try:
        yield eng
    finally:
        models.Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Insert a profile + credentials pair and return the UserAuth row."""
    counter = {"n": 0}

    def _make(username=None, nickname=None, login_type=1, role_ids=(), **auth_fields):
        counter["n"] += 1
        n = counter["n"]
        info = models.UserInfo(
            email=f"user{n}@example.com",
            nickname=nickname or f"nick{n}",
            avatar=f"https://cdn.example.com/avatar/{n}.png",
            intro="hello",
            website="https://example.com",
        )
        db.add(info)
        db.flush()
        auth = models.UserAuth(
            username=username or f"user{n}",
            password="initial-hash",
            login_type=login_type,
            user_info_id=info.id,
            **auth_fields,
        )
        db.add(auth)
        db.flush()
        for role_id in role_ids:
            db.add(models.UserAuthRole(user_auth_id=auth.id, role_id=role_id))
        db.commit()
        db.refresh(auth)
        return auth

    return _make


@pytest.fixture
def roles(db):
    rows = [
        models.Role(name=name, label=label)
        for name, label in [
            ("admin", "Administrator"),
            ("user", "Regular user"),
            ("guest", "Guest"),
            ("editor", "Editor"),
            ("auditor", "Auditor"),
        ]
    ]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows
