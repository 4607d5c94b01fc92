from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.db import models
from blog_api.db.base import Base
from blog_api.db.session import get_db
from blog_api.main import app
from blog_api.repositories.post_repository import PostRepository
from blog_api.schemas.post import utcnow


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db):
    return PostRepository(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return utcnow()


@pytest.fixture
def seeded_posts(db, now):
    posts = [
        models.Post(
            id=1,
            title="Journey to the Center of the Earth",
            content="Discover the marvels beneath the Earth's crust.",
            author="Jules Verne",
            published_date=now - timedelta(days=10),
        ),
        models.Post(
            id=2,
            title="Mastering the Art of French Cooking",
            content="Learn the techniques that transform simple ingredients.",
            author="Julia Child",
            published_date=now - timedelta(days=5),
        ),
    ]
    db.add_all(posts)
    db.commit()
    return posts
