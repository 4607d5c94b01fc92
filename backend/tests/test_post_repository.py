import logging
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from blog_api.db import models
from blog_api.schemas.post import PostRead


def _post(**overrides):
    fields = {
        "id": 3,
        "title": "The Future of Artificial Intelligence",
        "content": "AI is transforming our world.",
        "author": "John McCarthy",
        "published_date": datetime(2024, 5, 1, 12, 0),
    }
    fields.update(overrides)
    return PostRead(**fields)


def test_get_by_id_returns_a_detached_copy(repository, seeded_posts):
    post = repository.get_by_id(1)
    assert isinstance(post, PostRead)
    assert post.author == "Jules Verne"


def test_get_by_id_missing_returns_none(repository, caplog):
    with caplog.at_level(logging.WARNING):
        assert repository.get_by_id(404) is None
    assert "not found" in caplog.text


def test_insert_persists_the_post(db, repository):
    created = repository.insert(_post())
    assert created == _post()
    assert db.query(models.Post).count() == 1


def test_insert_duplicate_id_raises_and_rolls_back(db, repository, seeded_posts):
    # A fresh identity map, as a concurrent request would have.
    db.expunge_all()
    with pytest.raises(IntegrityError):
        repository.insert(_post(id=1))
    assert db.query(models.Post).count() == 2


def test_update_replaces_fields_by_id(repository, seeded_posts):
    repository.update(_post(id=2, title="Baking Bread", author=None))
    stored = repository.get_by_id(2)
    assert stored.title == "Baking Bread"
    assert stored.author is None
    assert stored.published_date == datetime(2024, 5, 1, 12, 0)


def test_update_missing_id_is_a_no_op(db, repository, seeded_posts):
    repository.update(_post(id=99))
    assert db.query(models.Post).count() == 2
    assert repository.get_by_id(99) is None


def test_delete_removes_the_post(repository, seeded_posts):
    repository.delete(1)
    assert repository.get_by_id(1) is None
    assert [post.id for post in repository.query_all()] == [2]


def test_delete_missing_id_is_a_no_op(db, repository, seeded_posts):
    repository.delete(99)
    assert db.query(models.Post).count() == 2
