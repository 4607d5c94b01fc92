import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import models
from ..schemas.post import PostFilter, PostRead
from .filters import apply_post_filters

logger = logging.getLogger(__name__)


class PostRepository:
    """Persistence for posts.

    ORM rows stay inside this class; callers receive ``PostRead`` copies.
    Database errors are logged, the session is rolled back and the
    original exception is re-raised.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _reraise(self, message: str, *args) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError:
            logger.exception(message, *args)
            self.db.rollback()
            raise

    def query_all(self, filters: Optional[PostFilter] = None) -> List[PostRead]:
        filters = filters or PostFilter()
        with self._reraise("An error occurred while retrieving blog posts with filters from the database"):
            query = apply_post_filters(self.db.query(models.Post), filters)
            posts = [PostRead.model_validate(row) for row in query.all()]
        logger.info("Retrieved %d posts from the database", len(posts))
        return posts

    def get_by_id(self, post_id: int) -> Optional[PostRead]:
        logger.info("Retrieving blog post %s from the database", post_id)
        with self._reraise("An error occurred while retrieving blog post %s from the database", post_id):
            row = self.db.get(models.Post, post_id)
        if row is None:
            logger.warning("Blog post %s not found in the database", post_id)
            return None
        return PostRead.model_validate(row)

    def insert(self, post: PostRead) -> PostRead:
        logger.info("Adding blog post %s to the database", post.id)
        with self._reraise("An error occurred while adding blog post %s to the database", post.id):
            row = models.Post(**post.model_dump())
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        logger.info("Added blog post %s to the database", post.id)
        return PostRead.model_validate(row)

    def update(self, post: PostRead) -> None:
        logger.info("Updating blog post %s in the database", post.id)
        with self._reraise("An error occurred while updating blog post %s in the database", post.id):
            row = self.db.get(models.Post, post.id)
            if row is None:
                logger.warning("Blog post %s not found in the database", post.id)
                return
            row.title = post.title
            row.content = post.content
            row.author = post.author
            row.published_date = post.published_date
            self.db.add(row)
            self.db.commit()
        logger.info("Updated blog post %s in the database", post.id)

    def delete(self, post_id: int) -> None:
        logger.info("Deleting blog post %s from the database", post_id)
        with self._reraise("An error occurred while deleting blog post %s from the database", post_id):
            row = self.db.get(models.Post, post_id)
            if row is None:
                logger.warning("Blog post %s not found in the database", post_id)
                return
            self.db.delete(row)
            self.db.commit()
        logger.info("Deleted blog post %s from the database", post_id)
