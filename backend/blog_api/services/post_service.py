from datetime import datetime
from typing import List, Optional

from ..repositories.post_repository import PostRepository
from ..schemas.post import PostFilter, PostRead, utcnow


class PostService:
    """Post operations on top of a ``PostRepository``.

    Absence is reported as ``None``; repository failures propagate
    unchanged.
    """

    def __init__(self, repository: PostRepository) -> None:
        self.repository = repository

    def list_posts(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[PostRead]:
        filters = PostFilter(title=title, author=author, start_date=start_date, end_date=end_date)
        return self.repository.query_all(filters)

    def get_post(self, post_id: int) -> Optional[PostRead]:
        return self.repository.get_by_id(post_id)

    def create_post(self, post: Optional[PostRead]) -> PostRead:
        """Insert ``post``, stamping ``published_date`` when missing.

        Duplicate ids are not checked here; callers look the id up first.
        """
        if post is None:
            raise ValueError("post must not be None")
        if post.published_date is None:
            post = post.model_copy(update={"published_date": utcnow()})
        return self.repository.insert(post)

    def update_post(self, post: Optional[PostRead]) -> None:
        if post is None:
            raise ValueError("post must not be None")
        self.repository.update(post)

    def delete_post(self, post_id: int) -> None:
        self.repository.delete(post_id)
