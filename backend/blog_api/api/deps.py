from fastapi import Depends
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..repositories.post_repository import PostRepository
from ..services.post_service import PostService


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_post_service(repository: PostRepository = Depends(get_post_repository)) -> PostService:
    return PostService(repository)
