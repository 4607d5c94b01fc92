import logging
from datetime import datetime
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.exc import IntegrityError

from ...api.deps import get_post_service
from ...api.errors import PostValidationError
from ...db.models import POST_ID_MAX, POST_ID_MIN
from ...schemas.post import PostCreate, PostRead, PostUpdate, ValidationErrorResponse
from ...services.post_service import PostService
from ...validation import validate_post_create, validate_post_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])

POST_NOT_FOUND = "Post not found"
DUPLICATE_POST_ID = "Post ID already exists."

PostId = Annotated[int, Path(ge=POST_ID_MIN, le=POST_ID_MAX)]

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


@router.get("", response_model=List[PostRead])
async def list_posts(
    title: Optional[str] = None,
    author: Optional[str] = None,
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    service: PostService = Depends(get_post_service),
) -> List[PostRead]:
    logger.info("Listing blog posts")
    posts = service.list_posts(title=title, author=author, start_date=start_date, end_date=end_date)
    logger.info("Returning %d blog posts", len(posts))
    return posts


@router.get("/{post_id}", response_model=PostRead)
async def read_post(post_id: PostId, service: PostService = Depends(get_post_service)) -> PostRead:
    post = service.get_post(post_id)
    if post is None:
        logger.warning("Blog post %s not found", post_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
async def create_post(
    payload: PostCreate,
    response: Response,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    logger.info("Creating a new blog post")
    violations = validate_post_create(payload)
    if violations:
        logger.warning("Invalid blog post data provided: %s", ", ".join(v.field for v in violations))
        raise PostValidationError(violations)
    if service.get_post(payload.id) is not None:
        logger.warning("Blog post %s already exists", payload.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_POST_ID)
    try:
        post = service.create_post(PostRead(**payload.model_dump()))
    except IntegrityError:
        # Another request inserted the same id after our lookup.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_POST_ID)
    response.headers["Location"] = f"{router.prefix}/{post.id}"
    logger.info("Created blog post %s", post.id)
    return post


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=BAD_REQUEST)
async def update_post(
    post_id: PostId,
    payload: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> Response:
    logger.info("Updating blog post %s", post_id)
    violations = validate_post_update(payload)
    if violations:
        logger.warning("Invalid blog post data provided: %s", ", ".join(v.field for v in violations))
        raise PostValidationError(violations)
    existing = service.get_post(post_id)
    if existing is None:
        logger.warning("Blog post %s not found", post_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    updated = existing.model_copy(
        update={"title": payload.title, "content": payload.content, "author": payload.author}
    )
    service.update_post(updated)
    logger.info("Updated blog post %s", post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(post_id: PostId, service: PostService = Depends(get_post_service)) -> Response:
    logger.info("Deleting blog post %s", post_id)
    if service.get_post(post_id) is None:
        logger.warning("Blog post %s not found", post_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    service.delete_post(post_id)
    logger.info("Deleted blog post %s", post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
