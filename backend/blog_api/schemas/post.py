from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from ..db.models import POST_ID_MAX, POST_ID_MIN


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored without tzinfo, in UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PostFields(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def empty_string_as_none(cls, value):
        if value == "":
            return None
        return value


class PostCreate(PostFields):
    id: Optional[int] = Field(None, ge=POST_ID_MIN, le=POST_ID_MAX)
    published_date: Optional[datetime] = None

    @field_validator("published_date")
    @classmethod
    def normalize_published_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)


class PostUpdate(PostFields):
    pass


class PostRead(CamelModel):
    id: int
    title: str
    content: str
    author: Optional[str] = None
    published_date: Optional[datetime] = None

    @field_serializer("published_date", when_used="json")
    def serialize_published_date(self, value: Optional[datetime]) -> Optional[str]:
        # Stored values are naive UTC.
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc).isoformat().replace("+00:00", "Z")


class PostFilter(CamelModel):
    title: Optional[str] = None
    author: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @field_validator("title", "author", mode="before")
    @classmethod
    def empty_string_as_none(cls, value):
        if value == "":
            return None
        return value

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)


class FieldViolation(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: str
    errors: List[FieldViolation]
