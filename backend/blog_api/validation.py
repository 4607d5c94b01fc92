"""
Field-level checks for incoming post payloads.

The functions here never raise.  They collect every violation found in a
payload so that the router can reject the request with the complete list
in a single response.
"""

import re
from typing import List, Optional

from .db.models import TITLE_MAX_LENGTH
from .schemas.post import FieldViolation, PostCreate, PostFields

AUTHOR_PATTERN = re.compile(r"[A-Za-z\s]+")

ID_REQUIRED = "The Id field is required."
TITLE_REQUIRED = "The Title field is required."
TITLE_TOO_LONG = f"The Title field cannot exceed {TITLE_MAX_LENGTH} characters."
CONTENT_REQUIRED = "The Content field is required."
AUTHOR_INVALID = "Author name can only contain letters and spaces."


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_fields(payload: PostFields) -> List[FieldViolation]:
    violations: List[FieldViolation] = []
    if _is_blank(payload.title):
        violations.append(FieldViolation(field="title", message=TITLE_REQUIRED))
    elif len(payload.title) > TITLE_MAX_LENGTH:
        violations.append(FieldViolation(field="title", message=TITLE_TOO_LONG))
    if _is_blank(payload.content):
        violations.append(FieldViolation(field="content", message=CONTENT_REQUIRED))
    if payload.author is not None and not AUTHOR_PATTERN.fullmatch(payload.author):
        violations.append(FieldViolation(field="author", message=AUTHOR_INVALID))
    return violations


def validate_post_create(payload: PostCreate) -> List[FieldViolation]:
    violations: List[FieldViolation] = []
    if payload.id is None:
        violations.append(FieldViolation(field="id", message=ID_REQUIRED))
    violations.extend(_check_fields(payload))
    return violations


def validate_post_update(payload: PostFields) -> List[FieldViolation]:
    return _check_fields(payload)
