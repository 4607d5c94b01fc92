import logging
from typing import List

from sqlalchemy import Integer
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.functions import GenericFunction

from ..db import models
from ..schemas.post import PostFilter

logger = logging.getLogger(__name__)


class substring_position(GenericFunction):
    """1-based position of a substring, 0 when absent; case-sensitive.

    Renders as ``strpos`` (PostgreSQL) and ``instr`` on SQLite and MySQL.
    """

    name = "strpos"
    type = Integer()
    inherit_cache = True


@compiles(substring_position, "sqlite")
@compiles(substring_position, "mysql")
def _compile_instr(element, compiler, **kw):
    return "instr(%s)" % compiler.process(element.clauses, **kw)


def _contains(column, value: str) -> ColumnElement:
    return substring_position(column, value) > 0


def build_post_criteria(filters: PostFilter) -> List[ColumnElement]:
    """Translate the supplied criteria into WHERE clauses.

    Unset criteria contribute nothing.  Title and author are
    case-sensitive substring matches; the date bounds are inclusive.
    """
    criteria: List[ColumnElement] = []
    if filters.title:
        logger.info("Filtering posts by title = %s", filters.title)
        criteria.append(_contains(models.Post.title, filters.title))
    if filters.author:
        logger.info("Filtering posts by author = %s", filters.author)
        criteria.append(_contains(models.Post.author, filters.author))
    if filters.start_date is not None:
        logger.info("Filtering posts by start_date = %s", filters.start_date.isoformat())
        criteria.append(models.Post.published_date >= filters.start_date)
    if filters.end_date is not None:
        logger.info("Filtering posts by end_date = %s", filters.end_date.isoformat())
        criteria.append(models.Post.published_date <= filters.end_date)
    return criteria


def apply_post_filters(query: Query, filters: PostFilter) -> Query:
    criteria = build_post_criteria(filters)
    if criteria:
        query = query.filter(*criteria)
    return query
