"""
ProjectBoard Backend: Article Search Bindings
==============================================

What:  The allow-list of searchable article fields and the predicate each one
       produces, plus the sortable-column table.
How:   An explicit {field name → FieldBinding(column, operator, converter)}
       mapping built once at import time. Filtering on a name outside the
       mapping raises ValidationError instead of being ignored or matched
       loosely. Every SearchType must resolve to a binding; a missing one
       fails the import.

Bindings:
    field        column                   operator
    ─────────    ──────────────────────   ──────────────────────────────
    title        article.title            contains, case-insensitive
    content      article.content          contains, case-insensitive
    hashtag      article.hashtag          contains, case-insensitive
    created_at   article.created_at       equals (ISO-8601 value)
    created_by   article.created_by       contains, case-insensitive
    user_id      user_account.user_id     contains, case-insensitive
    nickname     user_account.nickname    contains, case-insensitive

    user_id / nickname live on the author; queries using them must join
    Article.user_account (ArticleRepository always does).

Example:
    build_predicate({"title": "spring", "created_by": "uno"})
    → lower(article.title) LIKE '%' || lower(:p1) || '%'
      AND lower(article.created_by) LIKE '%' || lower(:p2) || '%'
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from projectboard.exceptions import ValidationError
from projectboard.models.article import Article
from projectboard.models.search_type import SearchType
from projectboard.models.user_account import UserAccount
from projectboard.schemas.pagination import Direction, SortOrder

Operator = Callable[[Any, Any], ColumnElement]


# ── Operators ─────────────────────────────────────────────────────────────

def contains_ignore_case(column: Any, value: str) -> ColumnElement:
    # autoescape: % and _ in user input match literally
    return column.icontains(value, autoescape=True)


def equals(column: Any, value: Any) -> ColumnElement:
    return column == value


# ── Converters ────────────────────────────────────────────────────────────

def parse_datetime(raw: str) -> datetime:
    """
    Parses an ISO-8601 timestamp into an aware UTC datetime.

    A trailing 'Z' and a missing offset are both read as UTC; other offsets
    are converted, so the same instant matches the stored audit stamp
    regardless of how it was written.
    """
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(
            message=f"Invalid datetime '{raw}'. Expected ISO-8601, e.g. 2024-01-15T12:00:00",
            field="created_at",
        )
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class FieldBinding:
    """How one searchable field turns a raw string into a SQL predicate."""

    name: str
    column: Any
    operator: Operator
    convert: Callable[[str], Any] = str

    def predicate(self, value: str) -> ColumnElement:
        return self.operator(self.column, self.convert(value))


# ── Allow-list ────────────────────────────────────────────────────────────

ARTICLE_BINDINGS: Mapping[str, FieldBinding] = MappingProxyType({
    binding.name: binding
    for binding in (
        FieldBinding("title", Article.title, contains_ignore_case),
        FieldBinding("content", Article.content, contains_ignore_case),
        FieldBinding("hashtag", Article.hashtag, contains_ignore_case),
        FieldBinding("created_at", Article.created_at, equals, parse_datetime),
        FieldBinding("created_by", Article.created_by, contains_ignore_case),
        FieldBinding("user_id", UserAccount.user_id, contains_ignore_case),
        FieldBinding("nickname", UserAccount.nickname, contains_ignore_case),
    )
})

SEARCH_TYPE_FIELDS: Mapping[SearchType, str] = MappingProxyType({
    SearchType.TITLE: "title",
    SearchType.CONTENT: "content",
    SearchType.HASHTAG: "hashtag",
    SearchType.USER_ID: "user_id",
    SearchType.NICKNAME: "nickname",
})

SORTABLE_COLUMNS: Mapping[str, Any] = MappingProxyType({
    "id": Article.id,
    "title": Article.title,
    "content": Article.content,
    "hashtag": Article.hashtag,
    "created_at": Article.created_at,
    "created_by": Article.created_by,
    "modified_at": Article.modified_at,
    "user_id": UserAccount.user_id,
    "nickname": UserAccount.nickname,
})


def _check_search_types() -> None:
    unbound = [
        search_type.name
        for search_type in SearchType
        if SEARCH_TYPE_FIELDS.get(search_type) not in ARTICLE_BINDINGS
    ]
    if unbound:
        raise RuntimeError(f"Search types without a field binding: {', '.join(unbound)}")


_check_search_types()


# ── Public API ────────────────────────────────────────────────────────────

def bind(field: str, value: str) -> ColumnElement:
    """
    Predicate for one (field, value) pair.

    Raises:
        ValidationError: field is not in the allow-list, or value cannot be
                         converted (e.g. a malformed created_at)
    """
    binding = ARTICLE_BINDINGS.get(field)
    if binding is None:
        raise ValidationError(
            message=f"Field '{field}' is not searchable",
            field=field,
            context={"allowed": sorted(ARTICLE_BINDINGS)},
        )
    return binding.predicate(value)


def bind_search_type(search_type: SearchType, keyword: str) -> ColumnElement:
    return bind(SEARCH_TYPE_FIELDS[search_type], keyword)


def build_predicate(filters: Mapping[str, str]) -> Optional[ColumnElement]:
    """AND of bind() over all pairs; None when there is nothing to filter on."""
    predicates = [bind(field, value) for field, value in filters.items()]
    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    return and_(*predicates)


def order_by_clauses(sort: Iterable[SortOrder]) -> List[ColumnElement]:
    """
    ORDER BY clauses for the requested sort orders.

    Raises:
        ValidationError: a sort property is not sortable
    """
    clauses = []
    for order in sort:
        column = SORTABLE_COLUMNS.get(order.property)
        if column is None:
            raise ValidationError(
                message=f"Cannot sort by '{order.property}'",
                field="sort",
                context={"allowed": sorted(SORTABLE_COLUMNS)},
            )
        clauses.append(column.desc() if order.direction == Direction.DESC else column.asc())
    return clauses
