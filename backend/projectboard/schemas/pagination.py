"""
ProjectBoard Backend: Pagination Types
=======================================

What:  PageRequest (which slice, in which order) and Page (the slice plus
       total-count metadata).
How:   Offset pagination: page is 0-based, offset = page * size. Sort orders
       carry property names from the search allow-list; the repository
       resolves them to columns and rejects unknown names.
Who:   Built by the web layer from query parameters, passed through the
       service to the repository, and returned back up as Page[ArticleDto].

Example:
    PageRequest.of(page=0, size=20, sort=["created_at,desc", "title"])
    → first 20 rows, newest first, ties broken by title ascending
"""

import math
from enum import Enum
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field, computed_field

from projectboard.exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    """One `property,direction` pair."""

    property: str = Field(min_length=1)
    direction: Direction = Direction.ASC

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        Parses `property` or `property,direction` (direction case-insensitive).

        Raises:
            ValidationError: empty property or unknown direction
        """
        prop, _, direction = raw.partition(",")
        prop = prop.strip()
        direction = direction.strip().lower() or Direction.ASC.value
        if not prop:
            raise ValidationError(message=f"Invalid sort '{raw}'", field="sort")
        try:
            return cls(property=prop, direction=Direction(direction))
        except ValueError:
            raise ValidationError(
                message=f"Invalid sort direction '{direction}'. Must be 'asc' or 'desc'",
                field="sort",
            )


class PageRequest(BaseModel):
    """Requested slice of a result set."""

    page: int = Field(default=0, ge=0, description="0-based page index")
    size: int = Field(default=10, ge=1, description="Items per page")
    sort: Tuple[SortOrder, ...] = Field(default=(), description="Sort orders, applied in sequence")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, page: int = 0, size: int = 10, sort: Optional[Iterable[str]] = None) -> "PageRequest":
        orders = tuple(SortOrder.parse(raw) for raw in (sort or ()))
        return cls(page=page, size=size, sort=orders)

    @classmethod
    def of_size(cls, size: int) -> "PageRequest":
        return cls(page=0, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """
    A page of results plus paging metadata.

    content holds ORM entities at the repository boundary and DTOs above it;
    `map` converts between the two without touching the metadata.
    """

    content: List[T] = Field(default_factory=list)
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(ge=0)

    model_config = {"arbitrary_types_allowed": True}

    @computed_field  # type: ignore[misc]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.total_elements else 0

    @computed_field  # type: ignore[misc]
    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @computed_field  # type: ignore[misc]
    @property
    def is_first(self) -> bool:
        return self.page == 0

    @computed_field  # type: ignore[misc]
    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    def is_empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], U]) -> "Page[Any]":
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )

    @classmethod
    def empty(cls, page_request: Optional[PageRequest] = None) -> "Page[Any]":
        page_request = page_request or PageRequest()
        return Page(content=[], page=page_request.page, size=page_request.size, total_elements=0)
