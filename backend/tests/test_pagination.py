"""
ProjectBoard Backend: Pagination Type Tests
============================================
"""

import pytest

from projectboard.exceptions import ValidationError
from projectboard.schemas.pagination import Direction, Page, PageRequest, SortOrder


class TestSortOrder:

    @pytest.mark.parametrize("raw,prop,direction", [
        ("title", "title", Direction.ASC),
        ("title,asc", "title", Direction.ASC),
        ("created_at,DESC", "created_at", Direction.DESC),
        (" nickname , desc ", "nickname", Direction.DESC),
    ])
    def test_parse(self, raw, prop, direction):
        order = SortOrder.parse(raw)

        assert order.property == prop
        assert order.direction == direction

    @pytest.mark.parametrize("raw", ["", ",desc", "title,sideways"])
    def test_parse_invalid(self, raw):
        with pytest.raises(ValidationError):
            SortOrder.parse(raw)


class TestPageRequest:

    def test_of(self):
        page_request = PageRequest.of(page=3, size=20, sort=["created_at,desc"])

        assert page_request.offset == 60
        assert page_request.sort == (SortOrder(property="created_at", direction=Direction.DESC),)

    def test_of_size(self):
        page_request = PageRequest.of_size(5)

        assert page_request.page == 0
        assert page_request.size == 5
        assert page_request.sort == ()


class TestPage:

    def test_metadata(self):
        page = Page(content=[1, 2], page=0, size=2, total_elements=5)

        assert page.total_pages == 3
        assert page.number_of_elements == 2
        assert page.is_first
        assert not page.is_last

    def test_last_page(self):
        page = Page(content=[5], page=2, size=2, total_elements=5)

        assert page.is_last
        assert not page.is_first

    def test_empty(self):
        page = Page.empty(PageRequest.of(page=1, size=7))

        assert page.is_empty()
        assert page.page == 1
        assert page.size == 7
        assert page.total_elements == 0
        assert page.total_pages == 0
        assert page.is_last

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2], page=1, size=2, total_elements=4)

        mapped = page.map(str)

        assert mapped.content == ["1", "2"]
        assert (mapped.page, mapped.size, mapped.total_elements) == (1, 2, 4)

    def test_serializes_computed_fields(self):
        data = Page(content=["a"], page=0, size=10, total_elements=1).model_dump()

        assert data["total_pages"] == 1
        assert data["number_of_elements"] == 1
        assert data["is_first"] is True
        assert data["is_last"] is True
