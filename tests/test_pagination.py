"""Tests for pagination arithmetic."""

import pytest

from gallery.utils.pagination import build_pagination, calculate_pagination, page_count


@pytest.mark.parametrize(
    "page,limit,offset",
    [(1, 20, 0), (2, 20, 20), (3, 10, 20), (5, 1, 4)],
)
def test_calculate_pagination(page, limit, offset):
    assert calculate_pagination(page, limit) == (offset, limit)


def test_calculate_pagination_defaults():
    assert calculate_pagination() == (0, 20)


@pytest.mark.parametrize(
    "total,limit,pages",
    [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (45, 20, 3)],
)
def test_page_count(total, limit, pages):
    assert page_count(total, limit) == pages


def test_build_pagination_middle_page():
    p = build_pagination(page=2, limit=20, total=45)
    assert p.pages == 3
    assert p.has_next is True
    assert p.has_prev is True


def test_build_pagination_last_page():
    p = build_pagination(page=3, limit=20, total=45)
    assert p.has_next is False


def test_build_pagination_empty():
    p = build_pagination(page=1, limit=20, total=0)
    assert p.pages == 0
    assert p.has_next is False
    assert p.has_prev is False
