"""Testes de filtros e metadados de paginação."""

from __future__ import annotations

from app.domain.pagination import ListFilters, Page, PaginationInfo


class TestListFilters:
    """Normalização de filtros."""

    def test_defaults(self) -> None:
        filters = ListFilters.normalized()

        assert filters.page == 1
        assert filters.page_size == 20
        assert filters.status is None
        assert filters.offset == 0

    def test_invalid_page_becomes_first_and_size_is_capped(self) -> None:
        filters = ListFilters.normalized(page=0, page_size=500)

        assert filters.page == 1
        assert filters.page_size == 100

    def test_custom_limits_and_offset(self) -> None:
        filters = ListFilters.normalized(
            page=3,
            page_size=None,
            default_page_size=10,
            max_page_size=50,
            status="",
        )

        assert filters.page_size == 10
        assert filters.offset == 20
        assert filters.status is None


class TestPaginationInfo:
    """Metadados da página."""

    def test_total_pages_rounds_up(self) -> None:
        info = PaginationInfo.build(total_items=41, page=2, page_size=20)

        assert info.total_pages == 3
        assert info.to_dict() == {
            "totalItens": 41,
            "totalPages": 3,
            "currentPage": 2,
            "pageSize": 20,
        }

    def test_empty_result(self) -> None:
        assert PaginationInfo.build(0, 1, 20).total_pages == 0

    def test_page_envelope(self) -> None:
        page = Page(items=[1, 2], pagination=PaginationInfo.build(2, 1, 20))

        response = page.to_response(lambda n: {"n": n})

        assert response["dados"] == [{"n": 1}, {"n": 2}]
        assert response["paginacao"]["totalItens"] == 2
