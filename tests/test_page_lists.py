"""Page descriptor lists and elided pagination summaries."""

import pytest

from pagedview.services.paginated_list import PaginatedList


def _nums(descriptors):
    return [d.page_num for d in descriptors]


def _current(descriptors):
    return [d.page_num for d in descriptors if d.current]


class TestPages:
    def test_counts(self):
        view = PaginatedList([]).set_page_length(10).set_total_items(50)
        assert len(view.pages()) == 5
        assert len(view.pages(3)) == 3
        assert len(view.pages(15)) == 5

    def test_all_pages(self):
        view = PaginatedList([]).set_total_items(50).set_current_page(3)
        pages = view.pages()
        assert _nums(pages) == [1, 2, 3, 4, 5]
        assert _current(pages) == [3]

    def test_limited_window_is_centred(self):
        view = PaginatedList([]).set_total_items(50).set_current_page(3)
        pages = view.pages(3)
        assert _nums(pages) == [2, 3, 4]
        assert _current(pages) == [3]

    def test_window_at_start(self):
        view = PaginatedList([]).set_total_items(100)
        assert _nums(view.pages(4)) == [1, 2, 3, 4]

    def test_window_slides_back_at_end(self):
        view = PaginatedList([]).set_total_items(100).set_current_page(10)
        assert _nums(view.pages(4)) == [7, 8, 9, 10]
        view.set_current_page(9)
        assert _nums(view.pages(4)) == [7, 8, 9, 10]

    def test_even_window(self):
        view = PaginatedList([]).set_total_items(100).set_current_page(5)
        assert _nums(view.pages(4)) == [4, 5, 6, 7]

    def test_disabled(self):
        view = PaginatedList([]).set_total_items(50).set_page_length(0)
        pages = view.pages()
        assert _nums(pages) == [1]
        assert pages[0].current

    def test_no_items(self):
        assert PaginatedList([]).pages() == []

    def test_non_positive_bound(self):
        assert PaginatedList([]).set_total_items(50).pages(0) == []

    def test_links_point_at_page_offsets(self):
        view = PaginatedList([], {"sort": "name"}).set_total_items(25)
        links = [d.link for d in view.pages()]
        assert links == ["?sort=name&start=0", "?sort=name&start=10", "?sort=name&start=20"]

    def test_page_set_before_total(self):
        view = PaginatedList([]).set_total_items(0).set_current_page(2)
        assert view.pages(3) == []
        view.set_total_items(30)
        pages = view.pages()
        assert _nums(pages) == [1, 2, 3]
        assert _current(pages) == [2]

    @pytest.mark.parametrize("limit", [1, 2, 3, 5, 8, 20])
    @pytest.mark.parametrize("page", [1, 2, 4, 7, 8])
    def test_bounded_list_size_and_current(self, limit, page):
        view = PaginatedList([]).set_total_items(80).set_current_page(page)
        pages = view.pages(limit)
        assert len(pages) == min(limit, view.total_pages())
        assert _current(pages) == [page]
        assert _nums(pages) == list(range(pages[0].page_num, pages[0].page_num + len(pages)))


class TestPaginationSummary:
    def test_summary(self):
        view = PaginatedList([]).set_page_length(10).set_total_items(250).set_current_page(6)
        summary = view.pagination_summary(4)
        assert _nums(summary) == [1, None, 4, 5, 6, 7, 8, None, 25]
        assert _current(summary) == [6]

        view.set_page_length(0)
        summary = view.pagination_summary(4)
        assert _nums(summary) == [1]
        assert summary[0].current

    def test_ellipsis_markers(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(6)
        markers = [d for d in view.pagination_summary() if d.is_ellipsis]
        assert len(markers) == 2
        assert all(m.link is None and not m.current for m in markers)

    def test_first_page_current(self):
        view = PaginatedList([]).set_total_items(250)
        summary = view.pagination_summary(4)
        assert _nums(summary) == [1, 2, 3, None, 25]
        assert _current(summary) == [1]

    def test_last_page_current(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(25)
        summary = view.pagination_summary(4)
        assert _nums(summary) == [1, None, 23, 24, 25]
        assert _current(summary) == [25]

    def test_no_gap_next_to_first_page(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(4)
        assert _nums(view.pagination_summary(4)) == [1, 2, 3, 4, 5, 6, None, 25]

    def test_odd_context(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(10)
        assert _nums(view.pagination_summary(3)) == [1, None, 9, 10, 11, 12, None, 25]

    def test_zero_context(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(10)
        assert _nums(view.pagination_summary(0)) == [1, None, 10, None, 25]

    @pytest.mark.parametrize(
        "total, page, expected",
        [
            (0, 1, [1]),
            (10, 1, [1]),
            (20, 1, [1, 2]),
            (20, 2, [1, 2]),
            (30, 2, [1, 2, 3]),
            (50, 3, [1, 2, 3, 4, 5]),
        ],
    )
    def test_few_pages(self, total, page, expected):
        view = PaginatedList([]).set_total_items(total).set_current_page(page)
        summary = view.pagination_summary(4)
        assert _nums(summary) == expected
        assert _current(summary) == [page]

    def test_current_page_past_the_end(self):
        view = PaginatedList([]).set_total_items(250).set_current_page(30)
        summary = view.pagination_summary(4)
        assert _nums(summary) == [1, None, 25]
        assert _current(summary) == []

    def test_summary_links(self):
        view = PaginatedList([], {"q": "x"}).set_total_items(250).set_current_page(6)
        summary = view.pagination_summary(4)
        assert summary[0].link == "?q=x&start=0"
        assert summary[2].link == "?q=x&start=30"
        assert summary[-1].link == "?q=x&start=240"
