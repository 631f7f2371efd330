"""Unit tests for page metadata."""

from hub.domain.value import page_offset, paginate


class TestPaginate:
    """Tests for paginate and page_offset."""

    def test_partial_last_page_counts(self):
        """25 items at 10 per page make 3 pages."""
        pagination = paginate(25, 2, 10)

        assert pagination.page == 2
        assert pagination.limit == 10
        assert pagination.total == 25
        assert pagination.pages == 3

    def test_exact_multiple(self):
        """20 items at 10 per page make 2 pages."""
        assert paginate(20, 1, 10).pages == 2

    def test_empty_listing_has_no_pages(self):
        """No items gives zero pages."""
        assert paginate(0, 1, 10).pages == 0

    def test_page_past_the_end_is_described(self):
        """Asking for a page beyond the last keeps the requested page."""
        pagination = paginate(5, 4, 10)

        assert pagination.page == 4
        assert pagination.pages == 1

    def test_offset(self):
        """Page 3 at 10 per page starts at item 20."""
        assert page_offset(1, 10) == 0
        assert page_offset(3, 10) == 20
