"""Tests for page-delta accounting."""

import pytest

from lockedin.core.pages import compute_pages_read, pages_read_by_date, reading_goal_met
from lockedin.core.records import DailyLogRecord


class TestComputePagesRead:
    """Tests for compute_pages_read."""

    @pytest.mark.parametrize("page", [0, 1, 10, 250])
    def test_no_previous_page_credits_full_page(self, page):
        assert compute_pages_read(page, None) == page

    @pytest.mark.parametrize("previous", [None, 0, 15, 400])
    def test_nothing_logged_today_is_none(self, previous):
        assert compute_pages_read(None, previous) is None

    def test_page_decrease_is_none_not_negative(self):
        assert compute_pages_read(10, 15) is None

    def test_zero_delta_is_zero(self):
        assert compute_pages_read(20, 20) == 0

    def test_regular_delta(self):
        assert compute_pages_read(65, 50) == 15


class TestReadingGoalMet:
    """Tests for reading_goal_met."""

    def test_exactly_goal(self):
        assert reading_goal_met(10) is True

    def test_below_goal(self):
        assert reading_goal_met(9) is False

    def test_none(self):
        assert reading_goal_met(None) is False

    def test_custom_goal(self):
        assert reading_goal_met(20, goal=25) is False
        assert reading_goal_met(25, goal=25) is True


class TestPagesReadByDate:
    """Tests for the date-ordered delta fold."""

    def test_book_change_series(self):
        logs = {
            "2024-01-03": {"current_page": 40},
            "2024-01-01": {"current_page": 50},
            "2024-01-02": {"current_page": 65},
        }
        assert pages_read_by_date(logs) == {
            "2024-01-01": 50,
            "2024-01-02": 15,
            "2024-01-03": None,
        }

    def test_new_book_restarts_from_its_own_page(self):
        logs = {
            "2024-01-01": {"current_page": 300},
            "2024-01-02": {"current_page": 12},
            "2024-01-03": {"current_page": 30},
        }
        result = pages_read_by_date(logs)
        assert result["2024-01-02"] is None
        assert result["2024-01-03"] == 18

    def test_gap_days_use_previous_recorded_page(self):
        logs = {
            "2024-01-01": {"current_page": 100},
            "2024-01-05": {"current_page": 130},
        }
        assert pages_read_by_date(logs)["2024-01-05"] == 30

    def test_previous_page_comes_from_preceding_present_key(self):
        logs = {
            "2024-01-01": {"current_page": 100, "steps": 7000},
            "2024-01-02": {"current_page": None, "steps": 8000},
            "2024-01-03": {"current_page": 112},
        }
        result = pages_read_by_date(logs)
        assert result["2024-01-02"] is None
        # preceding record had no page, so the full page is credited
        assert result["2024-01-03"] == 112

    def test_lookback_seed(self):
        logs = {"2024-01-01": {"current_page": 120}}
        assert pages_read_by_date(logs, previous_page=105) == {"2024-01-01": 15}

    def test_accepts_records_and_leaves_them_untouched(self):
        first = DailyLogRecord(current_page=5)
        second = DailyLogRecord(current_page=20)
        logs = {"2024-01-01": first, "2024-01-02": second}

        assert pages_read_by_date(logs) == {"2024-01-01": 5, "2024-01-02": 15}
        assert first == DailyLogRecord(current_page=5)
        assert second == DailyLogRecord(current_page=20)

    def test_empty(self):
        assert pages_read_by_date({}) == {}
