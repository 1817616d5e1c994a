"""Tests for streak counting."""

import pytest

from lockedin.core.constants import Activity
from lockedin.core.streaks import (
    calculate_daily_streak,
    calculate_lifting_streak,
    calculate_reading_streak,
    calculate_running_streak,
)


class TestDailyStreak:
    """Tests for calculate_daily_streak."""

    def test_most_recent_miss_resets_to_zero(self):
        logs = {
            "2024-01-01": {"steps": 7000},
            "2024-01-02": {"steps": 7200},
            "2024-01-03": {"steps": 3000},
        }
        assert calculate_daily_streak(logs, "steps", 6500) == 0

    def test_consecutive_hits(self):
        logs = {
            "2024-01-01": {"steps": 7000},
            "2024-01-02": {"steps": 7200},
        }
        assert calculate_daily_streak(logs, "steps", 6500) == 2

    def test_stops_at_first_miss(self):
        logs = {
            "2024-01-01": {"steps": 9000},
            "2024-01-02": {"steps": 1000},
            "2024-01-03": {"steps": 9000},
            "2024-01-04": {"steps": 9000},
        }
        assert calculate_daily_streak(logs, Activity.STEPS) == 2

    def test_gap_in_logging_does_not_break_streak(self):
        logs = {
            "2024-01-01": {"steps": 7000},
            "2024-01-05": {"steps": 7000},
            "2024-01-20": {"steps": 7000},
        }
        assert calculate_daily_streak(logs, "steps") == 3

    def test_adding_a_hit_extends_by_one(self):
        logs = {
            "2024-01-01": {"steps": 7000},
            "2024-01-02": {"steps": 7000},
        }
        before = calculate_daily_streak(logs, "steps")
        logs["2024-01-03"] = {"steps": 8000}
        assert calculate_daily_streak(logs, "steps") == before + 1

    def test_same_input_same_result(self):
        logs = {"2024-01-01": {"steps": 7000}, "2024-01-02": {"steps": 100}}
        assert calculate_daily_streak(logs, "steps") == calculate_daily_streak(logs, "steps")

    def test_stretch_by_field_name_and_boolean_threshold(self):
        logs = {
            "2024-01-01": {"stretched": False},
            "2024-01-02": {"stretched": True},
            "2024-01-03": {"stretched": True},
        }
        assert calculate_daily_streak(logs, "stretched", True) == 2
        assert calculate_daily_streak(logs, Activity.STRETCH) == 2

    def test_absent_stretch_field_is_a_miss(self):
        logs = {"2024-01-01": {"stretched": True}, "2024-01-02": {"steps": 9000}}
        assert calculate_daily_streak(logs, "stretched") == 0

    def test_lifted_field_is_a_daily_boolean(self):
        logs = {
            "2024-01-01": {"lifted": False},
            "2024-01-02": {"lifted": True},
            "2024-01-03": {"lifted": True},
        }
        assert calculate_daily_streak(logs, "lifted", True) == 2

    def test_weekly_activity_rejected(self):
        with pytest.raises(ValueError):
            calculate_daily_streak({"2024-01-01": {"lifted": True}}, Activity.LIFTING)

    def test_empty(self):
        assert calculate_daily_streak({}, "steps") == 0


class TestReadingStreak:
    """Tests for calculate_reading_streak."""

    def test_book_change_on_latest_day(self):
        logs = {
            "2024-01-01": {"current_page": 50},
            "2024-01-02": {"current_page": 65},
            "2024-01-03": {"current_page": 40},
        }
        assert calculate_reading_streak(logs) == 0

    def test_counts_delta_hits(self):
        logs = {
            "2024-01-01": {"current_page": 50},
            "2024-01-02": {"current_page": 65},
            "2024-01-03": {"current_page": 80},
        }
        assert calculate_reading_streak(logs) == 3

    def test_short_day_breaks_streak(self):
        logs = {
            "2024-01-01": {"current_page": 20},
            "2024-01-02": {"current_page": 25},
            "2024-01-03": {"current_page": 40},
        }
        assert calculate_reading_streak(logs) == 1

    def test_day_without_page_inside_the_walk(self):
        logs = {
            "2024-01-01": {"current_page": 100},
            "2024-01-02": {"steps": 9000},
            "2024-01-03": {"current_page": 105},
        }
        # 01-03 is measured against 01-02, which has no page: full credit
        assert calculate_reading_streak(logs) == 1

    def test_reading_via_daily_streak_entry_point(self):
        logs = {"2024-01-01": {"current_page": 12}}
        assert calculate_daily_streak(logs, "current_page") == 1

    def test_lookback_page(self):
        logs = {"2024-01-01": {"current_page": 105}}
        assert calculate_reading_streak(logs, previous_page=100) == 0
        assert calculate_reading_streak(logs) == 1

    def test_empty(self):
        assert calculate_reading_streak({}) == 0


class TestWeeklyStreaks:
    def test_lifting(self):
        by_week = {"2024-01-01": 5, "2024-01-08": 3, "2024-01-15": 6, "2024-01-22": 5}
        assert calculate_lifting_streak(by_week) == 2

    def test_lifting_current_week_short(self):
        assert calculate_lifting_streak({"2024-01-01": 5, "2024-01-08": 2}) == 0

    def test_running(self):
        weekly = {
            "2024-01-01": {"did_3_mile": True},
            "2024-01-08": {"did_3_mile": True},
            "2024-01-15": {"did_3_mile": True},
        }
        assert calculate_running_streak(weekly) == 3

    def test_running_missed_latest(self):
        weekly = {"2024-01-01": {"did_3_mile": True}, "2024-01-08": {"did_3_mile": False}}
        assert calculate_running_streak(weekly) == 0

    def test_empty(self):
        assert calculate_lifting_streak({}) == 0
        assert calculate_running_streak({}) == 0
