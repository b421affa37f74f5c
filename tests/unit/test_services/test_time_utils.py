# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for shift time arithmetic."""

import pytest

from shiftdesk.services.time_utils import (
    duration_hours,
    is_valid_time,
    minutes_to_time,
    normalize_time,
    time_to_minutes,
    times_overlap,
)


class TestTimeToMinutes:
    """Tests for time_to_minutes."""

    def test_midnight(self) -> None:
        assert time_to_minutes("00:00") == 0

    def test_last_minute_of_day(self) -> None:
        assert time_to_minutes("23:59") == 1439

    def test_single_digit_hour(self) -> None:
        assert time_to_minutes("9:30") == 570

    def test_minutes_to_time_pads(self) -> None:
        assert minutes_to_time(0) == "00:00"
        assert minutes_to_time(545) == "09:05"
        assert minutes_to_time(1439) == "23:59"


class TestDuration:
    """Tests for duration_hours."""

    def test_four_hours(self) -> None:
        assert duration_hours("09:00", "13:00") == 4.0

    def test_partial_hour(self) -> None:
        assert duration_hours("09:00", "12:59") == pytest.approx(3 + 59 / 60)

    def test_negative_when_end_before_start(self) -> None:
        assert duration_hours("17:00", "09:00") == -8.0

    def test_zero_for_equal_times(self) -> None:
        assert duration_hours("10:00", "10:00") == 0.0

    def test_full_day(self) -> None:
        assert duration_hours("00:00", "23:59") == pytest.approx(1439 / 60)


class TestTimesOverlap:
    """Tests for times_overlap."""

    def test_touching_ranges_do_not_overlap(self) -> None:
        assert not times_overlap("09:00", "13:00", "13:00", "17:00")
        assert not times_overlap("13:00", "17:00", "09:00", "13:00")

    def test_one_minute_overlap(self) -> None:
        assert times_overlap("09:00", "13:00", "12:59", "17:00")

    def test_containment(self) -> None:
        assert times_overlap("08:00", "18:00", "11:00", "14:00")
        assert times_overlap("11:00", "14:00", "08:00", "18:00")

    def test_identical_ranges(self) -> None:
        assert times_overlap("09:00", "17:00", "09:00", "17:00")

    def test_disjoint_ranges(self) -> None:
        assert not times_overlap("00:00", "04:00", "19:59", "23:59")


class TestValidation:
    """Tests for time format checks."""

    @pytest.mark.parametrize("value", ["00:00", "9:05", "09:05", "23:59"])
    def test_valid_times(self, value: str) -> None:
        assert is_valid_time(value)

    @pytest.mark.parametrize("value", ["24:00", "12:60", "1200", "ab:cd", "", "9:5"])
    def test_invalid_times(self, value: str) -> None:
        assert not is_valid_time(value)

    def test_normalize_pads_hour(self) -> None:
        assert normalize_time(" 9:05 ") == "09:05"

    def test_normalize_rejects_bad_value(self) -> None:
        with pytest.raises(ValueError):
            normalize_time("25:00")
