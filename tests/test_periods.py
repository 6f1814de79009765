"""
Test cases for forecast period labelling across daily, weekly, monthly and
opaque period formats.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecaster.periods import next_periods


def test_daily_dates():
    assert next_periods(["2024-01-01", "2024-01-02"], 3) == ["2024-01-03", "2024-01-04", "2024-01-05"]


def test_single_date_steps_by_day_across_month_end():
    assert next_periods(["2024-01-31"], 2) == ["2024-02-01", "2024-02-02"]


def test_weekly_spacing_is_inherited():
    assert next_periods(["2024-01-01", "2024-01-08"], 2) == ["2024-01-15", "2024-01-22"]


def test_non_increasing_dates_fall_back_to_daily():
    assert next_periods(["2024-01-05", "2024-01-05"], 1) == ["2024-01-06"]
    assert next_periods(["garbage", "2024-01-05"], 1) == ["2024-01-06"]


def test_monthly_labels_roll_over_year():
    assert next_periods(["2023-11", "2023-12"], 3) == ["2024-01", "2024-02", "2024-03"]


def test_opaque_labels():
    assert next_periods(["week-7"], 2) == ["week-7+1", "week-7+2"]
    assert next_periods(["2024-13"], 1) == ["2024-13+1"]
    assert next_periods(["2024-02-30"], 1) == ["2024-02-30+1"]


def test_empty_and_zero_horizon():
    assert next_periods([], 2) == ["+1", "+2"]
    assert next_periods(["2024-01-01"], 0) == []


def test_calendar_overflow_falls_back_to_opaque():
    assert next_periods(["9999-12-31"], 1) == ["9999-12-31+1"]
    assert next_periods(["9999-12"], 1) == ["9999-12+1"]
