"""Tests for daily aggregation, dates and progress."""

from datetime import UTC, date, datetime

from nutritrack.domain.nutrition import DailySummary, NutritionGoals
from nutritrack.services.daily import (
    calculate_macro_shares,
    calculate_progress,
    entries_for_day,
    format_date_label,
    local_today,
    shift_date,
    summarize,
)
from tests.conftest import make_entry

DAY = date(2026, 10, 19)


def test_summarize_empty_log() -> None:
    assert summarize([], DAY) == DailySummary(calories=0, protein=0, carbs=0, fat=0)


def test_summarize_filters_by_day() -> None:
    entries = [
        make_entry(calories=165, protein=31, carbs=0, fat=4),
        make_entry(name="Rice", calories=200, protein=4, carbs=44, fat=0.5),
        make_entry(
            name="Pizza",
            calories=800,
            protein=30,
            carbs=90,
            fat=35,
            day=shift_date(DAY, -1),
        ),
    ]

    summary = summarize(entries, DAY)

    assert summary == DailySummary(calories=365, protein=35, carbs=44, fat=4.5)


def test_summarize_is_order_independent() -> None:
    entries = [
        make_entry(calories=120, protein=3, carbs=20, fat=2),
        make_entry(calories=310, protein=25, carbs=5, fat=18),
        make_entry(calories=95, protein=0, carbs=25, fat=0),
    ]

    assert summarize(entries, DAY) == summarize(list(reversed(entries)), DAY)


def test_entries_for_day_keeps_insertion_order() -> None:
    first = make_entry(name="Oats")
    other_day = make_entry(name="Soup", day=shift_date(DAY, 1))
    second = make_entry(name="Apple")

    assert entries_for_day([first, other_day, second], DAY) == [first, second]


def test_shift_date_crosses_boundaries() -> None:
    assert shift_date(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert shift_date(date(2025, 3, 1), -1) == date(2025, 2, 28)
    assert shift_date(date(2024, 12, 31), 1) == date(2025, 1, 1)
    assert shift_date(date(2025, 1, 1), -1) == date(2024, 12, 31)


def test_shift_date_round_trip() -> None:
    for day in (date(2024, 2, 29), date(2025, 12, 31), DAY):
        assert shift_date(shift_date(day, 1), -1) == day


def test_format_date_label() -> None:
    assert format_date_label(DAY, today=DAY) == "Today"
    assert format_date_label(date(2026, 10, 18), today=DAY) == "Yesterday"
    assert format_date_label(date(2026, 10, 16), today=DAY) == "Fri, Oct 16"
    assert format_date_label(date(2026, 10, 20), today=DAY) == "Tue, Oct 20"


def test_format_date_label_uses_english_names() -> None:
    assert format_date_label(date(2023, 12, 31), today=DAY) == "Sun, Dec 31"
    assert format_date_label(date(2025, 1, 4), today=DAY) == "Sat, Jan 4"
    assert format_date_label(date(2026, 5, 6), today=DAY) == "Wed, May 6"


def test_local_today_in_timezone() -> None:
    assert local_today("UTC") == datetime.now(tz=UTC).date()


def test_progress_caps_percentages() -> None:
    goals = NutritionGoals(calories=2000, protein=100, carbs=250, fat=60)
    summary = DailySummary(calories=3000, protein=50, carbs=125, fat=90)

    progress = calculate_progress(summary, goals)

    assert progress.remaining_calories == -1000
    assert progress.calorie_percent == 100
    assert progress.protein_percent == 50
    assert progress.carbs_percent == 50
    assert progress.fat_percent == 100


def test_progress_zero_goals_report_zero() -> None:
    goals = NutritionGoals(calories=0, protein=0, carbs=-10, fat=0)
    summary = DailySummary(calories=500, protein=20, carbs=60, fat=10)

    progress = calculate_progress(summary, goals)

    assert progress.calorie_percent == 0
    assert progress.protein_percent == 0
    assert progress.carbs_percent == 0
    assert progress.fat_percent == 0


def test_macro_shares() -> None:
    goals = NutritionGoals(calories=2000, protein=100, carbs=250, fat=60)
    summary = DailySummary(calories=780, protein=50, carbs=100, fat=20)

    shares = calculate_macro_shares(summary, goals)

    assert (shares.protein, shares.carbs, shares.fat) == (10, 20, 9)


def test_macro_shares_zero_calorie_goal() -> None:
    goals = NutritionGoals(calories=0, protein=0, carbs=0, fat=0)
    summary = DailySummary(calories=780, protein=50, carbs=100, fat=20)

    shares = calculate_macro_shares(summary, goals)

    assert (shares.protein, shares.carbs, shares.fat) == (0, 0, 0)
