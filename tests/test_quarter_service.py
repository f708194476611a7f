from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from goalboard.services.quarter_service import (
    InvalidQuarterKeyError,
    QuarterService,
    first_day_of_quarter,
    group_by_quarter,
    parse_quarter_key,
    quarter_info,
    quarter_of,
)


@dataclass
class _Goal:
    title: str
    start_date: date


def _service(today: date) -> QuarterService:
    return QuarterService(today_provider=lambda: today)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 1, 1), 1),
        (date(2024, 3, 31), 1),
        (date(2024, 4, 1), 2),
        (date(2024, 6, 30), 2),
        (date(2024, 7, 1), 3),
        (date(2024, 9, 30), 3),
        (date(2024, 10, 1), 4),
        (date(2024, 12, 31), 4),
    ],
)
def test_quarter_of_boundaries(value: date, expected: int) -> None:
    assert quarter_of(value) == expected


def test_quarter_of_accepts_datetimes_and_iso_strings() -> None:
    assert quarter_of(datetime(2024, 11, 5, 23, 59)) == 4
    assert quarter_of("2024-05-17") == 2
    assert quarter_of("2024-08-01T10:30:00") == 3


def test_quarter_info_describes_the_quarter() -> None:
    info = quarter_info(date(2024, 5, 10))

    assert info.quarter == 2
    assert info.year == 2024
    assert info.label == "Q2 2024"
    assert info.months == "Apr - Jun"
    assert info.start_month == 3
    assert info.end_month == 5
    assert info.key == "2024-Q2"


def test_quarter_info_month_ranges_cover_the_year() -> None:
    infos = [quarter_info(first_day_of_quarter(2024, q)) for q in range(1, 5)]
    ranges = [(info.start_month, info.end_month) for info in infos]
    assert ranges == [(0, 2), (3, 5), (6, 8), (9, 11)]


def test_group_by_quarter_buckets_by_start_date_only() -> None:
    goal = _Goal(title="Spring plan", start_date=date(2024, 1, 15))

    grouped = group_by_quarter([goal])

    assert grouped == {"2024-Q1": [goal]}


def test_group_by_quarter_partitions_and_sorts() -> None:
    late = _Goal(title="late", start_date=date(2024, 3, 1))
    early = _Goal(title="early", start_date=date(2024, 1, 2))
    next_year = _Goal(title="next", start_date=date(2025, 1, 1))
    autumn = _Goal(title="autumn", start_date=date(2024, 10, 20))

    grouped = group_by_quarter([next_year, late, autumn, early])

    assert list(grouped) == ["2024-Q1", "2024-Q4", "2025-Q1"]
    assert grouped["2024-Q1"] == [early, late]
    assert sum(len(items) for items in grouped.values()) == 4


def test_group_by_quarter_keeps_input_order_for_equal_start_dates() -> None:
    first = _Goal(title="first", start_date=date(2024, 2, 2))
    second = _Goal(title="second", start_date=date(2024, 2, 2))

    assert group_by_quarter([first, second])["2024-Q1"] == [first, second]


def test_group_by_quarter_with_no_goals() -> None:
    assert group_by_quarter([]) == {}


def test_parse_quarter_key_round_trips() -> None:
    quarter = parse_quarter_key("2025-Q3")

    assert (quarter.year, quarter.quarter) == (2025, 3)
    assert quarter.label == "Q3 2025"
    assert quarter.months == "Jul - Sep"


@pytest.mark.parametrize(
    "key",
    ["", "2025", "2025-Q", "Q1-2025", "2025-q1", "2025-Q5", "2025-Q0", "x2025-Q1"],
)
def test_parse_quarter_key_rejects_malformed_keys(key: str) -> None:
    with pytest.raises(InvalidQuarterKeyError):
        parse_quarter_key(key)


def test_all_quarters_spans_current_and_next_year() -> None:
    quarters = _service(date(2024, 6, 1)).all_quarters()

    assert [q.key for q in quarters] == [
        "2024-Q1",
        "2024-Q2",
        "2024-Q3",
        "2024-Q4",
        "2025-Q1",
        "2025-Q2",
        "2025-Q3",
        "2025-Q4",
    ]


def test_all_quarters_is_recomputed_on_each_call() -> None:
    today = {"value": date(2024, 6, 1)}
    service = QuarterService(today_provider=lambda: today["value"])

    assert service.all_quarters()[0].key == "2024-Q1"
    today["value"] = date(2026, 2, 1)
    assert service.all_quarters()[0].key == "2026-Q1"


def test_current_and_past_quarter_classification() -> None:
    service = _service(date(2024, 6, 1))
    current = service.current_quarter()

    assert current.key == "2024-Q2"
    assert service.is_current_quarter(current) is True
    assert service.is_past_quarter(current) is False
    assert service.is_past_quarter(parse_quarter_key("2024-Q1")) is True
    assert service.is_past_quarter(parse_quarter_key("2023-Q4")) is True
    assert service.is_past_quarter(parse_quarter_key("2024-Q3")) is False
    assert service.is_current_quarter(parse_quarter_key("2025-Q2")) is False


def test_serialize_quarter_includes_flags_and_goals() -> None:
    service = _service(date(2024, 6, 1))

    payload = service.serialize_quarter(parse_quarter_key("2024-Q2"), [{"id": "g1"}])

    assert payload == {
        "key": "2024-Q2",
        "quarter": 2,
        "year": 2024,
        "label": "Q2 2024",
        "months": "Apr - Jun",
        "start_month": 3,
        "end_month": 5,
        "is_current": True,
        "is_past": False,
        "goals": [{"id": "g1"}],
    }
