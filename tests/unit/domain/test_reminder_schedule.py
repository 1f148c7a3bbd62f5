"""
Unit tests for reminder fire-time computation
"""

from datetime import UTC, datetime

import pytest

from src.domain.entities import ReminderType
from src.domain.reminder_schedule import compute_reminder_times, parse_reminder_offsets


def test_default_offsets_are_24h_and_1h_before():
    start = datetime(2025, 3, 1, 10, 0)

    times = compute_reminder_times(start)

    assert times == [
        (ReminderType.hours_24, datetime(2025, 2, 28, 10, 0)),
        (ReminderType.hour_1, datetime(2025, 3, 1, 9, 0)),
    ]


def test_all_reminders_fire_strictly_before_start():
    start = datetime(2025, 3, 1, 10, 0)
    for _, fire_at in compute_reminder_times(start):
        assert fire_at < start


def test_aware_start_is_normalized_to_utc():
    start = datetime(2025, 3, 1, 10, 0, tzinfo=UTC)

    times = compute_reminder_times(start)

    assert times[-1][1] == datetime(2025, 3, 1, 9, 0)
    assert times[-1][1].tzinfo is None


def test_past_reminders_are_still_computed():
    start = datetime(2000, 1, 1, 0, 30)

    times = compute_reminder_times(start)

    assert len(times) == 2


def test_parse_reminder_offsets_from_config():
    offsets = parse_reminder_offsets({"24_hours": 1440, "custom": 15})

    assert offsets == {ReminderType.hours_24: 1440, ReminderType.custom: 15}


def test_parse_reminder_offsets_rejects_non_positive():
    with pytest.raises(ValueError):
        parse_reminder_offsets({"1_hour": 0})
