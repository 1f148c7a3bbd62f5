"""
Reminder Schedule

Computes when reminders for a confirmed session should fire.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Tuple

from src.domain.base import to_naive_utc
from src.domain.entities import ReminderType

DEFAULT_REMINDER_OFFSETS: Dict[ReminderType, int] = {
    ReminderType.hours_24: 24 * 60,
    ReminderType.hour_1: 60,
}


def parse_reminder_offsets(raw: Mapping[str, int]) -> Dict[ReminderType, int]:
    """Build an offset table from config, e.g. {"24_hours": 1440, "1_hour": 60}"""
    offsets = {ReminderType(key): int(minutes) for key, minutes in raw.items()}
    for reminder_type, minutes in offsets.items():
        if minutes <= 0:
            raise ValueError(
                f"Reminder offset for {reminder_type.value} must be positive, got {minutes}"
            )
    return offsets


def compute_reminder_times(
    scheduled_start: datetime,
    offsets: Mapping[ReminderType, int] = DEFAULT_REMINDER_OFFSETS,
) -> List[Tuple[ReminderType, datetime]]:
    """
    Reminder instants for a session starting at `scheduled_start`.

    Every instant is strictly before the start. Instants already in the
    past are returned as well; suppressing stale reminders is up to delivery.
    Result is ordered by fire time, earliest first.
    """
    start = to_naive_utc(scheduled_start)
    times = [
        (reminder_type, start - timedelta(minutes=minutes))
        for reminder_type, minutes in offsets.items()
        if minutes > 0
    ]
    return sorted(times, key=lambda item: item[1])
