from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from chairbook.core import config
from chairbook.core.timeutils import comparable
from chairbook.models.booking import Booking


class ReminderLevel(str, Enum):
    ONE_HOUR = 'one_hour'
    ONE_DAY = 'one_day'


class BookingNotifications(BaseModel):
    upcoming: list[Booking] = []
    overdue: list[Booking] = []
    reminders: list[Booking] = []


def whole_hours_until(booking: Booking, now: datetime) -> int:
    seconds = (comparable(booking.start_time) - comparable(now)).total_seconds()
    # Truncate toward zero so a session 59 minutes away is "0 hours" away.
    return int(seconds / 3600)


def classify_bookings(bookings: Iterable[Booking], now: datetime) -> BookingNotifications:
    ordered = sorted(
        (booking for booking in bookings if booking.is_scheduled),
        key=lambda booking: comparable(booking.start_time),
    )
    current = comparable(now)

    upcoming = [booking for booking in ordered if comparable(booking.start_time) > current]
    overdue = [booking for booking in ordered if comparable(booking.start_time) < current]
    reminders = [
        booking
        for booking in upcoming
        if 0 < whole_hours_until(booking, now) <= config.REMINDER_WINDOW_HOURS
    ]

    return BookingNotifications(upcoming=upcoming, overdue=overdue, reminders=reminders)


def reminder_level(booking: Booking, now: datetime) -> ReminderLevel | None:
    if not booking.is_future(now):
        return None

    hours = whole_hours_until(booking, now)
    if hours <= 1:
        return ReminderLevel.ONE_HOUR
    if hours <= config.REMINDER_WINDOW_HOURS:
        return ReminderLevel.ONE_DAY
    return None
