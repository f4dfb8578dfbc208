"""Cancellation, reschedule and attendance windows for bookings.

Every function here takes the current instant as an argument and never reads
the clock, so results depend only on the inputs.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel

from chairbook.core import config
from chairbook.core.timeutils import comparable
from chairbook.models.booking import Booking, BookingStatus
from chairbook.models.user import UserRole, is_staff, parse_role

ALREADY_PASSED = 'already passed'

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


class BookingSummary(BaseModel):
    booking_id: int
    status: BookingStatus
    can_cancel: bool
    can_reschedule: bool
    can_confirm_presence: bool
    can_mark_no_show: bool
    cancellation_deadline: datetime
    time_remaining: str


def cancellation_lead_time() -> timedelta:
    return timedelta(hours=config.MIN_CANCEL_LEAD_HOURS)


def cancellation_deadline(booking: Booking) -> datetime:
    return booking.start_time - cancellation_lead_time()


def has_started(booking: Booking, now: datetime) -> bool:
    return comparable(booking.start_time) < comparable(now)


def can_cancel(booking: Booking, now: datetime, actor_role) -> bool:
    # Attendance statuses lock cancellation as well as cancelled bookings.
    if booking.status != BookingStatus.SCHEDULED:
        return False

    if has_started(booking, now):
        return False

    role = parse_role(actor_role)
    if role in (UserRole.ATTENDANT, UserRole.ADMIN):
        return True

    if role == UserRole.USER:
        return comparable(now) < comparable(cancellation_deadline(booking))

    return False


def can_reschedule(booking: Booking, now: datetime, actor_role) -> bool:
    if not is_staff(actor_role):
        return False

    if booking.status != BookingStatus.SCHEDULED:
        return False

    return not has_started(booking, now)


def can_confirm_presence(booking: Booking, actor_role) -> bool:
    return is_staff(actor_role) and booking.status == BookingStatus.SCHEDULED


def can_mark_no_show(booking: Booking, now: datetime, actor_role) -> bool:
    # A no-show can only be recorded once the session time has gone by.
    return (
        is_staff(actor_role)
        and booking.status == BookingStatus.SCHEDULED
        and has_started(booking, now)
    )


def format_remaining(booking_start: datetime, now: datetime) -> str:
    start = comparable(booking_start)
    current = comparable(now)

    if start <= current:
        return ALREADY_PASSED

    diff_minutes = int((start - current).total_seconds() // 60)

    # Hours and days are truncated, so 119 minutes reads as "1 hours".
    if diff_minutes < MINUTES_PER_HOUR:
        return f'{diff_minutes} minutes'

    if diff_minutes < MINUTES_PER_DAY:
        return f'{diff_minutes // MINUTES_PER_HOUR} hours'

    return f'{diff_minutes // MINUTES_PER_DAY} days'


def summarize_booking(booking: Booking, now: datetime, actor_role) -> BookingSummary:
    return BookingSummary(
        booking_id=booking.id,
        status=booking.status,
        can_cancel=can_cancel(booking, now, actor_role),
        can_reschedule=can_reschedule(booking, now, actor_role),
        can_confirm_presence=can_confirm_presence(booking, actor_role),
        can_mark_no_show=can_mark_no_show(booking, now, actor_role),
        cancellation_deadline=cancellation_deadline(booking),
        time_remaining=format_remaining(booking.start_time, now),
    )
