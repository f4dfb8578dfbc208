from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from chairbook.auth.dependencies import get_actor_role
from chairbook.models.booking import Booking
from chairbook.models.user import UserRole
from chairbook.scheduling.availability_resolver import parse_records
from chairbook.scheduling.notifications import BookingNotifications, classify_bookings
from chairbook.scheduling.stats import BookingStats, booking_stats
from chairbook.scheduling.time_window import BookingSummary, summarize_booking

router = APIRouter(tags=['bookings'])


class EligibilityRequest(BaseModel):
    booking: Booking
    now: datetime | None = None


class BookingSnapshotRequest(BaseModel):
    bookings: list[Any] = Field(default_factory=list)
    now: datetime | None = None


def resolve_now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


@router.post('/eligibility', response_model=BookingSummary)
def booking_eligibility(
    data: EligibilityRequest,
    actor_role: UserRole | None = Depends(get_actor_role),
):
    return summarize_booking(data.booking, resolve_now(data.now), actor_role)


@router.post('/notifications', response_model=BookingNotifications)
def booking_notifications(data: BookingSnapshotRequest):
    return classify_bookings(parse_records(data.bookings, Booking), resolve_now(data.now))


@router.post('/stats', response_model=BookingStats)
def booking_statistics(data: BookingSnapshotRequest):
    return booking_stats(parse_records(data.bookings, Booking), resolve_now(data.now))
