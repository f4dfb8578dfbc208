from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel

from chairbook.models.booking import Booking, BookingStatus
from chairbook.scheduling.availability_resolver import ResolvedSlot, SlotStatus


class BookingStats(BaseModel):
    total: int = 0
    today: int = 0
    upcoming: int = 0
    completed: int = 0
    cancelled: int = 0
    no_show: int = 0


class AvailabilityStats(BaseModel):
    total_slots: int = 0
    available_slots: int = 0
    occupied_slots: int = 0
    availability_rate: float = 0.0


def booking_stats(bookings: Iterable[Booking], now: datetime) -> BookingStats:
    stats = BookingStats()
    for booking in bookings:
        stats.total += 1

        if booking.is_today(now) and not booking.is_cancelled:
            stats.today += 1

        if booking.is_scheduled and booking.is_future(now):
            stats.upcoming += 1

        if booking.status == BookingStatus.COMPLETED:
            stats.completed += 1
        elif booking.status == BookingStatus.CANCELLED:
            stats.cancelled += 1
        elif booking.status == BookingStatus.NO_SHOW:
            stats.no_show += 1

    return stats


def availability_stats(resolved: Iterable[ResolvedSlot]) -> AvailabilityStats:
    entries = list(resolved)
    available = sum(1 for entry in entries if entry.status == SlotStatus.AVAILABLE)
    occupied = sum(1 for entry in entries if entry.status == SlotStatus.BOOKED)

    return AvailabilityStats(
        total_slots=len(entries),
        available_slots=available,
        occupied_slots=occupied,
        availability_rate=available / len(entries) if entries else 0.0,
    )
