"""Per-slot availability for one chair on one calendar date.

Recurring availability windows and concrete bookings arrive as snapshots
already fetched from the backend. Availability records that fail validation
are logged and skipped. A booking only needs a readable chair and start to
hold its slot; anything else wrong with it is logged and the slot stays
booked.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time
from enum import Enum

from pydantic import BaseModel, ValidationError

from chairbook.core.timeutils import parse_clock, wall_clock
from chairbook.models.availability import Availability
from chairbook.models.booking import Booking, BookingOccupancy
from chairbook.models.chair import Chair
from chairbook.scheduling.slots import SlotConfigurationError, SlotTemplate, default_slots, slot_bounds

logger = logging.getLogger(__name__)


class SlotStatus(str, Enum):
    AVAILABLE = 'available'
    BOOKED = 'booked'
    UNAVAILABLE = 'unavailable'


class TimeSlot(BaseModel):
    start_time: datetime
    end_time: datetime
    available: bool
    booking_id: int | None = None


class ResolvedSlot(BaseModel):
    start_time: datetime
    end_time: datetime
    status: SlotStatus
    booking: Booking | BookingOccupancy | None = None

    @property
    def available(self) -> bool:
        return self.status == SlotStatus.AVAILABLE

    @property
    def booking_id(self) -> int | None:
        return self.booking.id if self.booking else None

    def to_time_slot(self) -> TimeSlot:
        return TimeSlot(
            start_time=self.start_time,
            end_time=self.end_time,
            available=self.available,
            booking_id=self.booking_id,
        )


def _record_label(record) -> str:
    if isinstance(record, dict):
        return repr(record.get('id', '?'))
    return repr(getattr(record, 'id', '?'))


def parse_records(records, model: type[BaseModel]) -> list:
    """Validate ``records`` into ``model`` instances, dropping the ones that fail."""
    parsed = []
    for record in records or ():
        if isinstance(record, model):
            parsed.append(record)
            continue

        try:
            parsed.append(model.model_validate(record, from_attributes=True))
        except ValidationError as exc:
            logger.warning(
                'Skipping malformed %s record %s: %d validation error(s)',
                model.__name__.lower(),
                _record_label(record),
                exc.error_count(),
            )

    return parsed


def parse_bookings(records) -> list[Booking | BookingOccupancy]:
    """Validate booking records, keeping the ones that still say when a chair is taken.

    A record that is not a valid Booking (long notes, bad ``end_time``, a status
    this package does not know) is read as a BookingOccupancy instead. Only
    records without a readable ``chair_id`` or ``start_time`` are dropped.
    """
    parsed: list[Booking | BookingOccupancy] = []
    for record in records or ():
        if isinstance(record, (Booking, BookingOccupancy)):
            parsed.append(record)
            continue

        try:
            parsed.append(Booking.model_validate(record, from_attributes=True))
            continue
        except ValidationError as exc:
            errors = exc.error_count()

        try:
            occupancy = BookingOccupancy.model_validate(record, from_attributes=True)
        except ValidationError:
            logger.warning(
                'Skipping malformed booking record %s: %d validation error(s)',
                _record_label(record),
                errors,
            )
            continue

        logger.warning(
            'Booking record %s has %d validation error(s); keeping its slot occupied',
            _record_label(record),
            errors,
        )
        parsed.append(occupancy)

    return parsed


def chair_is_closed(chair_id: int, chair) -> bool:
    """True when ``chair`` describes ``chair_id`` as inactive."""
    if chair is None:
        return False

    if not isinstance(chair, Chair):
        try:
            chair = Chair.model_validate(chair, from_attributes=True)
        except ValidationError as exc:
            logger.warning(
                'Ignoring malformed chair record %s: %d validation error(s)',
                _record_label(chair),
                exc.error_count(),
            )
            return False

    if chair.id != chair_id:
        logger.warning('Ignoring chair record %s while resolving chair %s', chair.id, chair_id)
        return False

    return not chair.is_active


def windows_for_day(chair_id: int, day: date, availabilities: Iterable[Availability]) -> list[Availability]:
    return [
        availability
        for availability in availabilities
        if availability.chair_id == chair_id and availability.is_valid_for_date(day)
    ]


def bookings_by_start(
    chair_id: int,
    day: date,
    bookings: Iterable[Booking | BookingOccupancy],
) -> dict[datetime, Booking | BookingOccupancy]:
    occupied: dict[datetime, Booking | BookingOccupancy] = {}
    for booking in bookings:
        if booking.chair_id != chair_id or booking.is_cancelled:
            continue

        start = wall_clock(booking.start_time)
        if start.date() != day:
            continue

        if start in occupied:
            logger.debug('Booking %s shares start %s with booking %s', booking.id, start, occupied[start].id)
            continue

        occupied[start] = booking

    return occupied


def _template_bounds(day: date, template: SlotTemplate) -> tuple[datetime, datetime]:
    try:
        return slot_bounds(day, template)
    except ValueError as exc:
        raise SlotConfigurationError(f'Invalid slot template {template!r}.') from exc


def resolve_day(
    chair_id: int,
    day: date,
    availabilities,
    bookings,
    slots: list[SlotTemplate] | None = None,
    chair=None,
) -> list[ResolvedSlot]:
    templates = default_slots() if slots is None else slots
    closed = chair_is_closed(chair_id, chair)
    windows = windows_for_day(chair_id, day, parse_records(availabilities, Availability))
    occupied = bookings_by_start(chair_id, day, parse_bookings(bookings))

    resolved: list[ResolvedSlot] = []
    for template in templates:
        slot_start, slot_end = _template_bounds(day, template)

        booking = occupied.get(slot_start)
        if booking is not None:
            status = SlotStatus.BOOKED
        elif closed:
            status = SlotStatus.UNAVAILABLE
        elif any(window.covers(slot_start.time(), slot_end.time()) for window in windows):
            status = SlotStatus.AVAILABLE
        else:
            status = SlotStatus.UNAVAILABLE

        resolved.append(ResolvedSlot(start_time=slot_start, end_time=slot_end, status=status, booking=booking))

    return resolved


def is_slot_available(
    chair_id: int,
    day: date,
    time_of_day: str | time,
    availabilities,
    bookings,
    slots: list[SlotTemplate] | None = None,
    chair=None,
) -> bool:
    target = datetime.combine(day, parse_clock(time_of_day))

    for entry in resolve_day(chair_id, day, availabilities, bookings, slots, chair=chair):
        if entry.start_time == target:
            return entry.available

    return False


def to_time_slots(resolved: Iterable[ResolvedSlot]) -> list[TimeSlot]:
    return [entry.to_time_slot() for entry in resolved]
