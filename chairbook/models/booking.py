"""Booking model definitions."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from chairbook.core import config
from chairbook.core.timeutils import comparable, same_day
from chairbook.models.choices import normalize_choice


class BookingStatus(str, Enum):
    SCHEDULED = 'scheduled'
    PRESENCE_CONFIRMED = 'presence_confirmed'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    NO_SHOW = 'no_show'


STATUS_ALIASES = {
    'agendado': BookingStatus.SCHEDULED,
    'confirmado': BookingStatus.SCHEDULED,
    'presenca_confirmada': BookingStatus.PRESENCE_CONFIRMED,
    'realizado': BookingStatus.COMPLETED,
    'concluido': BookingStatus.COMPLETED,
    'cancelado': BookingStatus.CANCELLED,
    'canceled': BookingStatus.CANCELLED,
    'falta': BookingStatus.NO_SHOW,
}


def session_duration() -> timedelta:
    return timedelta(minutes=config.SESSION_DURATION_MINUTES)


class Booking(BaseModel):
    """Represents a chair reservation for a single session."""

    id: int
    chair_id: int
    user_id: int | None = None
    start_time: datetime
    end_time: datetime | None = None
    status: BookingStatus = BookingStatus.SCHEDULED
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, value):
        if value is None:
            return BookingStatus.SCHEDULED
        return normalize_choice(value, BookingStatus, STATUS_ALIASES)

    @field_validator('notes')
    @classmethod
    def validate_notes(cls, value: str | None) -> str | None:
        if value is None:
            return None

        normalized = value.strip()
        if not normalized:
            return None

        if len(normalized) > config.MAX_NOTES_LENGTH:
            raise ValueError(f'Notes must be {config.MAX_NOTES_LENGTH} characters or fewer.')

        return normalized

    @model_validator(mode='after')
    def enforce_session_length(self) -> 'Booking':
        expected_end = self.start_time + session_duration()
        if self.end_time != expected_end:
            self.end_time = expected_end
        return self

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    @property
    def is_active(self) -> bool:
        return self.status in (BookingStatus.SCHEDULED, BookingStatus.PRESENCE_CONFIRMED)

    @property
    def is_scheduled(self) -> bool:
        return self.status == BookingStatus.SCHEDULED

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    @property
    def is_completed(self) -> bool:
        return self.status == BookingStatus.COMPLETED

    @property
    def is_presence_confirmed(self) -> bool:
        return self.status == BookingStatus.PRESENCE_CONFIRMED

    def is_today(self, now: datetime) -> bool:
        return same_day(self.start_time, now)

    def is_past(self, now: datetime) -> bool:
        return comparable(self.end_time) < comparable(now)

    def is_future(self, now: datetime) -> bool:
        return comparable(self.start_time) > comparable(now)


class BookingOccupancy(BaseModel):
    """The part of a booking record that decides whether it holds a slot.

    Used when a full Booking does not validate: only the chair and start must
    be readable, and any status not known to be cancelled keeps the slot.
    """

    id: int | None = None
    chair_id: int
    start_time: datetime
    status: Any = None

    @field_validator('id', mode='before')
    @classmethod
    def drop_unreadable_id(cls, value):
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @property
    def is_cancelled(self) -> bool:
        return normalize_choice(self.status, BookingStatus, STATUS_ALIASES) == BookingStatus.CANCELLED
