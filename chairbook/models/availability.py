"""Availability model definitions."""

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, Field, field_validator, model_validator

from chairbook.core import config
from chairbook.core.timeutils import day_of_week_index, format_clock, parse_clock
from chairbook.scheduling.formatting import day_of_week_name


class Availability(BaseModel):
    """Represents a recurring weekly window in which a chair can be booked."""

    id: int
    chair_id: int
    day_of_week: int = Field(ge=0, le=6)
    start_time: time
    end_time: time
    is_active: bool = True
    valid_from: date | None = None
    valid_to: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('start_time', 'end_time', mode='before')
    @classmethod
    def parse_time_of_day(cls, value):
        if isinstance(value, str):
            return parse_clock(value)
        return value

    @field_validator('valid_from', 'valid_to', mode='before')
    @classmethod
    def truncate_validity_timestamp(cls, value):
        # The backend serializes validity dates as midnight timestamps.
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and 'T' in value:
            return value.split('T', 1)[0]
        return value

    @model_validator(mode='after')
    def check_window(self) -> 'Availability':
        if self.start_time >= self.end_time:
            raise ValueError('Availability must end after it starts.')
        if self.valid_from and self.valid_to and self.valid_from > self.valid_to:
            raise ValueError('valid_from must not be after valid_to.')
        return self

    @property
    def day_of_week_name(self) -> str:
        return day_of_week_name(self.day_of_week)

    def is_valid_for_date(self, day: date) -> bool:
        if not self.is_active:
            return False

        if day_of_week_index(day) != self.day_of_week:
            return False

        if self.valid_from is not None and day < self.valid_from:
            return False

        if self.valid_to is not None and day > self.valid_to:
            return False

        return True

    def covers(self, slot_start: time, slot_end: time) -> bool:
        return self.start_time <= slot_start and slot_end <= self.end_time

    def time_slots(self, step_minutes: int | None = None) -> list[str]:
        if step_minutes is None:
            step_minutes = config.SLOT_STEP_MINUTES
        if step_minutes <= 0:
            raise ValueError('step_minutes must be positive.')

        step = timedelta(minutes=step_minutes)
        anchor = date(2000, 1, 1)
        current = datetime.combine(anchor, self.start_time)
        window_end = datetime.combine(anchor, self.end_time)

        labels: list[str] = []
        while current < window_end:
            labels.append(format_clock(current.time()))
            current += step

        return labels
