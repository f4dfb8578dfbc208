from datetime import date, datetime, timedelta

from pydantic import BaseModel

from chairbook.core import config
from chairbook.core.timeutils import format_clock, parse_clock


class SlotConfigurationError(ValueError):
    """Raised when a business day cannot be split into slots."""


class SlotTemplate(BaseModel):
    start: str
    end: str

    model_config = {'frozen': True}


def generate_slots(day_start: str, day_end: str, step_minutes: int) -> list[SlotTemplate]:
    """Split ``day_start``..``day_end`` into contiguous ``step_minutes`` slots.

    A trailing slot that would run past ``day_end`` is not emitted.
    """
    if step_minutes <= 0:
        raise SlotConfigurationError('Slot length must be a positive number of minutes.')

    try:
        opening = parse_clock(day_start)
        closing = parse_clock(day_end)
    except ValueError as exc:
        raise SlotConfigurationError(str(exc)) from exc

    if opening >= closing:
        raise SlotConfigurationError('The business day must end after it starts.')

    anchor = date(2000, 1, 1)
    current = datetime.combine(anchor, opening)
    day_close = datetime.combine(anchor, closing)
    step = timedelta(minutes=step_minutes)

    slots: list[SlotTemplate] = []
    while current + step <= day_close:
        slots.append(SlotTemplate(start=format_clock(current.time()), end=format_clock((current + step).time())))
        current += step

    return slots


def default_slots() -> list[SlotTemplate]:
    return generate_slots(config.BUSINESS_DAY_START, config.BUSINESS_DAY_END, config.SLOT_STEP_MINUTES)


def slot_bounds(day: date, template: SlotTemplate) -> tuple[datetime, datetime]:
    return (
        datetime.combine(day, parse_clock(template.start)),
        datetime.combine(day, parse_clock(template.end)),
    )
