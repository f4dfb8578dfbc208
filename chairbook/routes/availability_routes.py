from datetime import date, datetime, time
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from chairbook.core import config
from chairbook.scheduling.availability_resolver import ResolvedSlot, SlotStatus, is_slot_available, resolve_day
from chairbook.scheduling.slots import SlotConfigurationError, SlotTemplate, generate_slots
from chairbook.scheduling.stats import AvailabilityStats, availability_stats

router = APIRouter(tags=['availability'])


class ResolveDayRequest(BaseModel):
    chair_id: int
    date: date
    # Raw records; the resolver validates them one by one and drops bad ones.
    availabilities: list[Any] = Field(default_factory=list)
    bookings: list[Any] = Field(default_factory=list)
    chair: Any = None
    day_start: str | None = None
    day_end: str | None = None
    step_minutes: int | None = None


class CheckSlotRequest(ResolveDayRequest):
    time: time


class ResolvedSlotResponse(BaseModel):
    start_time: datetime
    end_time: datetime
    status: SlotStatus
    is_available: bool
    is_booked: bool
    booking_id: int | None = None


class ResolveDayResponse(BaseModel):
    chair_id: int
    date: date
    slots: list[ResolvedSlotResponse]
    stats: AvailabilityStats


class SlotCheckResponse(BaseModel):
    chair_id: int
    start_time: datetime
    available: bool


def build_slot_templates(
    day_start: str | None,
    day_end: str | None,
    step_minutes: int | None,
) -> list[SlotTemplate]:
    try:
        return generate_slots(
            day_start or config.BUSINESS_DAY_START,
            day_end or config.BUSINESS_DAY_END,
            step_minutes if step_minutes is not None else config.SLOT_STEP_MINUTES,
        )
    except SlotConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


def to_response(entry: ResolvedSlot) -> ResolvedSlotResponse:
    return ResolvedSlotResponse(
        start_time=entry.start_time,
        end_time=entry.end_time,
        status=entry.status,
        is_available=entry.available,
        is_booked=entry.status == SlotStatus.BOOKED,
        booking_id=entry.booking_id,
    )


@router.get('/slots', response_model=list[SlotTemplate])
def list_slot_templates(
    day_start: str | None = Query(default=None),
    day_end: str | None = Query(default=None),
    step_minutes: int | None = Query(default=None),
):
    return build_slot_templates(day_start, day_end, step_minutes)


@router.post('/resolve', response_model=ResolveDayResponse)
def resolve_chair_day(data: ResolveDayRequest):
    templates = build_slot_templates(data.day_start, data.day_end, data.step_minutes)
    resolved = resolve_day(
        data.chair_id,
        data.date,
        data.availabilities,
        data.bookings,
        templates,
        chair=data.chair,
    )

    return ResolveDayResponse(
        chair_id=data.chair_id,
        date=data.date,
        slots=[to_response(entry) for entry in resolved],
        stats=availability_stats(resolved),
    )


@router.post('/check', response_model=SlotCheckResponse)
def check_slot(data: CheckSlotRequest):
    templates = build_slot_templates(data.day_start, data.day_end, data.step_minutes)
    available = is_slot_available(
        data.chair_id,
        data.date,
        data.time,
        data.availabilities,
        data.bookings,
        templates,
        chair=data.chair,
    )

    return SlotCheckResponse(
        chair_id=data.chair_id,
        start_time=datetime.combine(data.date, data.time.replace(second=0, microsecond=0)),
        available=available,
    )
