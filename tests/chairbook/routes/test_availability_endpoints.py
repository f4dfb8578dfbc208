from datetime import date, datetime, time

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from chairbook.routes.availability_routes import (
    CheckSlotRequest,
    ResolveDayRequest,
    check_slot,
    list_slot_templates,
    resolve_chair_day,
)
from chairbook.scheduling.availability_resolver import SlotStatus

WINDOW = {'id': 1, 'chair_id': 3, 'day_of_week': 1, 'start_time': '09:00', 'end_time': '12:00', 'is_active': True}
BOOKING = {
    'id': 10,
    'user_id': 7,
    'chair_id': 3,
    'start_time': '2026-01-05T10:00:00',
    'end_time': '2026-01-05T10:30:00',
    'status': 'agendado',
}


def test_list_slot_templates_uses_configured_day() -> None:
    slots = list_slot_templates(day_start=None, day_end=None, step_minutes=None)

    assert len(slots) == 20
    assert slots[0].start == '08:00'


def test_list_slot_templates_honours_query_parameters() -> None:
    slots = list_slot_templates(day_start='09:00', day_end='10:00', step_minutes=15)

    assert [slot.start for slot in slots] == ['09:00', '09:15', '09:30', '09:45']


@pytest.mark.parametrize(
    ('day_start', 'day_end', 'step_minutes'),
    [
        ('10:00', '09:00', 30),
        ('09:00', '10:00', 0),
        ('nine', '10:00', 30),
    ],
)
def test_list_slot_templates_rejects_bad_configuration(day_start: str, day_end: str, step_minutes: int) -> None:
    with pytest.raises(HTTPException) as exception_info:
        list_slot_templates(day_start=day_start, day_end=day_end, step_minutes=step_minutes)

    assert exception_info.value.status_code == 400


def test_resolve_chair_day_returns_slots_and_stats() -> None:
    request = ResolveDayRequest(
        chair_id=3,
        date=date(2026, 1, 5),
        availabilities=[WINDOW, {'id': 'broken'}],
        bookings=[BOOKING, 'garbage'],
        day_start='09:00',
        day_end='11:00',
    )

    response = resolve_chair_day(request)

    assert [slot.status for slot in response.slots] == [
        SlotStatus.AVAILABLE,
        SlotStatus.AVAILABLE,
        SlotStatus.BOOKED,
        SlotStatus.AVAILABLE,
    ]
    assert response.slots[2].booking_id == 10
    assert response.slots[2].is_booked is True
    assert response.stats.total_slots == 4
    assert response.stats.available_slots == 3
    assert response.stats.occupied_slots == 1


def test_resolve_chair_day_rejects_bad_slot_configuration() -> None:
    request = ResolveDayRequest(chair_id=3, date=date(2026, 1, 5), step_minutes=-5)

    with pytest.raises(HTTPException) as exception_info:
        resolve_chair_day(request)

    assert exception_info.value.status_code == 400


def test_resolve_day_request_requires_a_date() -> None:
    with pytest.raises(ValidationError):
        ResolveDayRequest(chair_id=3, date='next monday')


def test_check_slot_reports_booked_slot_as_unavailable() -> None:
    request = CheckSlotRequest(
        chair_id=3,
        date=date(2026, 1, 5),
        time=time(10, 0),
        availabilities=[WINDOW],
        bookings=[BOOKING],
    )

    response = check_slot(request)

    assert response.available is False
    assert response.start_time == datetime(2026, 1, 5, 10, 0)


def test_check_slot_reports_open_slot_as_available() -> None:
    request = CheckSlotRequest(
        chair_id=3,
        date=date(2026, 1, 5),
        time=time(11, 30),
        availabilities=[WINDOW],
        bookings=[BOOKING],
    )

    assert check_slot(request).available is True


def test_check_slot_reports_inactive_chair_as_unavailable() -> None:
    request = CheckSlotRequest(
        chair_id=3,
        date=date(2026, 1, 5),
        time=time(11, 30),
        availabilities=[WINDOW],
        bookings=[BOOKING],
        chair={'id': 3, 'name': 'Chair A', 'location': 'Floor 2', 'status': 'inativa'},
    )

    assert check_slot(request).available is False


def test_resolve_chair_day_keeps_booking_with_unknown_status() -> None:
    request = ResolveDayRequest(
        chair_id=3,
        date=date(2026, 1, 5),
        availabilities=[WINDOW],
        bookings=[{**BOOKING, 'status': 'pendente'}],
    )

    slots = {entry.start_time.strftime('%H:%M'): entry for entry in resolve_chair_day(request).slots}

    assert slots['10:00'].status == SlotStatus.BOOKED
    assert slots['10:00'].booking_id == 10
