from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from chairbook.auth import jwt_handler
from chairbook.auth.dependencies import get_actor_role
from chairbook.models.booking import Booking
from chairbook.models.user import UserRole
from chairbook.routes.booking_routes import (
    BookingSnapshotRequest,
    EligibilityRequest,
    booking_eligibility,
    booking_notifications,
    booking_statistics,
    resolve_now,
)

NOW = datetime(2026, 1, 5, 9, 0)


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def make_booking(booking_id: int, start_time: datetime, status: str = 'agendado') -> dict:
    return {'id': booking_id, 'chair_id': 1, 'user_id': 2, 'start_time': start_time.isoformat(), 'status': status}


def test_get_actor_role_reads_role_claim() -> None:
    token = jwt_handler.create_access_token(subject='ana@example.com', role='atendente')

    assert get_actor_role(bearer(token)) == UserRole.ATTENDANT


def test_get_actor_role_returns_none_for_unknown_role() -> None:
    token = jwt_handler.create_access_token(subject='ana@example.com', role='supervisor')

    assert get_actor_role(bearer(token)) is None


def test_get_actor_role_rejects_invalid_token() -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_actor_role(bearer('not-a-token'))

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Invalid token'


def test_get_actor_role_rejects_token_without_subject() -> None:
    token = jwt_handler.create_access_token(subject='', role='admin')

    with pytest.raises(HTTPException) as exception_info:
        get_actor_role(bearer(token))

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Invalid token subject'


def test_get_actor_role_rejects_expired_token() -> None:
    token = jwt_handler.create_access_token(subject='ana@example.com', role='admin', expires_minutes=-1)

    with pytest.raises(HTTPException) as exception_info:
        get_actor_role(bearer(token))

    assert exception_info.value.status_code == 401


def test_booking_eligibility_for_regular_user() -> None:
    booking = Booking(id=5, chair_id=1, user_id=2, start_time=NOW + timedelta(hours=2))

    summary = booking_eligibility(EligibilityRequest(booking=booking, now=NOW), actor_role=UserRole.USER)

    assert summary.can_cancel is False
    assert summary.can_reschedule is False
    assert summary.time_remaining == '2 hours'


def test_booking_eligibility_for_attendant_after_session_start() -> None:
    booking = Booking(id=5, chair_id=1, user_id=2, start_time=NOW - timedelta(minutes=10))

    summary = booking_eligibility(EligibilityRequest(booking=booking, now=NOW), actor_role=UserRole.ATTENDANT)

    assert summary.can_cancel is False
    assert summary.can_confirm_presence is True
    assert summary.can_mark_no_show is True
    assert summary.time_remaining == 'already passed'


def test_booking_notifications_skip_malformed_records() -> None:
    request = BookingSnapshotRequest(
        bookings=[
            make_booking(1, NOW + timedelta(hours=3)),
            make_booking(2, NOW - timedelta(hours=3)),
            {'id': 3, 'chair_id': 1, 'start_time': 'yesterday'},
        ],
        now=NOW,
    )

    notifications = booking_notifications(request)

    assert [booking.id for booking in notifications.upcoming] == [1]
    assert [booking.id for booking in notifications.overdue] == [2]
    assert [booking.id for booking in notifications.reminders] == [1]


def test_booking_statistics() -> None:
    request = BookingSnapshotRequest(
        bookings=[
            make_booking(1, NOW + timedelta(hours=3)),
            make_booking(2, NOW - timedelta(hours=3), status='realizado'),
            make_booking(3, NOW + timedelta(days=1), status='cancelado'),
        ],
        now=NOW,
    )

    stats = booking_statistics(request)

    assert stats.total == 3
    assert stats.today == 2
    assert stats.upcoming == 1
    assert stats.completed == 1
    assert stats.cancelled == 1


def test_resolve_now_prefers_explicit_value() -> None:
    assert resolve_now(NOW) == NOW
    assert resolve_now(None).tzinfo is not None
