from datetime import date, datetime, time, timezone


def comparable(moment: datetime) -> datetime:
    """Return ``moment`` as a naive datetime that can be ordered against any other.

    Aware values are converted to UTC and stripped; naive values are taken as
    already being in UTC.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def wall_clock(moment: datetime) -> datetime:
    return moment.replace(tzinfo=None, second=0, microsecond=0)


def parse_clock(value: str | time) -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)

    normalized = value.strip()
    for pattern in ('%H:%M', '%H:%M:%S'):
        try:
            return datetime.strptime(normalized, pattern).time().replace(second=0)
        except ValueError:
            continue

    raise ValueError(f'Invalid time of day: {value!r}. Expected HH:MM.')


def format_clock(value: time) -> str:
    return value.strftime('%H:%M')


def day_of_week_index(day: date) -> int:
    # 0 is Sunday, matching the day_of_week stored on availability records.
    return (day.weekday() + 1) % 7


def same_day(moment: datetime, reference: datetime) -> bool:
    if moment.tzinfo is not None and reference.tzinfo is not None:
        return moment.astimezone(reference.tzinfo).date() == reference.date()
    return comparable(moment).date() == comparable(reference).date()
