from datetime import date, datetime, time
from typing import Optional, Union


def get_day_bounds(target: Optional[Union[date, datetime]] = None) -> tuple[datetime, datetime]:
    """Get the first and last instant of a calendar day in server-local time.

    Args:
        target: Any date or datetime within the day (defaults to now)

    Returns:
        (start, end) where start is 00:00:00.000000 and end is 23:59:59.999999

    Examples:
        get_day_bounds(datetime(2025, 1, 15, 10, 30))
        # (datetime(2025, 1, 15, 0, 0), datetime(2025, 1, 15, 23, 59, 59, 999999))
    """
    if target is None:
        target = datetime.now()

    # Note: datetime is a subclass of date, so we check for datetime first
    day = target.date() if isinstance(target, datetime) else target

    start = datetime.combine(day, time.min)
    end = datetime.combine(day, time.max)
    return start, end


def to_naive_local(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive server-local time. Naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
