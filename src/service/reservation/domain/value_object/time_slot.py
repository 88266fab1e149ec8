from datetime import datetime, timezone

import attrs

from src.platform.exception.exceptions import ValidationError


def _to_utc(value: datetime) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f'Expected a datetime, got {type(value).__name__}')
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError('Timestamps must carry a timezone')
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValidationError('Timestamp is outside the supported range') from e


@attrs.define(frozen=True)
class TimeSlot:
    """
    Half-open interval [start, end) in UTC.

    Two slots that only touch (a.end == b.start) do not overlap, so
    back-to-back bookings are allowed.
    """

    start: datetime = attrs.field(converter=_to_utc)
    end: datetime = attrs.field(converter=_to_utc)

    def __attrs_post_init__(self) -> None:
        if self.start >= self.end:
            raise ValidationError('start_time must be before end_time')

    def overlaps(self, other: 'TimeSlot') -> bool:
        return self.start < other.end and other.start < self.end
