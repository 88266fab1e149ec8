"""
Availability scan

Tiles a window with fixed one-hour candidate slots and keeps those that do
not overlap any confirmed reservation.
"""

from collections.abc import Iterable
from datetime import timedelta

from src.platform.exception.exceptions import ValidationError
from src.service.reservation.domain.value_object.time_slot import TimeSlot


SLOT_DURATION = timedelta(hours=1)


def find_free_slots(*, window: TimeSlot, booked: Iterable[TimeSlot]) -> list[TimeSlot]:
    """
    Candidates start at window.start and step by SLOT_DURATION while the
    candidate start is before window.end, so the last candidate may run past
    the window end.
    """
    booked_slots = list(booked)
    free: list[TimeSlot] = []

    current = window.start
    try:
        while current < window.end:
            candidate = TimeSlot(start=current, end=current + SLOT_DURATION)
            if not any(candidate.overlaps(slot) for slot in booked_slots):
                free.append(candidate)
            current += SLOT_DURATION
    except OverflowError as e:
        raise ValidationError('Window runs past the latest representable time') from e

    return free


def scan_extent(window: TimeSlot) -> TimeSlot:
    """Span covered by the candidates of find_free_slots, trailing slot included"""
    slot_count = -(-(window.end - window.start) // SLOT_DURATION)
    try:
        return TimeSlot(start=window.start, end=window.start + slot_count * SLOT_DURATION)
    except OverflowError as e:
        raise ValidationError('Window runs past the latest representable time') from e
