"""Millisecond timestamp helpers shared by entities and value objects."""

from datetime import datetime, timedelta, timezone, tzinfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


def epoch_millis(moment: datetime) -> int:
    """Milliseconds since epoch for an aware datetime, without float rounding."""
    return (moment - EPOCH) // ONE_MILLISECOND


def from_epoch_millis(millis: int, tz: tzinfo) -> datetime:
    """Aware datetime in `tz` for a millisecond timestamp."""
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(tz)
