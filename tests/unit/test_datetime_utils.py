"""
Unit tests for task_backend.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from task_backend.utils.datetime_utils import ensure_utc, utc_now


class TestUtcNow:
    def test_is_timezone_aware_utc(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestEnsureUtc:
    def test_none(self):
        assert ensure_utc(None) is None

    def test_naive_is_treated_as_utc(self):
        naive = datetime(2024, 1, 1, 12, 0, 0)
        assert ensure_utc(naive) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_aware_is_converted(self):
        plus_two = datetime(2024, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        result = ensure_utc(plus_two)
        assert result.hour == 12
        assert result.utcoffset() == timedelta(0)

