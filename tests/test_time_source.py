from datetime import datetime, timezone

from cleancharge.time_source import FixedTimeSource, SystemTimeSource


def test_system_time_is_aware_utc():
    now = SystemTimeSource().now()
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_fixed_time_assumes_utc_for_naive_instants():
    source = FixedTimeSource(datetime(2025, 1, 1, 1, 22))
    assert source.now() == datetime(2025, 1, 1, 1, 22, tzinfo=timezone.utc)
    assert source.now() is source.now()
