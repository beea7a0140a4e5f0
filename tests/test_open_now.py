"""Tests for open_now: hours-text parsing and the open/closed decision."""

from datetime import datetime, timezone

from localed.models.parsed_view import OpenStatus
from localed.services.open_now import get_open_now_status, parse_business_hours, parse_segment


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# 2025-02-17 is a Monday.
MONDAY_1030_IST = _utc(2025, 2, 17, 5, 0)
MONDAY_0800_IST = _utc(2025, 2, 17, 2, 30)
SUNDAY_NOON_IST = _utc(2025, 2, 16, 6, 30)


class TestParseSegment:
    def test_closed_single_day(self):
        seg = parse_segment("Sun closed")
        assert seg.closed is True
        assert seg.days == (0,)

    def test_closed_day_range(self):
        seg = parse_segment("Sat–Sun closed")
        assert seg.closed is True
        assert seg.days == (6, 0)

    def test_range_with_minutes(self):
        seg = parse_segment("Mon 9:30-17:45")
        assert seg.days == (1,)
        assert (seg.start_min, seg.end_min) == (570, 1065)

    def test_day_range_wraps_around_week(self):
        seg = parse_segment("Fri-Mon 9-17")
        assert seg.days == (5, 6, 0, 1)

    def test_end_before_start_runs_past_midnight(self):
        seg = parse_segment("Fri 22-2")
        assert seg.start_min == 22 * 60
        assert seg.end_min == 26 * 60

    def test_en_dash_separators(self):
        seg = parse_segment("Mon–Fri 9–18")
        assert seg.days == (1, 2, 3, 4, 5)

    def test_lowercase_day_names(self):
        seg = parse_segment("mon-fri 9-18")
        assert seg is not None
        assert seg.days == (1, 2, 3, 4, 5)

    def test_hour_out_of_range_rejected(self):
        assert parse_segment("Mon 9-25") is None

    def test_garbage_rejected(self):
        assert parse_segment("by appointment") is None
        assert parse_segment("   ") is None


class TestParseBusinessHours:
    def test_skips_unparseable_segments(self):
        segments = parse_business_hours("Mon-Fri 9-17, ask us, Sun closed")
        assert len(segments) == 2
        assert segments[1].closed is True


class TestGetOpenNowStatus:
    def test_open_during_range(self):
        assert get_open_now_status("Asia/Kolkata", "Mon-Fri 9-6", MONDAY_1030_IST) == OpenStatus(open=True)

    def test_closed_before_opening(self):
        assert get_open_now_status("Asia/Kolkata", "Mon-Fri 9-6", MONDAY_0800_IST) == OpenStatus(open=False)

    def test_closed_day(self):
        status = get_open_now_status("Asia/Kolkata", "Mon-Sat 9-6, Sun closed", SUNDAY_NOON_IST)
        assert status == OpenStatus(open=False)

    def test_closed_takes_precedence_regardless_of_order(self):
        status = get_open_now_status("UTC", "Sun 9-17, Sun closed", _utc(2025, 2, 16, 12, 0))
        assert status == OpenStatus(open=False)

    def test_unmentioned_day_is_closed(self):
        # 2025-02-22 is a Saturday.
        status = get_open_now_status("UTC", "Mon-Fri 9-17", _utc(2025, 2, 22, 12, 0))
        assert status == OpenStatus(open=False)

    def test_end_is_exclusive(self):
        assert get_open_now_status("UTC", "Mon 9:30-17:45", _utc(2025, 2, 17, 17, 40)).open is True
        assert get_open_now_status("UTC", "Mon 9:30-17:45", _utc(2025, 2, 17, 17, 45)).open is False

    def test_wrapped_day_range(self):
        status = get_open_now_status("UTC", "Fri-Mon 9-17", _utc(2025, 2, 16, 12, 0))
        assert status == OpenStatus(open=True)

    def test_overnight_hours_same_evening(self):
        # Friday 2025-02-21, 23:00
        assert get_open_now_status("UTC", "Fri 22-2", _utc(2025, 2, 21, 23, 0)).open is True

    def test_overnight_hours_do_not_carry_into_next_day(self):
        # Saturday 2025-02-22, 01:00: only Saturday segments count.
        assert get_open_now_status("UTC", "Fri 22-2", _utc(2025, 2, 22, 1, 0)).open is False

    def test_early_next_morning_is_closed(self):
        # Tuesday 2025-02-18, 05:00 in Kolkata is 23:30 UTC on Monday.
        status = get_open_now_status("Asia/Kolkata", "Mon-Fri 9-6", _utc(2025, 2, 17, 23, 30))
        assert status == OpenStatus(open=False)

    def test_timezone_conversion(self):
        # 10:30 in Kolkata is 05:00 UTC, before a 9-17 opening.
        assert get_open_now_status("UTC", "Mon 9-17", MONDAY_1030_IST).open is False
        assert get_open_now_status("Asia/Kolkata", "Mon 9-17", MONDAY_1030_IST).open is True

    def test_naive_now_is_treated_as_utc(self):
        status = get_open_now_status("Asia/Kolkata", "Mon-Fri 9-6", datetime(2025, 2, 17, 5, 0))
        assert status == OpenStatus(open=True)

    def test_blank_inputs_return_none(self):
        assert get_open_now_status("", "Mon-Fri 9-17", MONDAY_1030_IST) is None
        assert get_open_now_status("UTC", "  ", MONDAY_1030_IST) is None

    def test_unparseable_hours_return_none(self):
        assert get_open_now_status("UTC", "whenever we feel like it", MONDAY_1030_IST) is None

    def test_unknown_timezone_returns_none(self):
        assert get_open_now_status("Mars/Olympus_Mons", "Mon-Fri 9-17", MONDAY_1030_IST) is None

    def test_defaults_to_current_time(self):
        status = get_open_now_status("UTC", "Mon-Sun 0-0")
        assert status == OpenStatus(open=True)
