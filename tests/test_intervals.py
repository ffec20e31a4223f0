"""Tests for interval normalization."""

import pytest

from dayplanner.core.intervals import clamp_to_slot, is_slot_aligned, normalize_interval
from dayplanner.core.timegrid import InvalidFormat, slot_times, to_minutes


class TestClampToSlot:
    def test_rounds_down_to_hour(self):
        assert clamp_to_slot("09:00") == "09:00"
        assert clamp_to_slot("09:29") == "09:00"

    def test_rounds_down_to_half_hour(self):
        assert clamp_to_slot("09:30") == "09:30"
        assert clamp_to_slot("09:59") == "09:30"

    def test_pads_hour(self):
        assert clamp_to_slot("7:45") == "07:30"

    def test_clamps_hour_high(self):
        assert clamp_to_slot("25:10") == "23:00"
        assert clamp_to_slot("24:00") == "23:00"

    def test_clamps_hour_low(self):
        assert clamp_to_slot("-3:40") == "00:30"

    def test_latest_time_never_wraps(self):
        assert clamp_to_slot("23:59") == "23:30"
        assert clamp_to_slot("23:30") == "23:30"

    def test_out_of_range_minutes_clamp(self):
        assert clamp_to_slot("10:75") == "10:30"

    def test_slot_times_are_fixed_points(self):
        for slot in slot_times():
            assert clamp_to_slot(slot) == slot

    @pytest.mark.parametrize("bad", ["", "noon", "9", "9:xx", "+9:00", "1_0:30", "-:30"])
    def test_unparseable(self, bad):
        with pytest.raises(InvalidFormat):
            clamp_to_slot(bad)


class TestNormalizeInterval:
    def test_already_normal(self):
        assert normalize_interval("09:00", "10:00") == ("09:00", "10:00")

    def test_snaps_both_ends(self):
        assert normalize_interval("09:10", "10:45") == ("09:00", "10:30")

    def test_swaps_reversed(self):
        assert normalize_interval("14:00", "09:15") == ("09:00", "14:00")

    def test_zero_length_allowed(self):
        assert normalize_interval("12:00", "12:10") == ("12:00", "12:00")

    @pytest.mark.parametrize(
        "start,end",
        [("09:10", "10:45"), ("23:59", "00:01"), ("30:00", "-2:00"), ("12:00", "12:00")],
    )
    def test_idempotent(self, start, end):
        once = normalize_interval(start, end)
        assert normalize_interval(*once) == once

    @pytest.mark.parametrize("start,end", [("18:40", "06:05"), ("00:00", "23:59"), ("11:31", "11:29")])
    def test_start_not_after_end(self, start, end):
        s, e = normalize_interval(start, end)
        assert to_minutes(s) <= to_minutes(e)
        assert is_slot_aligned(s) and is_slot_aligned(e)

    def test_unparseable_raises(self):
        with pytest.raises(InvalidFormat):
            normalize_interval("09:00", "later")


class TestIsSlotAligned:
    def test_aligned(self):
        assert is_slot_aligned("09:30")

    def test_not_aligned(self):
        assert not is_slot_aligned("09:15")

    def test_requires_padding(self):
        assert not is_slot_aligned("9:30")
