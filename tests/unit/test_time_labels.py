"""Unit tests for approximate time labels."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from statusboard.services.time_labels import DISCLAIMER, format_label, time_labels

NOW = datetime(2026, 10, 19, 15, 5, tzinfo=timezone.utc)


class TestTimeLabels:
    def test_one_label_per_sample(self):
        assert len(time_labels(6, now=NOW, tz=timezone.utc)) == 6

    def test_last_label_is_now(self):
        assert time_labels(4, now=NOW, tz=timezone.utc)[-1] == "3:05 PM UTC"

    def test_labels_step_back_thirty_minutes(self):
        assert time_labels(4, now=NOW, tz=timezone.utc) == ["1:35 PM UTC", "2:05 PM UTC", "2:35 PM UTC", "3:05 PM UTC"]

    def test_custom_interval(self):
        assert time_labels(2, now=NOW, interval_min=60, tz=timezone.utc) == ["2:05 PM UTC", "3:05 PM UTC"]

    def test_zero_samples(self):
        assert time_labels(0, now=NOW, tz=timezone.utc) == []

    def test_each_label_uses_its_own_dst_offset(self):
        """US clocks fall back at 06:00 UTC on 2026-11-01; the earlier sample is still EDT."""
        now = datetime(2026, 11, 1, 6, 15, tzinfo=timezone.utc)
        labels = time_labels(2, now=now, tz=ZoneInfo("America/New_York"))
        assert labels == ["1:45 AM EDT", "1:15 AM EST"]

    def test_instants_converted_to_target_zone(self):
        msk = timezone(timedelta(hours=3), "MSK")
        assert time_labels(1, now=NOW, tz=msk) == ["6:05 PM MSK"]

    def test_defaults_to_current_clock(self):
        labels = time_labels(3)
        assert len(labels) == 3
        assert all(":" in label for label in labels)


class TestFormatLabel:
    def test_midnight_is_twelve_am(self):
        assert format_label(datetime(2026, 1, 1, 0, 0, tzinfo=timezone.utc)) == "12:00 AM UTC"

    def test_noon_is_twelve_pm(self):
        assert format_label(datetime(2026, 1, 1, 12, 30, tzinfo=timezone.utc)) == "12:30 PM UTC"

    def test_named_offset(self):
        tz = timezone(timedelta(hours=3), "MSK")
        assert format_label(datetime(2026, 1, 1, 9, 7, tzinfo=tz)) == "9:07 AM MSK"

    def test_naive_time_has_no_zone(self):
        assert format_label(datetime(2026, 1, 1, 23, 59)) == "11:59 PM"


def test_disclaimer_text():
    assert DISCLAIMER == "Note: Time displayed has a ±30 minutes margin and only serves as a reference."
