"""Tests for timestamp parsing and relative labels."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gitlabctl.utils.time_format import humanize_since, parse_rfc3339

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestParseRfc3339:
    def test_zulu_with_millis(self):
        dt = parse_rfc3339("2024-05-01T09:00:00.123Z")
        assert dt == datetime(2024, 5, 1, 9, 0, 0, 123000, tzinfo=timezone.utc)

    def test_offset(self):
        dt = parse_rfc3339("2024-05-01T11:00:00+02:00")
        assert dt == datetime(2024, 5, 1, 9, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["", "yesterday", "2024-05-01T09:00:00", "2024-13-01T00:00:00Z"])
    def test_rejects_invalid_or_naive(self, raw):
        assert parse_rfc3339(raw) is None


class TestHumanizeSince:
    @pytest.mark.parametrize("delta, expected", [
        (timedelta(seconds=3), "now"),
        (timedelta(seconds=30), "30 seconds ago"),
        (timedelta(seconds=60), "a minute ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(hours=1), "an hour ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(days=1), "a day ago"),
        (timedelta(days=2), "2 days ago"),
        (timedelta(days=7), "a week ago"),
        (timedelta(days=14), "2 weeks ago"),
        (timedelta(days=31), "a month ago"),
        (timedelta(days=90), "3 months ago"),
        (timedelta(days=365), "a year ago"),
        (timedelta(days=365 * 3), "3 years ago"),
    ])
    def test_past(self, delta, expected):
        assert humanize_since(NOW - delta, NOW) == expected

    def test_future(self):
        assert humanize_since(NOW + timedelta(hours=2), NOW) == "in 2 hours"

    def test_defaults_to_current_time(self):
        assert humanize_since(datetime.now(timezone.utc) - timedelta(hours=3)) == "3 hours ago"
