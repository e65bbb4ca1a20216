"""Tests for today filtering, aggregation and the session log report."""

import datetime as dt

import pytest

from core.formatting import format_clock, format_duration
from domain.models import Session
from services.report_service import EMPTY_TODAY_MD, ReportService
from services.stats_service import StatsService
from ui.markdown_renderer import MarkdownRenderer

NOW = dt.datetime(2024, 5, 14, 18, 0, 0).astimezone()


def _session(sid, skill, start, duration):
    return Session(
        id=sid,
        skill=skill,
        duration=duration,
        start_time=start,
        end_time=start + dt.timedelta(seconds=duration),
    )


@pytest.fixture
def log():
    today = NOW.replace(hour=10, minute=5)
    return [
        _session("3", "Piano", today + dt.timedelta(hours=2), 600),
        _session("2", "Guitar", today, 125),
        _session("1", "Guitar", today - dt.timedelta(days=1), 3600),
    ]


class TestFormatting:
    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "00:00:00"), (59, "00:00:59"), (3661, "01:01:01"), (360000, "100:00:00")],
    )
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_format_duration_clamps_negative(self):
        assert format_duration(-5) == "00:00:00"

    def test_format_clock(self):
        assert format_clock(dt.datetime(2024, 5, 14, 7, 4, 59)) == "07:04"


class TestStatsService:
    def test_todays_sessions_keep_log_order(self, log):
        today = StatsService().todays_sessions(log, now=NOW)
        assert [s.id for s in today] == ["3", "2"]

    def test_filter_uses_start_time_only(self):
        start = NOW.replace(hour=23, minute=50) - dt.timedelta(days=1)
        overnight = _session("x", "Guitar", start, 1200)
        assert overnight.end_time.date() == NOW.date()
        assert StatsService().todays_sessions([overnight], now=NOW) == []

    def test_total_duration(self, log):
        assert StatsService().total_duration(log) == 4325

    def test_totals_by_skill(self, log):
        assert StatsService().totals_by_skill(log) == {"Piano": 600, "Guitar": 3725}


class TestReportService:
    def test_empty_day(self, log):
        assert ReportService().today_markdown(log[2:], now=NOW) == EMPTY_TODAY_MD

    def test_today_table(self, log):
        md = ReportService().today_markdown(log, now=NOW)
        lines = md.splitlines()
        assert lines[0] == "### Today's sessions"
        assert "| Piano | 12:05 - 12:15 | `00:10:00` |" in lines
        assert "| Guitar | 10:05 - 10:07 | `00:02:05` |" in lines
        assert lines.index("| Piano | 12:05 - 12:15 | `00:10:00` |") < lines.index(
            "| Guitar | 10:05 - 10:07 | `00:02:05` |"
        )
        assert lines[-1] == "**Total Today** `00:12:05`"

    def test_pipe_in_skill_name_is_escaped(self):
        s = _session("1", "A|B", NOW.replace(hour=9), 10)
        md = ReportService().today_markdown([s], now=NOW)
        assert "| A\\|B |" in md


class TestMarkdownRenderer:
    def test_renders_table(self, log):
        md = ReportService().today_markdown(log, now=NOW)
        html = MarkdownRenderer().to_html(md)
        assert "<table>" in html
        assert "Piano</td>" in html
        assert "<strong>Total Today</strong>" in html
        assert "<style>" in html

    def test_renders_empty(self):
        html = MarkdownRenderer().to_html("")
        assert "<body></body>" in html
