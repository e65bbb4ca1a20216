# -*- coding: utf-8 -*-

from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from core.formatting import format_clock, format_duration
from domain.models import Session
from services.stats_service import StatsService

EMPTY_TODAY_MD = "_No sessions yet today. Pick a skill and press **Start**._"


def _md_cell(text: str) -> str:
    # keep table layout intact
    return (text or "").replace("\\", "\\\\").replace("|", "\\|").replace("\n", " ")


class ReportService:
    def __init__(self, stats: Optional[StatsService] = None):
        self.stats = stats or StatsService()

    def today_markdown(
        self, sessions: Iterable[Session], now: Optional[dt.datetime] = None
    ) -> str:
        """
        Markdown for the "today's sessions" panel:
        heading, one table row per session (log order), total line.
        """
        today = self.stats.todays_sessions(sessions, now=now)
        if not today:
            return EMPTY_TODAY_MD

        lines: List[str] = [
            "### Today's sessions",
            "",
            "| Skill | Time | Duration |",
            "|:------|:-----|---------:|",
        ]
        for s in today:
            span = f"{format_clock(s.start_time)} - {format_clock(s.end_time)}"
            lines.append(
                f"| {_md_cell(s.skill)} | {span} | `{format_duration(s.duration)}` |"
            )
        lines.append("")
        total = self.stats.total_duration(today)
        lines.append(f"**Total Today** `{format_duration(total)}`")
        return "\n".join(lines)
