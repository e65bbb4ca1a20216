# -*- coding: utf-8 -*-

import datetime as dt
from typing import Dict, Iterable, List, Optional

from domain.models import Session


def _local_date(ts: dt.datetime) -> dt.date:
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return ts.date()


class StatsService:
    def todays_sessions(
        self, sessions: Iterable[Session], now: Optional[dt.datetime] = None
    ) -> List[Session]:
        """
        Sessions whose own start_time falls on the current local calendar day.
        Input order is preserved.
        """
        today = _local_date(now or dt.datetime.now().astimezone())
        return [s for s in sessions if _local_date(s.start_time) == today]

    def total_duration(self, sessions: Iterable[Session]) -> int:
        return sum(int(s.duration) for s in sessions)

    def totals_by_skill(self, sessions: Iterable[Session]) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for s in sessions:
            out[s.skill] = out.get(s.skill, 0) + int(s.duration)
        return out
