# -*- coding: utf-8 -*-

import datetime as dt
import logging
import uuid
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from core.ticker import Ticker
from core.timer_engine import TimerEngine
from domain.models import Session, Skill
from services.stats_service import StatsService
from storage.repos import SessionRepo, SkillRepo

logger = logging.getLogger("worklog.tracker")


def _now() -> dt.datetime:
    return dt.datetime.now().astimezone()


@dataclass
class TimerSnapshot:
    selected_skill: Optional[str]
    tracking_skill: Optional[str]
    running: bool
    paused: bool
    elapsed_sec: int
    started_at: Optional[dt.datetime]


class TrackerService:
    """
    Orchestrates:
    - skill list + session log (persisted per slot on every change)
    - TimerEngine state for the running session
    - the Ticker that drives tick() while counting
    - callbacks for UI
    """

    def __init__(
        self,
        skill_repo: SkillRepo,
        session_repo: SessionRepo,
        ticker: Optional[Ticker] = None,
        stats: Optional[StatsService] = None,
    ):
        self.skill_repo = skill_repo
        self.session_repo = session_repo
        self.ticker = ticker
        self.stats = stats or StatsService()

        self.engine = TimerEngine()

        self._skills: List[Skill] = []
        self._sessions: List[Session] = []  # most recent first
        self.selected_skill: Optional[str] = None
        self._tracking_skill: Optional[str] = None

        self._on_tick: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[TimerSnapshot], None]] = None
        self._on_data_change: Optional[Callable[[], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_state_change(self, fn: Callable[[TimerSnapshot], None]) -> None:
        self._on_state_change = fn

    def set_on_data_change(self, fn: Callable[[], None]) -> None:
        self._on_data_change = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.get_snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.get_snapshot())

    def _emit_data_change(self) -> None:
        if self._on_data_change:
            self._on_data_change()

    # ----- Lifecycle -----
    def load(self) -> None:
        self._skills = self.skill_repo.load()
        self._sessions = self.session_repo.load()
        logger.info(
            "Loaded %d skills and %d sessions", len(self._skills), len(self._sessions)
        )
        self._emit_data_change()

    def shutdown(self) -> None:
        self._stop_ticking()

    # ----- Queries -----
    @property
    def skills(self) -> List[Skill]:
        return list(self._skills)

    @property
    def sessions(self) -> List[Session]:
        return list(self._sessions)

    def get_skill(self, name: str) -> Optional[Skill]:
        for s in self._skills:
            if s.name == name:
                return s
        return None

    def get_snapshot(self) -> TimerSnapshot:
        eng = self.engine.snapshot()
        return TimerSnapshot(
            selected_skill=self.selected_skill,
            tracking_skill=self._tracking_skill,
            running=eng.running,
            paused=eng.paused,
            elapsed_sec=eng.elapsed_sec,
            started_at=eng.started_at,
        )

    def todays_sessions(self) -> List[Session]:
        return self.stats.todays_sessions(self._sessions, now=_now())

    def today_total_sec(self) -> int:
        return self.stats.total_duration(self.todays_sessions())

    # ----- Skills -----
    def add_skill(self, name: str) -> Optional[Skill]:
        name = (name or "").strip()
        if not name:
            logger.debug("Ignoring blank skill name")
            return None
        if self.get_skill(name) is not None:
            logger.debug("Ignoring duplicate skill %r", name)
            return None

        skill = Skill(name=name, total_time=0)
        self._skills.append(skill)
        self.skill_repo.save(self._skills)
        logger.info("Added skill %r", name)
        self._emit_data_change()
        return skill

    def select_skill(self, name: Optional[str]) -> None:
        if name is not None and self.get_skill(name) is None:
            logger.debug("Ignoring selection of unknown skill %r", name)
            return
        if self.engine.running and name != self._tracking_skill:
            # the running session keeps the skill it was started with
            logger.warning(
                "Selection changed to %r while tracking %r; "
                "the running session stays on %r",
                name,
                self._tracking_skill,
                self._tracking_skill,
            )
        self.selected_skill = name
        self._emit_state_change()

    # ----- Timer -----
    def start(self) -> None:
        if not self.selected_skill:
            logger.debug("start() ignored: no skill selected")
            return
        if self.engine.running:
            logger.debug("start() ignored: already tracking %r", self._tracking_skill)
            return

        self._tracking_skill = self.selected_skill
        self.engine.start(_now())
        self._start_ticking()
        self._emit_state_change()
        self._emit_tick()

    def pause(self) -> None:
        if not self.engine.snapshot().is_counting:
            return
        self.engine.pause()
        self._stop_ticking()
        self._emit_state_change()

    def resume(self) -> None:
        snap = self.engine.snapshot()
        if snap.is_idle or not snap.paused:
            return
        self.engine.resume()
        self._start_ticking()
        self._emit_state_change()

    def toggle_pause(self) -> None:
        if self.engine.paused:
            self.resume()
        else:
            self.pause()

    def stop(self) -> Optional[Session]:
        snap = self.engine.snapshot()
        if snap.is_idle or not self._tracking_skill or snap.started_at is None:
            logger.debug("stop() ignored: not tracking")
            return None

        session = Session(
            id=str(uuid.uuid4()),
            skill=self._tracking_skill,
            duration=snap.elapsed_sec,
            start_time=snap.started_at,
            end_time=_now(),
        )
        self._sessions.insert(0, session)
        self._skills = [
            replace(s, total_time=s.total_time + snap.elapsed_sec)
            if s.name == session.skill
            else s
            for s in self._skills
        ]

        # idle before saving; save errors propagate with the timer stopped
        self._stop_ticking()
        self.engine.reset()
        self._tracking_skill = None

        try:
            self.session_repo.save(self._sessions)
            self.skill_repo.save(self._skills)
            logger.info(
                "Recorded %ds on %r (session %s)",
                session.duration,
                session.skill,
                session.id,
            )
        finally:
            self._emit_state_change()
            self._emit_tick()
            self._emit_data_change()
        return session

    def tick(self) -> None:
        """
        Called once per second by the ticker.
        Ignored while paused or idle.
        """
        if not self.engine.tick():
            return
        self._emit_tick()

    # ----- Ticker internals -----
    def _start_ticking(self) -> None:
        if self.ticker is not None:
            self.ticker.start(self.tick)

    def _stop_ticking(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()
