# -*- coding: utf-8 -*-

import datetime as dt
from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineSnapshot:
    elapsed_sec: int
    running: bool
    paused: bool
    started_at: Optional[dt.datetime]

    @property
    def is_idle(self) -> bool:
        return not self.running

    @property
    def is_counting(self) -> bool:
        return self.running and not self.paused


class TimerEngine:
    """
    Pure stopwatch engine (no Tkinter).
    Service triggers tick() each second while counting.
    """

    def __init__(self):
        self.elapsed_sec = 0
        self.running = False
        self.paused = False
        self.started_at: Optional[dt.datetime] = None

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            elapsed_sec=self.elapsed_sec,
            running=self.running,
            paused=self.paused,
            started_at=self.started_at,
        )

    def start(self, now: dt.datetime) -> None:
        # start fresh
        self.elapsed_sec = 0
        self.running = True
        self.paused = False
        self.started_at = now

    def pause(self) -> None:
        if not self.running:
            return
        self.paused = True

    def resume(self) -> None:
        if not self.running:
            return
        self.paused = False

    def reset(self) -> None:
        self.elapsed_sec = 0
        self.running = False
        self.paused = False
        self.started_at = None

    def tick(self) -> bool:
        """
        Returns True if the tick was counted.
        """
        if not self.running or self.paused:
            return False
        self.elapsed_sec += 1
        return True
