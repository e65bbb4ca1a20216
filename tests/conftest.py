"""Pytest configuration and shared fixtures."""

import datetime as dt

import pytest

from core.ticker import Ticker
from services import tracker_service
from services.tracker_service import TrackerService
from storage.db import Database
from storage.repos import SessionRepo, SkillRepo


class FakeScheduler:
    """Stands in for a Tk widget: records after() jobs, fires them on demand."""

    def __init__(self):
        self._next_id = 0
        self.jobs = {}
        self.cancelled = []

    def after(self, ms, fn):
        self._next_id += 1
        job = f"after#{self._next_id}"
        self.jobs[job] = (ms, fn)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self.jobs.pop(job, None)

    @property
    def pending(self):
        return len(self.jobs)

    def advance(self, n=1):
        """Fire the pending job n times (one second each)."""
        for _ in range(n):
            if not self.jobs:
                return
            job = next(iter(self.jobs))
            _, fn = self.jobs.pop(job)
            fn()


class Clock:
    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now = self.now + dt.timedelta(seconds=seconds)


@pytest.fixture
def db(tmp_path):
    database = Database(db_path=str(tmp_path / "worklog-test.db"))
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def skill_repo(db):
    return SkillRepo(db)


@pytest.fixture
def session_repo(db):
    return SessionRepo(db)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock(monkeypatch):
    c = Clock(dt.datetime(2024, 5, 14, 9, 30, 0).astimezone())
    monkeypatch.setattr(tracker_service, "_now", c)
    return c


@pytest.fixture
def tracker(skill_repo, session_repo, scheduler, clock):
    t = TrackerService(skill_repo, session_repo, ticker=Ticker(scheduler))
    t.load()
    return t
