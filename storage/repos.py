# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import datetime as dt
import json
import logging
from typing import Any, Dict, List, Optional

from domain.models import Session, Skill
from storage.db import Database

logger = logging.getLogger("worklog.repos")

SKILLS_KEY = "work-tracker-skills"
SESSIONS_KEY = "work-tracker-sessions"


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (key,),
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )
        self.db.conn.commit()


def parse_timestamp(text: str) -> dt.datetime:
    """
    ISO-8601 text -> aware datetime.
    Accepts the trailing "Z" that JSON-serialized JS dates carry.
    Naive values are taken as local time.
    """
    if not isinstance(text, str):
        raise ValueError(f"Timestamp must be text, got {type(text).__name__}")
    s = text.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    ts = dt.datetime.fromisoformat(s)
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts


def _seconds(value: Any, field: str) -> int:
    # JSON also yields floats, Infinity/NaN and booleans here
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{field} must be >= 0, got {value}")
    return value


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be non-empty text, got {value!r}")
    return value


class _SlotRepo:
    """
    One JSON list stored under one app_state key.
    load() never raises on bad stored data: it returns [] and logs.
    """

    key = ""

    def __init__(self, db: Database):
        self.state = AppStateRepo(db)

    def _load_raw(self) -> List[Any]:
        raw = self.state.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Slot %s holds invalid JSON; starting empty", self.key)
            return []
        if not isinstance(data, list):
            logger.warning(
                "Slot %s holds %s instead of a list; starting empty",
                self.key,
                type(data).__name__,
            )
            return []
        return data

    def _save_raw(self, items: List[Dict[str, Any]]) -> None:
        self.state.set(self.key, json.dumps(items))


class SkillRepo(_SlotRepo):
    key = SKILLS_KEY

    def load(self) -> List[Skill]:
        try:
            skills = [
                Skill(
                    name=_text(r["name"], "name"),
                    total_time=_seconds(r.get("totalTime", 0), "totalTime"),
                )
                for r in self._load_raw()
            ]
            names = [s.name for s in skills]
            if len(set(names)) != len(names):
                raise ValueError("duplicate skill names")
            return skills
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning("Slot %s is malformed (%s); starting empty", self.key, e)
            return []

    def save(self, skills: List[Skill]) -> None:
        self._save_raw([{"name": s.name, "totalTime": s.total_time} for s in skills])


class SessionRepo(_SlotRepo):
    key = SESSIONS_KEY

    def load(self) -> List[Session]:
        try:
            return [
                Session(
                    id=str(r["id"]),
                    skill=_text(r["skill"], "skill"),
                    duration=_seconds(r["duration"], "duration"),
                    start_time=parse_timestamp(r["startTime"]),
                    end_time=parse_timestamp(r["endTime"]),
                )
                for r in self._load_raw()
            ]
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.warning("Slot %s is malformed (%s); starting empty", self.key, e)
            return []

    def save(self, sessions: List[Session]) -> None:
        self._save_raw(
            [
                {
                    "id": s.id,
                    "skill": s.skill,
                    "duration": s.duration,
                    "startTime": s.start_time.isoformat(),
                    "endTime": s.end_time.isoformat(),
                }
                for s in sessions
            ]
        )
