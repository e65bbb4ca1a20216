# -*- coding: utf-8 -*-

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class Skill:
    name: str
    total_time: int = 0  # seconds


@dataclass(frozen=True)
class Session:
    id: str
    skill: str  # Skill.name
    duration: int  # active seconds
    start_time: dt.datetime
    end_time: dt.datetime
