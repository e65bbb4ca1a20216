# -*- coding: utf-8 -*-

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_TICK_MS = 1000


def _int_or_default(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class AppConfig:
    db_path: str
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    tick_ms: int = DEFAULT_TICK_MS

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env
        return cls(
            db_path=env.get("WORKLOG_DB_PATH") or str(Path.cwd() / "worklog.db"),
            log_level=(env.get("WORKLOG_LOG_LEVEL") or "INFO").upper(),
            log_dir=env.get("WORKLOG_LOG_DIR") or None,
            tick_ms=_int_or_default(env.get("WORKLOG_TICK_MS"), DEFAULT_TICK_MS),
        )
