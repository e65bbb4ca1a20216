# -*- coding: utf-8 -*-

import datetime as dt


def format_duration(seconds: int) -> str:
    """Render seconds as zero-padded HH:MM:SS."""
    seconds = max(0, int(seconds))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_clock(ts: dt.datetime) -> str:
    # local wall clock, HH:MM
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return ts.strftime("%H:%M")
