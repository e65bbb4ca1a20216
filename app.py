#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
import tkinter as tk

from config import AppConfig
from core.ticker import Ticker
from services.report_service import ReportService
from services.stats_service import StatsService
from services.tracker_service import TrackerService
from storage.db import Database
from storage.repos import SessionRepo, SkillRepo
from ui.main_window import MainWindow


def configure_logging(config: AppConfig) -> None:
    handlers = [logging.StreamHandler()]
    if config.log_dir:
        handlers.append(
            logging.FileHandler(
                os.path.join(config.log_dir, "worklog.log"), encoding="utf-8"
            )
        )
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )


def main():
    config = AppConfig.from_env()
    configure_logging(config)

    db = Database(db_path=config.db_path)
    db.init_schema()

    root = tk.Tk()
    stats = StatsService()
    tracker = TrackerService(
        SkillRepo(db),
        SessionRepo(db),
        ticker=Ticker(root, interval_ms=config.tick_ms),
        stats=stats,
    )
    tracker.load()

    app = MainWindow(root, tracker, ReportService(stats))
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
