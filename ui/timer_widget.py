# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from core.formatting import format_duration
from services.tracker_service import TimerSnapshot, TrackerService


class TimerWidget(ttk.Frame):
    def __init__(
        self,
        master,
        tracker: TrackerService,
    ):
        super().__init__(master)

        self.tracker = tracker

        self._build_ui()

        # initial render
        self.render(self.tracker.get_snapshot())

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.skill_var = tk.StringVar(value="")
        self.time_var = tk.StringVar(value=format_duration(0))
        self.info_var = tk.StringVar(value="Select a skill to start")

        self.skill_label = ttk.Label(
            self, textvariable=self.skill_var, font=("Sans", 11, "bold")
        )
        self.skill_label.grid(row=0, column=0, pady=(0, 4))

        self.time_label = ttk.Label(
            self, textvariable=self.time_var, font=("Monospace", 32)
        )
        self.time_label.grid(row=1, column=0, pady=(4, 4))

        self.info_label = ttk.Label(self, textvariable=self.info_var)
        self.info_label.grid(row=2, column=0, pady=(0, 10))

        btns = ttk.Frame(self)
        btns.grid(row=3, column=0)

        self.start_btn = ttk.Button(btns, text="Start", command=self._start)
        self.pause_btn = ttk.Button(btns, text="Pause", command=self._toggle_pause)
        self.stop_btn = ttk.Button(btns, text="Stop", command=self._stop)

        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.pause_btn.grid(row=0, column=1, padx=(0, 6))
        self.stop_btn.grid(row=0, column=2)

    def _update_buttons(self, snap: TimerSnapshot):
        # Start when idle; Pause/Resume + Stop while tracking
        if snap.running:
            self.start_btn.grid_remove()
            self.pause_btn.grid()
            self.stop_btn.grid()
            self.pause_btn.config(text="Resume" if snap.paused else "Pause")
        else:
            self.start_btn.grid()
            self.pause_btn.grid_remove()
            self.stop_btn.grid_remove()
            if snap.selected_skill:
                self.start_btn.state(["!disabled"])
            else:
                self.start_btn.state(["disabled"])

    def _start(self):
        self.tracker.start()

    def _toggle_pause(self):
        self.tracker.toggle_pause()

    def _stop(self):
        self.tracker.stop()

    def render(self, snap: TimerSnapshot):
        self.time_var.set(format_duration(snap.elapsed_sec))
        skill = snap.tracking_skill or snap.selected_skill
        self.skill_var.set(skill.upper() if skill else "")

        if not skill:
            self.info_var.set("Select a skill to start")
        elif not snap.running:
            self.info_var.set("Ready")
        elif snap.paused:
            self.info_var.set("Paused")
        else:
            self.info_var.set("Tracking...")

        self._update_buttons(snap)
