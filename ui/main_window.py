# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional

from tkinterweb import HtmlFrame

from core.formatting import format_duration
from services.report_service import ReportService
from services.tracker_service import TimerSnapshot, TrackerService
from ui.markdown_renderer import MarkdownRenderer
from ui.timer_widget import TimerWidget

logger = logging.getLogger("worklog.ui")


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        tracker: TrackerService,
        report_service: ReportService,
    ):
        self.root = root
        self.tracker = tracker
        self.report_service = report_service
        self._md = MarkdownRenderer()

        self.root.title("worklog")
        self.root.geometry("760x560")

        self._list_index_to_skill: Dict[int, str] = {}

        self._build_ui()

        # wire callbacks from service -> UI
        self.tracker.set_on_tick(self._on_tick)
        self.tracker.set_on_state_change(self._on_state_change)
        self.tracker.set_on_data_change(self._refresh_all)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._refresh_all()

    def _build_ui(self):
        root = self.root

        outer = ttk.Frame(root, padding=10)
        outer.pack(fill="both", expand=True)

        outer.columnconfigure(0, weight=1)
        outer.columnconfigure(1, weight=2)
        outer.rowconfigure(0, weight=1)

        # LEFT: skills panel
        left = ttk.Labelframe(outer, text="Skills", padding=10)
        left.grid(row=0, column=0, sticky="nsew", padx=(0, 10))
        left.columnconfigure(0, weight=1)
        left.rowconfigure(1, weight=1)

        add_row = ttk.Frame(left)
        add_row.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        add_row.columnconfigure(0, weight=1)

        self.new_skill_var = tk.StringVar()
        self.new_skill_entry = ttk.Entry(add_row, textvariable=self.new_skill_var)
        self.new_skill_entry.grid(row=0, column=0, sticky="ew")
        self.new_skill_entry.bind("<Return>", lambda e: self._add_skill())
        ttk.Button(add_row, text="+", width=3, command=self._add_skill).grid(
            row=0, column=1, padx=(6, 0)
        )

        self.skill_list = tk.Listbox(left, height=12, exportselection=False)
        self.skill_list.grid(row=1, column=0, sticky="nsew")
        self.skill_list.bind("<<ListboxSelect>>", self._on_select_skill)

        # RIGHT: timer + today's log
        right = ttk.Frame(outer)
        right.grid(row=0, column=1, sticky="nsew")
        right.columnconfigure(0, weight=1)
        right.rowconfigure(0, weight=0)
        right.rowconfigure(1, weight=1)

        self.timer = TimerWidget(
            right,
            tracker=self.tracker,
        )
        self.timer.grid(row=0, column=0, sticky="ew", pady=(0, 10))

        log_card = ttk.Labelframe(right, text="Today", padding=4)
        log_card.grid(row=1, column=0, sticky="nsew")
        self.log_view = HtmlFrame(log_card, horizontal_scrollbar="auto")
        self.log_view.pack(fill="both", expand=True)

    def run(self):
        self.root.mainloop()

    def _on_close(self):
        self.tracker.shutdown()
        self.root.destroy()

    # ----- UI actions -----
    def _add_skill(self):
        if self.tracker.add_skill(self.new_skill_var.get()) is not None:
            self.new_skill_var.set("")

    def _selected_skill_from_list(self) -> Optional[str]:
        sel = self.skill_list.curselection()
        if not sel:
            return None
        return self._list_index_to_skill.get(int(sel[0]))

    def _on_select_skill(self, event=None):
        name = self._selected_skill_from_list()
        # listbox drops its selection on refresh; keep the current one
        if name is None:
            return
        self.tracker.select_skill(name)

    # ----- Service callbacks -----
    def _on_tick(self, snap: TimerSnapshot):
        self.timer.render(snap)

    def _on_state_change(self, snap: TimerSnapshot):
        self.timer.render(snap)

    # ----- Refresh -----
    def _refresh_all(self):
        self._refresh_skills_only()
        self._refresh_log_only()
        self.timer.render(self.tracker.get_snapshot())

    def _refresh_skills_only(self):
        selected = self.tracker.selected_skill

        self.skill_list.delete(0, tk.END)
        self._list_index_to_skill.clear()

        for i, s in enumerate(self.tracker.skills):
            self.skill_list.insert(tk.END, f"{s.name}  {format_duration(s.total_time)}")
            self._list_index_to_skill[i] = s.name
            if s.name == selected:
                self.skill_list.selection_set(i)
                self.skill_list.activate(i)

    def _refresh_log_only(self):
        md = self.report_service.today_markdown(self.tracker.sessions)
        html = self._md.to_html(md)
        try:
            self.log_view.load_html(html)
        except Exception:
            logger.debug("load_html failed, falling back to set_content", exc_info=True)
            self.log_view.set_content(html)
