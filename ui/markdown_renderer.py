# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markdown import markdown


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#000000"
    muted: str = "#4B5563"
    border: str = "#E5E7EB"
    panel: str = "#FFFFFF"
    soft: str = "#F9FAFB"


class MarkdownRenderer:
    """
    Convert the session log markdown -> HTML page for tkinterweb.

    tkinterweb (tkhtml) only understands plain HTML/CSS: no JS, limited
    selectors. Keep extensions to the ones that emit simple tags.
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    def extensions(self) -> Tuple[List[str], Dict]:
        exts: List[str] = ["extra", "sane_lists", "tables"]
        cfg: Dict = {}
        return exts, cfg

    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 12px;
          color: {t.text};
          background: {t.panel};
          font-size: 14px;
          line-height: 1.5;
        }}
        h3 {{
          font-size: 0.9em;
          font-weight: 600;
          letter-spacing: 0.05em;
          text-transform: uppercase;
          margin: 0 0 0.8em;
        }}
        p {{ margin: 0.6em 0; }}
        em {{ color: {t.muted}; }}
        table {{
          border-collapse: collapse;
          width: 100%;
          margin: 0.4em 0 0.8em;
        }}
        th, td {{
          border-bottom: 1px solid {t.border};
          padding: 6px 8px;
        }}
        th {{
          background: {t.soft};
          font-weight: 600;
        }}
        code {{
          font-family: ui-monospace, Menlo, Consolas, "Liberation Mono", monospace;
        }}
        """

    def to_html(self, md_text: str) -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
