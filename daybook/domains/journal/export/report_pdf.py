"""Journal report HTML -> PDF using WeasyPrint.

The renderer only formats what it is given: an oldest-first list of entries
and the date range they were selected for. Selection happens in
``journal_service.entries_for_report``.
"""

from __future__ import annotations

import datetime as _dt
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import BaseLoader, Environment, select_autoescape

from daybook.domains.journal.models import JournalEntry

REPORT_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }} ({{ period }})</title>
  <style>
    @page {
      size: A4;
      margin: 30px;
      @top-center { content: element(page-header) }
      @bottom-center { content: element(page-footer) }
    }
    html, body { font-family: Inter, system-ui, -apple-system, Segoe UI, Roboto, sans-serif; font-size: 11pt; color: #111; }
    header.page-header { position: running(page-header); }
    footer.page-footer { position: running(page-footer); }
    .h-title { font-size: 16pt; font-weight: 600; text-align: center; }
    .entry { padding-bottom: 10px; margin-bottom: 10px; border-bottom: 1px solid #111; page-break-inside: avoid; }
    .entry-date { font-size: 12pt; font-weight: 600; }
    .entry-title { font-weight: 600; }
    .entry-content { white-space: pre-wrap; margin-top: 4px; }
    .footer-wrap { text-align: center; color: #666; font-size: 9pt; }
  </style>
</head>
<body>
  <header class="page-header">
    <div class="h-title">{{ title }} ({{ period }})</div>
  </header>

  <main>
  {% for e in entries %}
    <section class="entry">
      <div class="entry-date">{{ e.date }}</div>
      <div class="entry-title">{{ e.title }}</div>
      <div>Mood: {{ e.mood }}</div>
      <div>Words: {{ e.word_count }}</div>
      <div class="entry-content">{{ e.content }}</div>
    </section>
  {% endfor %}
  </main>

  <footer class="page-footer">
    <div class="footer-wrap">Generated on {{ generated_at }}</div>
  </footer>
</body>
</html>
"""


def _format_day(value: _dt.date) -> str:
    return value.strftime("%d %b %Y")


def _prepare_entries(entries: Sequence[JournalEntry]) -> List[Dict[str, Any]]:
    return [
        {
            "date": _format_day(e.entry_date),
            "title": e.title or "",
            "mood": e.primary_mood or "",
            "word_count": e.word_count or 0,
            "content": e.content or "",
        }
        for e in entries
    ]


def render_report_html(
    entries: Sequence[JournalEntry],
    date_from: _dt.date,
    date_to: _dt.date,
    generated_at: Optional[_dt.datetime] = None,
    title: str = "Journal Report",
) -> str:
    env = Environment(loader=BaseLoader(), autoescape=select_autoescape())
    tmpl = env.from_string(REPORT_TEMPLATE)
    return tmpl.render(
        title=title,
        period=f"{_format_day(date_from)} - {_format_day(date_to)}",
        entries=_prepare_entries(entries),
        generated_at=(generated_at or _dt.datetime.now()).strftime("%d %b %Y %H:%M"),
    )


def render_with_weasyprint(html: str) -> bytes:
    try:
        from weasyprint import HTML
    except Exception as e:
        raise RuntimeError(
            "WeasyPrint is not installed. Install with: pip install weasyprint\n"
            "Docs: https://doc.courtbouillon.org/weasyprint/stable/first_steps.html#installation"
        ) from e
    try:
        return HTML(string=html, base_url=str(Path.cwd())).write_pdf()
    except Exception as e:
        msg = (
            "WeasyPrint rendering failed. On macOS you may need native libs:\n"
            "  brew install pango cairo gdk-pixbuf libffi libxml2 libxslt harfbuzz fribidi librsvg\n"
            "See: https://doc.courtbouillon.org/weasyprint/stable/first_steps.html#installation\n"
            "Error: " + str(e)
        )
        raise RuntimeError(msg) from e


def render_report_pdf(
    entries: Sequence[JournalEntry],
    date_from: _dt.date,
    date_to: _dt.date,
    generated_at: Optional[_dt.datetime] = None,
    title: str = "Journal Report",
) -> bytes:
    """Render the report to PDF bytes."""
    html = render_report_html(entries, date_from, date_to, generated_at=generated_at, title=title)
    return render_with_weasyprint(html)
