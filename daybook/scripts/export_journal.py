"""CLI command for exporting a user's journal to PDF.

Usage:
    flask export-journal --user 1 --from 2024-01-01 --to 2024-01-31 --out january.pdf
"""

from __future__ import annotations

from pathlib import Path

import click
from flask import current_app
from flask.cli import with_appcontext


@click.command("export-journal")
@click.option("--user", "-u", "user_id", type=int, required=True, help="Owner of the entries")
@click.option("--from", "date_from", type=click.DateTime(formats=["%Y-%m-%d"]), required=True)
@click.option("--to", "date_to", type=click.DateTime(formats=["%Y-%m-%d"]), required=True)
@click.option("--out", "out_path", type=click.Path(dir_okay=False, path_type=Path), required=True)
@with_appcontext
def export_journal_command(user_id: int, date_from, date_to, out_path: Path):
    """Render entries between two dates (inclusive) into a PDF report."""
    from daybook.domains.journal.export.report_pdf import render_report_pdf
    from daybook.domains.journal.services import journal_service

    start, end = date_from.date(), date_to.date()
    result = journal_service.entries_for_report(user_id, start, end)
    if not result.ok:
        raise click.ClickException(result.message or "export failed")

    try:
        pdf = render_report_pdf(
            result.data,
            start,
            end,
            title=current_app.config.get("REPORT_TITLE", "Journal Report"),
        )
    except RuntimeError as e:
        raise click.ClickException(str(e)) from e

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(pdf)
    click.echo(f"  ✓ Wrote {len(result.data)} entries to {out_path}")


def register_commands(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(export_journal_command)
