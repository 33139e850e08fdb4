"""Journal JSON API."""

from __future__ import annotations

import logging
from datetime import date

from flask import Blueprint, Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from daybook.core.results import VALIDATION_ERROR
from daybook.core.utils.pagination import page_count
from daybook.domains.journal.export.report_pdf import render_report_pdf
from daybook.domains.journal.mappers import map_entry
from daybook.domains.journal.schemas.journal_schemas import (
    JournalEntryUpsert,
    JournalListFilter,
    JournalSearchFilter,
    ReportRange,
)
from daybook.domains.journal.services import analytics_service, journal_service

logger = logging.getLogger(__name__)

journal_api_bp = Blueprint("journal_api", __name__)


def _user_id() -> int:
    return int(get_jwt_identity())


def _validation_failed(exc: ValidationError):
    return jsonify({"ok": False, "error": VALIDATION_ERROR, "details": exc.errors(include_url=False)}), 400


def _page_size(requested):
    """Apply the configured default and cap to a requested page size."""
    if requested is None:
        return current_app.config.get("JOURNAL_DEFAULT_PAGE_SIZE", 10), None
    limit = current_app.config.get("JOURNAL_MAX_PAGE_SIZE", 100)
    if requested > limit:
        return None, (
            jsonify({"ok": False, "error": VALIDATION_ERROR, "message": f"per_page must be at most {limit}"}),
            400,
        )
    return requested, None


def _parse_day(raw: str):
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _page_payload(result, page: int, per_page: int):
    items, total = result.data
    return jsonify(
        {
            "ok": True,
            "items": [item.model_dump(mode="json") for item in items],
            "page": max(page, 1),
            "pages": page_count(total, per_page),
            "total": total,
        }
    )


@journal_api_bp.get("")
@jwt_required()
def list_journal():
    try:
        filters = JournalListFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failed(exc)
    per_page, error = _page_size(filters.per_page)
    if error:
        return error
    result = journal_service.list_entries(_user_id(), page=filters.page, page_size=per_page)
    if not result.ok:
        return jsonify(result.to_payload()), 500
    return _page_payload(result, filters.page, per_page)


@journal_api_bp.get("/search")
@jwt_required()
def search_journal():
    try:
        filters = JournalSearchFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failed(exc)
    per_page, error = _page_size(filters.per_page)
    if error:
        return error
    result = journal_service.search_entries(
        _user_id(),
        title=filters.title,
        mood=filters.mood,
        tag=filters.tag,
        date_from=filters.date_from,
        date_to=filters.date_to,
        page=filters.page,
        page_size=per_page,
        include_content=filters.include_content,
    )
    if not result.ok:
        return jsonify(result.to_payload()), 500
    return _page_payload(result, filters.page, per_page)


@journal_api_bp.get("/analytics")
@jwt_required()
def journal_analytics():
    result = analytics_service.get_analytics(_user_id())
    if not result.ok:
        return jsonify(result.to_payload()), 500
    return jsonify({"ok": True, "analytics": result.data.model_dump(mode="json")})


@journal_api_bp.get("/export")
@jwt_required()
def export_journal():
    try:
        span = ReportRange.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failed(exc)
    result = journal_service.entries_for_report(_user_id(), span.date_from, span.date_to)
    if not result.ok:
        return jsonify(result.to_payload()), 500
    try:
        pdf = render_report_pdf(
            result.data,
            span.date_from,
            span.date_to,
            title=current_app.config.get("REPORT_TITLE", "Journal Report"),
        )
    except RuntimeError as exc:
        logger.error("Journal export failed: %s", exc)
        return jsonify({"ok": False, "error": "export_unavailable", "message": str(exc)}), 503
    filename = f"journal_{span.date_from.isoformat()}_{span.date_to.isoformat()}.pdf"
    return Response(
        pdf,
        mimetype="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@journal_api_bp.get("/<day>")
@jwt_required()
def get_journal_entry(day: str):
    entry_date = _parse_day(day)
    if entry_date is None:
        return jsonify({"ok": False, "error": VALIDATION_ERROR, "message": "Invalid date"}), 400
    result = journal_service.get_entry_by_date(_user_id(), entry_date)
    if not result.ok:
        return jsonify(result.to_payload()), 500
    if result.data is None:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "entry": map_entry(result.data)})


@journal_api_bp.put("/<day>")
@jwt_required()
def upsert_journal_entry(day: str):
    entry_date = _parse_day(day)
    if entry_date is None:
        return jsonify({"ok": False, "error": VALIDATION_ERROR, "message": "Invalid date"}), 400
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryUpsert.model_validate(payload)
    except ValidationError as exc:
        return _validation_failed(exc)
    result = journal_service.upsert_entry(
        _user_id(),
        entry_date=entry_date,
        title=data.title,
        content=data.content,
        primary_mood=data.primary_mood,
        secondary_moods=data.secondary_moods,
        tags=data.tags,
    )
    if not result.ok:
        return jsonify(result.to_payload()), 400 if result.is_future_date else 500
    return jsonify({"ok": True, "entry": map_entry(result.data)})


@journal_api_bp.delete("/<day>")
@jwt_required()
def delete_journal_entry(day: str):
    entry_date = _parse_day(day)
    if entry_date is None:
        return jsonify({"ok": False, "error": VALIDATION_ERROR, "message": "Invalid date"}), 400
    result = journal_service.delete_entry(_user_id(), entry_date)
    if not result.ok:
        return jsonify(result.to_payload()), 500
    return jsonify({"ok": True, "deleted": result.data})
