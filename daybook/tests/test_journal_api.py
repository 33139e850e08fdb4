"""Journal API tests.

- GET    /api/journal            - list_journal
- GET    /api/journal/search     - search_journal
- GET    /api/journal/analytics  - journal_analytics
- GET    /api/journal/export     - export_journal
- GET    /api/journal/<date>     - get_journal_entry
- PUT    /api/journal/<date>     - upsert_journal_entry
- DELETE /api/journal/<date>     - delete_journal_entry
"""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from daybook.domains.journal.models import JournalEntry

pytestmark = pytest.mark.integration


def _put(client, headers, day, **fields):
    payload = {"title": "Entry", "content": "a few words", "primary_mood": "Calm", "tags": []}
    payload.update(fields)
    return client.put(f"/api/journal/{day.isoformat()}", json=payload, headers=headers)


def test_requires_token(client):
    resp = client.get("/api/journal")
    assert resp.status_code == 401
    assert resp.get_json()["ok"] is False


def test_put_creates_then_updates(client, auth_headers, today):
    resp = _put(client, auth_headers, today, title="First", tags=["a", "a", " b "])
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    entry_id = body["entry"]["id"]
    assert body["entry"]["tags"] == ["a", "b"]
    assert body["entry"]["word_count"] == 3
    assert "user_id" not in body["entry"]

    resp = _put(client, auth_headers, today, title="Second", content="")
    body = resp.get_json()
    assert body["entry"]["id"] == entry_id
    assert body["entry"]["title"] == "Second"
    assert body["entry"]["word_count"] == 0
    assert JournalEntry.query.count() == 1


def test_put_future_date_rejected(client, auth_headers, today):
    resp = _put(client, auth_headers, today + timedelta(days=1))
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["ok"] is False
    assert body["error"] == "future_date"
    assert JournalEntry.query.count() == 0


def test_put_invalid_date(client, auth_headers):
    resp = client.put("/api/journal/not-a-date", json={}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_put_invalid_payload(client, auth_headers, today):
    resp = _put(client, auth_headers, today, tags="not-a-list")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_get_by_date(client, auth_headers, today):
    _put(client, auth_headers, today, title="Today", content="full text")
    resp = client.get(f"/api/journal/{today.isoformat()}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["entry"]["content"] == "full text"

    missing = today - timedelta(days=30)
    resp = client.get(f"/api/journal/{missing.isoformat()}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


def test_delete_by_date_is_idempotent(client, auth_headers, today):
    _put(client, auth_headers, today)
    resp = client.delete(f"/api/journal/{today.isoformat()}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "deleted": True}

    resp = client.delete(f"/api/journal/{today.isoformat()}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "deleted": False}


def test_list_paginates(client, auth_headers, today):
    for offset in range(5):
        _put(client, auth_headers, today - timedelta(days=offset), title=f"d{offset}")

    resp = client.get("/api/journal?page=2&per_page=2", headers=auth_headers)
    body = resp.get_json()
    assert resp.status_code == 200
    assert [i["title"] for i in body["items"]] == ["d2", "d3"]
    assert body["total"] == 5
    assert body["pages"] == 3
    assert all(i["content"] is None for i in body["items"])


def test_list_rejects_bad_page_size(client, auth_headers):
    resp = client.get("/api/journal?per_page=0", headers=auth_headers)
    assert resp.status_code == 400


def test_list_uses_configured_default_page_size(app, client, auth_headers, today):
    app.config["JOURNAL_DEFAULT_PAGE_SIZE"] = 2
    for offset in range(3):
        _put(client, auth_headers, today - timedelta(days=offset), title=f"d{offset}")

    body = client.get("/api/journal", headers=auth_headers).get_json()
    assert [i["title"] for i in body["items"]] == ["d0", "d1"]
    assert body["pages"] == 2


def test_page_size_capped_by_config(app, client, auth_headers):
    app.config["JOURNAL_MAX_PAGE_SIZE"] = 3
    for path in ("/api/journal?per_page=4", "/api/journal/search?per_page=4"):
        resp = client.get(path, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "validation_error"
    assert client.get("/api/journal/search?per_page=3", headers=auth_headers).status_code == 200


def test_list_store_error_returns_500(client, auth_headers):
    with patch(
        "daybook.domains.journal.services.journal_service.paginate",
        side_effect=OperationalError("SELECT", {}, Exception("database is locked")),
    ):
        resp = client.get("/api/journal", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.get_json()["error"] == "store_error"


def test_search_uses_single_text_filter(client, auth_headers, today):
    _put(client, auth_headers, today, title="Trip home", primary_mood="Sad")
    _put(client, auth_headers, today - timedelta(days=1), title="Gym", primary_mood="Happy")

    resp = client.get("/api/journal/search?title=trip&mood=Happy", headers=auth_headers)
    body = resp.get_json()
    assert [i["title"] for i in body["items"]] == ["Trip home"]
    assert body["total"] == 1
    assert body["items"][0]["content"] == "a few words"

    resp = client.get(
        f"/api/journal/search?mood=Happy&date_to={(today - timedelta(days=2)).isoformat()}",
        headers=auth_headers,
    )
    assert resp.get_json()["total"] == 0


def test_search_page_zero_matches_page_one(client, auth_headers, today):
    for offset in range(3):
        _put(client, auth_headers, today - timedelta(days=offset), title=f"d{offset}")
    zero = client.get("/api/journal/search?page=0&per_page=2", headers=auth_headers).get_json()
    one = client.get("/api/journal/search?page=1&per_page=2", headers=auth_headers).get_json()
    assert zero["items"] == one["items"]
    assert zero["total"] == one["total"] == 3


def test_analytics(client, auth_headers, today):
    _put(client, auth_headers, today - timedelta(days=1), primary_mood="Happy", tags=["x"])
    _put(client, auth_headers, today, primary_mood="Bizarre", tags=["x", "y"])

    resp = client.get("/api/journal/analytics", headers=auth_headers)
    assert resp.status_code == 200
    analytics = resp.get_json()["analytics"]
    assert analytics["total_entries"] == 2
    assert analytics["current_streak"] == 2
    assert analytics["longest_streak"] == 2
    assert [(p["label"], p["value"]) for p in analytics["mood_distribution"]] == [
        ("Positive", 1),
        ("Neutral", 0),
        ("Negative", 0),
    ]
    assert [(p["label"], p["value"]) for p in analytics["tag_usage"]] == [("x", 2), ("y", 1)]
    assert len(analytics["word_count_trend"]) == 7
    assert len(analytics["recent_entries"]) == 2


def test_analytics_empty(client, auth_headers):
    analytics = client.get("/api/journal/analytics", headers=auth_headers).get_json()["analytics"]
    assert analytics["current_streak"] == 0
    assert analytics["longest_streak"] == 0
    assert analytics["mood_distribution"] == []
    assert analytics["word_count_trend"] == []


def test_export_returns_pdf(client, auth_headers, today):
    _put(client, auth_headers, today, title="Exported")
    with patch(
        "daybook.domains.journal.export.report_pdf.render_with_weasyprint",
        return_value=b"%PDF-1.7 fake",
    ) as render:
        resp = client.get(
            f"/api/journal/export?date_from={today.isoformat()}&date_to={today.isoformat()}",
            headers=auth_headers,
        )
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data == b"%PDF-1.7 fake"
    assert "Exported" in render.call_args[0][0]


def test_export_unavailable_renderer(client, auth_headers, today):
    with patch(
        "daybook.domains.journal.export.report_pdf.render_with_weasyprint",
        side_effect=RuntimeError("WeasyPrint is not installed."),
    ):
        resp = client.get(
            f"/api/journal/export?date_from={today.isoformat()}&date_to={today.isoformat()}",
            headers=auth_headers,
        )
    assert resp.status_code == 503
    assert resp.get_json()["error"] == "export_unavailable"


def test_export_requires_range(client, auth_headers):
    resp = client.get("/api/journal/export", headers=auth_headers)
    assert resp.status_code == 400
