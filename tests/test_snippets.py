import json
from unittest import mock

import pytest
from django.db import DatabaseError
from django.db.models import QuerySet

from notes.models import Note
from snippets.models import Snippet

pytestmark = pytest.mark.django_db

SNIPPET = {"title": "Debounce", "code": "const d = debounce(fn, 500)", "language": "javascript"}


def test_create_with_tags_skips_ai(api, user, fake_ai):
    response = api.post("/api/snippets/", {**SNIPPET, "tags": ["js", "timing"]}, format="json")
    assert response.status_code == 201
    assert response.data["snippet"]["tags"] == ["js", "timing"]
    assert response.data["snippet"]["usage_count"] == 0
    assert fake_ai.calls == 0


def test_create_without_tags_asks_ai(api, fake_ai):
    fake_ai.replies.append(json.dumps({"tags": ["JavaScript", "debounce"]}))
    response = api.post("/api/snippets/", SNIPPET, format="json")
    assert response.status_code == 201
    assert response.data["snippet"]["tags"] == ["javascript", "debounce"]
    prompt = fake_ai.chat_calls[0]["messages"][1]["content"]
    assert "Debounce\n\nconst d = debounce(fn, 500)" in prompt


def test_create_survives_tagging_failure(api, fake_ai):
    fake_ai.error = RuntimeError("model down")
    response = api.post("/api/snippets/", SNIPPET, format="json")
    assert response.status_code == 201
    assert response.data["snippet"]["tags"] == []


def test_create_can_link_own_note_only(api, user, other_user, fake_ai):
    mine = Note.objects.create(user=user, title="mine")
    theirs = Note.objects.create(user=other_user, title="theirs")

    ok = api.post("/api/snippets/", {**SNIPPET, "tags": ["x"], "note_id": mine.id}, format="json")
    assert ok.status_code == 201
    assert ok.data["snippet"]["note_id"] == mine.id

    rejected = api.post("/api/snippets/", {**SNIPPET, "tags": ["x"], "note_id": theirs.id}, format="json")
    assert rejected.status_code == 400


def test_list_orders_by_usage_then_recency(api, user, other_user):
    rarely = Snippet.objects.create(user=user, title="rare", code="a", language="py", usage_count=1)
    often = Snippet.objects.create(user=user, title="often", code="b", language="py", usage_count=9)
    Snippet.objects.create(user=other_user, title="not mine", code="c", language="py", usage_count=99)

    response = api.get("/api/snippets/")
    assert [s["id"] for s in response.data["snippets"]] == [often.id, rarely.id]


def test_usage_count_after_sequential_copies(api, user):
    snippet = Snippet.objects.create(user=user, **SNIPPET)
    for _ in range(5):
        response = api.post(f"/api/snippets/{snippet.id}/usage/")
        assert response.data == {"success": True}
    snippet.refresh_from_db()
    assert snippet.usage_count == 5


def test_usage_falls_back_to_read_then_write(api, user):
    snippet = Snippet.objects.create(user=user, usage_count=2, **SNIPPET)
    with mock.patch.object(QuerySet, "update", side_effect=DatabaseError("no atomic update")):
        response = api.post(f"/api/snippets/{snippet.id}/usage/")
    assert response.status_code == 200
    snippet.refresh_from_db()
    assert snippet.usage_count == 3


def test_usage_of_other_users_snippet_is_not_found(other_api, user):
    snippet = Snippet.objects.create(user=user, **SNIPPET)
    response = other_api.post(f"/api/snippets/{snippet.id}/usage/")
    assert response.status_code == 404
    snippet.refresh_from_db()
    assert snippet.usage_count == 0


def test_detail_update_and_delete(api, user):
    snippet = Snippet.objects.create(user=user, **SNIPPET)
    response = api.patch(f"/api/snippets/{snippet.id}/", {"description": "Wait for quiet"}, format="json")
    assert response.data["description"] == "Wait for quiet"
    assert api.delete(f"/api/snippets/{snippet.id}/").status_code == 204
