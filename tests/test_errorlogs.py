import pytest

from errorlogs.models import ErrorLog

pytestmark = pytest.mark.django_db


def _log(user, text="TypeError"):
    return ErrorLog.objects.create(user=user, error_text=text, language="python")


def test_list_is_owner_scoped(api, user, other_user):
    mine = _log(user)
    _log(other_user)
    response = api.get("/api/errors/")
    assert [row["id"] for row in response.data] == [mine.id]


def test_mark_resolved(api, user):
    log = _log(user)
    response = api.patch(f"/api/errors/{log.id}/", {"is_resolved": True}, format="json")
    assert response.status_code == 200
    log.refresh_from_db()
    assert log.is_resolved is True


def test_analysis_fields_are_read_only(api, user):
    log = _log(user)
    api.patch(f"/api/errors/{log.id}/", {"error_text": "rewritten"}, format="json")
    log.refresh_from_db()
    assert log.error_text == "TypeError"


def test_other_users_log_is_not_found(other_api, user):
    log = _log(user)
    assert other_api.delete(f"/api/errors/{log.id}/").status_code == 404
