import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from notes.models import Note

pytestmark = pytest.mark.django_db

PASSWORD = "Notebook-Lantern-42"


def test_register_login_and_profile(anon_client):
    response = anon_client.post(
        "/api/auth/register/",
        {"username": "linus", "email": "Linus@Example.com", "password": PASSWORD, "password_confirm": PASSWORD},
        format="json",
    )
    assert response.status_code == 201
    assert "password" not in response.data
    assert User.objects.get(username="linus").email == "linus@example.com"

    tokens = anon_client.post("/api/auth/login/", {"username": "linus", "password": PASSWORD}, format="json")
    assert tokens.status_code == 200

    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens.data['access']}")
    profile = client.get("/api/auth/me/")
    assert profile.data["username"] == "linus"


def test_register_rejects_mismatched_passwords(anon_client):
    response = anon_client.post(
        "/api/auth/register/",
        {"username": "linus", "email": "l@example.com", "password": PASSWORD, "password_confirm": "other"},
        format="json",
    )
    assert response.status_code == 400
    assert "password_confirm" in response.data


def test_set_password(api, user):
    response = api.post("/api/auth/set-password/", {"new_password": "Another-Lantern-77"}, format="json")
    assert response.status_code == 200
    user.refresh_from_db()
    assert user.check_password("Another-Lantern-77")


def test_delete_account_removes_owned_notes(api, user):
    Note.objects.create(user=user, title="gone soon")
    assert api.delete("/api/auth/delete/").status_code == 200
    assert not User.objects.filter(pk=user.pk).exists()
    assert Note.objects.count() == 0
