from types import SimpleNamespace

import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient


class FakeOpenAI:
    """Stands in for the OpenAI client so no request leaves the test process."""

    def __init__(self):
        self.replies = []
        self.vectors = {}
        self.default_vector = [1.0, 0.0, 0.0]
        self.error = None
        self.chat_calls = []
        self.embedding_calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._complete))
        self.embeddings = SimpleNamespace(create=self._embed)

    def _complete(self, **kwargs):
        self.chat_calls.append(kwargs)
        if self.error:
            raise self.error
        text = self.replies.pop(0) if self.replies else ""
        message = SimpleNamespace(content=text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    def _embed(self, model, input):
        self.embedding_calls.append(input)
        if self.error:
            raise self.error
        vector = self.vectors.get(input, self.default_vector)
        return SimpleNamespace(data=[SimpleNamespace(embedding=vector)])

    @property
    def calls(self):
        return len(self.chat_calls) + len(self.embedding_calls)


@pytest.fixture(autouse=True)
def notiq_settings(settings):
    settings.OPENROUTER_API_KEY = None
    settings.NOTIQ_SERVICE_ROLE_KEY = "service-secret"
    settings.NOTIQ_EMBED_IN_BACKGROUND = False
    return settings


@pytest.fixture
def fake_ai(monkeypatch):
    fake = FakeOpenAI()
    monkeypatch.setattr("ai.gateway._get_client", lambda: fake)
    return fake


@pytest.fixture
def user(db):
    return User.objects.create_user(username="ada", email="ada@example.com", password="Analytical-Engine-1843")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="grace", email="grace@example.com", password="Compiler-Pioneer-1952")


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def api(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_api(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client
