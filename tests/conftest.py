import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routers.analyze import get_analyzer
from compliance.gluten.analyzer import GlutenAnalyzer


class FakeCompletions:
    """Replays scripted completions and records every request."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError("Unexpected completion call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            reply = json.dumps(reply, ensure_ascii=False)
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, *replies):
        self.chat = SimpleNamespace(completions=FakeCompletions(replies))

    @property
    def calls(self):
        return self.chat.completions.calls


@pytest.fixture
def fake_openai():
    """Factory: fake_openai(reply1, reply2, ...) -> FakeOpenAI."""
    return FakeOpenAI


@pytest.fixture
def make_client():
    """Factory building a TestClient whose analyzer talks to the given fake."""
    def _make(fake, guard_policy="rewrite"):
        analyzer = GlutenAnalyzer(client=fake, model="test-model", guard_policy=guard_policy)
        app.dependency_overrides[get_analyzer] = lambda: analyzer
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
