# tests/conftest.py
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app import app
from services.gemini_service import get_gemini_client
from services.openai_service import get_openai_client


class StubResponses:
    def __init__(self, text, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(output_text=self.text)


class StubOpenAI:
    """Stands in for AsyncOpenAI; records every responses.create call."""

    def __init__(self, text="stub reply", error=None):
        self.responses = StubResponses(text, error)

    @property
    def calls(self):
        return self.responses.calls


class StubChat:
    def __init__(self, owner):
        self.owner = owner

    async def send_message(self, message):
        self.owner.sent.append(message)
        if self.owner.error:
            raise self.owner.error
        return SimpleNamespace(text=self.owner.text)


class StubChats:
    def __init__(self, owner):
        self.owner = owner

    def create(self, *, model, history=None, config=None):
        self.owner.sessions.append({"model": model, "history": history or []})
        return StubChat(self.owner)


class StubGemini:
    """Stands in for genai.Client; records opened sessions and sent turns."""

    def __init__(self, text="stub reply", error=None):
        self.text = text
        self.error = error
        self.sessions = []
        self.sent = []
        self.aio = SimpleNamespace(chats=StubChats(self))


@pytest.fixture
def openai_stub():
    return StubOpenAI()


@pytest.fixture
def gemini_stub():
    return StubGemini()


@pytest.fixture
def client(openai_stub, gemini_stub):
    app.dependency_overrides[get_openai_client] = lambda: openai_stub
    app.dependency_overrides[get_gemini_client] = lambda: gemini_stub
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
