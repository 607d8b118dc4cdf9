import os

# Settings are read at import time
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ["MONGO_URI"] = ""
os.environ["PAYMENT_PROCESSING_DELAY_SECONDS"] = "0"

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

import app.core.llm as llm
from app.database.mock_store import reset_store
from main import app


class FakeResponses:
    """Stands in for client.responses; returns canned replies in order."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(output_text=reply)


class FakeOpenAI:
    def __init__(self, *replies):
        self.responses = FakeResponses(replies)


@pytest.fixture(autouse=True)
def fresh_store():
    reset_store()
    yield


@pytest.fixture
def fake_llm():
    """Install a fake OpenAI client: fake_llm("reply text") or fake_llm(RuntimeError(...))."""
    def install(*replies):
        fake = FakeOpenAI(*replies)
        llm.client = fake
        return fake.responses

    yield install
    llm.client = None


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
