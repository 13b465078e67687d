"""
Shared pytest fixtures for the Luna backend tests.

Provides:
- A deterministic clock and an in-memory conversation store
- The seeded resource catalog
- Completion gateways backed by fake chat models
- A FastAPI test client wired to those objects
"""
import json
from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from luna.main import create_app
from luna.services.completion_gateway import CompletionGateway
from luna.storage import InMemoryConversationStore, InMemoryResourceCatalog


class StepClock:
    """Clock that moves forward one second every time it is read."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


def provider_json(response: str, resources: List[dict] = None) -> str:
    """Serialize a reply the way the provider is asked to format it."""
    return json.dumps({"response": response, "resources": resources or []})


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def store(clock) -> InMemoryConversationStore:
    return InMemoryConversationStore(clock=clock)


@pytest.fixture
def catalog() -> InMemoryResourceCatalog:
    return InMemoryResourceCatalog()


@pytest.fixture
def fake_llm() -> FakeListChatModel:
    return FakeListChatModel(responses=[
        provider_json(
            "That sounds really hard. What has been weighing on you the most? 💜",
            [{"title": "Crisis Text Line", "description": "Text HOME to 741741", "url": "sms:741741"}],
        )
    ])


@pytest.fixture
def gateway(fake_llm) -> CompletionGateway:
    return CompletionGateway(llm=fake_llm, timeout=5)


@pytest.fixture
def offline_gateway() -> CompletionGateway:
    """Gateway with no provider configured."""
    return CompletionGateway(llm=None)


@pytest.fixture
def app(store, catalog, gateway):
    return create_app(store=store, catalog=catalog, gateway=gateway)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
