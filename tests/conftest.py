import pytest

from app import create_app
from config.settings import TestConfig
from services.content_store import InMemoryContentStore
from services.llm_gateway import LLMGateway


class StubGateway(LLMGateway):
    """Returns canned model output and records every prompt it receives."""

    name = "stub"

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def complete(self, prompt, options):
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else "{}"


@pytest.fixture
def gateway():
    return StubGateway()


@pytest.fixture
def store():
    return InMemoryContentStore()


@pytest.fixture
def app(gateway, store):
    return create_app(TestConfig, content_store=store, llm_gateway=gateway)


@pytest.fixture
def client(app):
    return app.test_client()
