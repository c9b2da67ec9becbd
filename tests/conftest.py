import httpx
import openai
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda
from app.api.openai_client import get_chat_model_factory
from app.config import Settings, get_settings
from main import app


class FakeProvider:
    """Stands in for the chat model factory and records how it was called."""

    def __init__(self):
        self.replies = []
        self.error = None
        self.calls = []

    def reply_with(self, *contents):
        self.replies = list(contents)

    def fail_with(self, error):
        self.error = error

    def fail_with_status(self, status_code):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(status_code, request=request)
        self.error = openai.APIStatusError("upstream failure", response=response, body=None)

    def __call__(self, api_key, temperature):
        self.calls.append({"api_key": api_key, "temperature": temperature})
        if self.error is not None:
            error = self.error

            def _raise(_):
                raise error

            return RunnableLambda(_raise)
        return FakeListChatModel(responses=self.replies)


@pytest.fixture()
def provider():
    return FakeProvider()


def _client_with(settings, provider):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_chat_model_factory] = lambda: provider
    return TestClient(app)


@pytest.fixture()
def client(provider):
    yield _client_with(Settings(openai_api_key="sk-test"), provider)
    app.dependency_overrides.clear()


@pytest.fixture()
def unconfigured_client(provider):
    yield _client_with(Settings(openai_api_key=None), provider)
    app.dependency_overrides.clear()
