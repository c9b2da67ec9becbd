import pytest
from app.api.openai_client import (
    GENERATION_TEMPERATURE,
    GRADING_TEMPERATURE,
    build_chat_model,
    get_chat_model_factory
)
from app.config import settings


@pytest.mark.parametrize("temperature,expected", [
    (GENERATION_TEMPERATURE, 0.7),
    (GRADING_TEMPERATURE, 0.3),
])
def test_build_chat_model(temperature, expected):
    model = build_chat_model("sk-test", temperature)
    assert model.kwargs == {"response_format": {"type": "json_object"}}
    assert model.bound.temperature == expected
    assert model.bound.max_retries == 0
    assert model.bound.model_name == settings.openai_model


def test_build_chat_model_with_model_override():
    model = build_chat_model("sk-test", GRADING_TEMPERATURE, model="gpt-4o")
    assert model.bound.model_name == "gpt-4o"


def test_factory_dependency_returns_builder():
    assert get_chat_model_factory() is build_chat_model
