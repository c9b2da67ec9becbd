import openai
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI
from typing import Callable, Optional
from app.config import settings
from app.errors import UpstreamError
from app.utils.logger import get_logger


GENERATION_TEMPERATURE = 0.7
GRADING_TEMPERATURE = 0.3

ChatModelFactory = Callable[[str, float], Runnable]

log = get_logger(__name__)


def build_chat_model(api_key: str, temperature: float, model: Optional[str] = None) -> Runnable:
    """Build a chat model that answers in JSON mode with a single attempt."""
    llm = ChatOpenAI(
        model=model or settings.openai_model,
        temperature=temperature,
        api_key=api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout,
        max_retries=0
    )
    return llm.bind(response_format={"type": "json_object"})


def get_chat_model_factory() -> ChatModelFactory:
    """Dependency returning the factory used to build provider models."""
    return build_chat_model


async def invoke_provider(chain: Runnable, inputs: dict) -> str:
    """Run a prompt chain once and return the text content of the reply."""
    try:
        response = await chain.ainvoke(inputs)
    except openai.APIStatusError as e:
        log.warning("Provider returned HTTP %s", e.status_code)
        raise UpstreamError(f"OpenAI error ({e.status_code})") from e

    content = response.content if hasattr(response, "content") else str(response)
    return content or ""
