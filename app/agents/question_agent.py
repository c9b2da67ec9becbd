import json
from langchain_core.runnables import Runnable
from app.api.openai_client import invoke_provider
from app.errors import UpstreamError
from app.models.science import GenerateResult
from app.prompts.generation import get_generation_prompt
from app.utils.logger import get_logger


log = get_logger(__name__)


async def generate_question(subject: str, topic: str, llm: Runnable) -> GenerateResult:
    """
    Ask the provider for one exam-style question on the given subject and topic.
    A reply that is not JSON is used verbatim as the question.
    """
    chain = get_generation_prompt() | llm
    content = await invoke_provider(chain, {"subject": subject, "topic": topic})

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        log.info("Question reply was not JSON, using raw text")
        parsed = {"question": content.strip()}

    question = parsed.get("question") if isinstance(parsed, dict) else None
    if not question:
        raise UpstreamError("No question returned from model.")

    return GenerateResult(question=question)
