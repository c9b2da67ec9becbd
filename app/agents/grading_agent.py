import json
from langchain_core.runnables import Runnable
from app.api.openai_client import invoke_provider
from app.errors import UpstreamError
from app.models.science import GradeResult
from app.prompts.grading import get_grading_prompt


async def grade_answer(
    subject: str,
    topic: str,
    question: str,
    answer: str,
    llm: Runnable
) -> GradeResult:
    """
    Mark a student's answer with an NCEA-style band and a score out of 8.

    Unlike question generation there is no fallback: a reply that is not a
    JSON object with at least grade_band and score is an upstream failure.
    """
    chain = get_grading_prompt() | llm
    content = await invoke_provider(chain, {
        "subject": subject,
        "topic": topic,
        "question": question,
        "answer": answer
    })

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        raise UpstreamError("Failed to parse grading JSON.") from e

    if not isinstance(parsed, dict) or not parsed.get("grade_band") or "score" not in parsed:
        raise UpstreamError("Incomplete grading response.")

    return GradeResult(
        grade_band=parsed["grade_band"],
        score=parsed["score"],
        feedback=parsed.get("feedback") or "",
        improved_answer=parsed.get("improved_answer") or ""
    )
