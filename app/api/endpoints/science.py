from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from app.agents.grading_agent import grade_answer
from app.agents.question_agent import generate_question
from app.api.cors import cors_headers, resolve_cors_origin
from app.api.openai_client import (
    ChatModelFactory,
    GENERATION_TEMPERATURE,
    GRADING_TEMPERATURE,
    get_chat_model_factory
)
from app.config import Settings, get_settings
from app.errors import BadRequest, ConfigError, ScienceProxyError, UpstreamError
from app.models.science import ErrorResponse, GenerateRequest, GradeRequest
from app.models.topic import SubjectListResponse, is_allowed, list_subjects
from app.utils.logger import get_logger


router = APIRouter()
log = get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def is_blank(value) -> bool:
    """Treat null, false, 0, NaN and the empty string as absent; lists and objects count."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def request_origin(request: Request) -> str:
    return resolve_cors_origin(request.headers.get("origin"))


async def science_error_handler(request: Request, exc: ScienceProxyError) -> JSONResponse:
    """Render a proxy error as ``{"error": ...}`` with the request's CORS headers."""
    if exc.status_code >= 500:
        log.warning("%s: %s", type(exc).__name__, exc.message)
    else:
        log.info("Rejected request: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
        headers=cors_headers(request_origin(request))
    )


@router.options("/science-eq", status_code=204)
async def science_preflight(request: Request):
    """Answer a CORS preflight."""
    return Response(status_code=204, headers=cors_headers(request_origin(request)))


@router.get("/science-eq/subjects", response_model=SubjectListResponse)
async def get_subjects(request: Request):
    """List the subjects and topics questions can be set on."""
    return JSONResponse(
        content=list_subjects().model_dump(),
        headers=cors_headers(request_origin(request))
    )


@router.post("/science-eq", responses=ERROR_RESPONSES)
async def science_eq(
    request: Request,
    settings: Settings = Depends(get_settings),
    model_factory: ChatModelFactory = Depends(get_chat_model_factory)
):
    """
    Generate a question or grade an answer for an allowed subject/topic pair.

    Body for ``generate``: ``{action, subject, topic}`` -> ``{question}``.
    Body for ``grade``: ``{action, subject, topic, question, answer}`` ->
    ``{grade_band, score, feedback, improved_answer}``.
    """
    origin = request_origin(request)
    if not settings.openai_api_key:
        raise ConfigError("Server not configured: OPENAI_API_KEY missing.")

    try:
        body = await request.json()
    except ValueError:
        raise BadRequest("Invalid JSON body.")
    if not isinstance(body, dict):
        body = {}

    action = body.get("action")
    subject = body.get("subject")
    topic = body.get("topic")
    if is_blank(action) or is_blank(subject) or is_blank(topic):
        raise BadRequest("Missing required fields: action, subject, topic.")
    if not is_allowed(subject, topic):
        raise BadRequest("Invalid subject/topic selection.")

    log.info("Handling %s for %s / %s", action, subject, topic)

    try:
        if action == "generate":
            req = GenerateRequest(subject=subject, topic=topic)
            llm = model_factory(settings.openai_api_key, GENERATION_TEMPERATURE)
            result = await generate_question(req.subject, req.topic, llm)
            return JSONResponse(content=result.model_dump(), headers=cors_headers(origin))

        if action == "grade":
            question = body.get("question")
            answer = body.get("answer")
            if is_blank(question) or is_blank(answer):
                raise BadRequest("Missing question or answer for grading.")
            req = GradeRequest(subject=subject, topic=topic, question=str(question), answer=str(answer))
            llm = model_factory(settings.openai_api_key, GRADING_TEMPERATURE)
            result = await grade_answer(req.subject, req.topic, req.question, req.answer, llm)
            return JSONResponse(content=result.model_dump(), headers=cors_headers(origin))
    except ScienceProxyError:
        raise
    except Exception as e:
        raise UpstreamError(str(e) or "Internal error.") from e

    raise BadRequest("Unknown action.")
