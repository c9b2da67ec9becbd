from fastapi import FastAPI
from app.api.router import api_router
from app.api.endpoints.science import science_error_handler
from app.config import settings
from app.errors import ScienceProxyError
from app.utils.logger import configure_logging

configure_logging()

app = FastAPI(
    title=settings.app_name,
    description="Generates Year 10 Science exam questions and grades answers through an OpenAI proxy",
    version="1.0.0",
    debug=settings.debug
)

app.include_router(api_router, prefix="/api")
app.add_exception_handler(ScienceProxyError, science_error_handler)


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Science Exam Question Proxy",
        "description": "POST /api/science-eq with action 'generate' or 'grade'"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
