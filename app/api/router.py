from fastapi import APIRouter
from app.api.endpoints import science

api_router = APIRouter()
api_router.include_router(science.router, tags=["science"])
