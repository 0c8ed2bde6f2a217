"""API router setup."""
from fastapi import APIRouter

from app.api.routes import students

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(students.router)
