"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from hanzi.api.v1.endpoints import (
    users, settings, characters, progress, study, quiz
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(users.router)
api_router.include_router(settings.router)
api_router.include_router(characters.router)
api_router.include_router(progress.router)
api_router.include_router(study.router)
api_router.include_router(quiz.router)
