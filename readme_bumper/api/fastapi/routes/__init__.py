from fastapi import APIRouter, FastAPI
from slowapi import Limiter

from readme_bumper.core.config import Settings
from . import health
from .readme import create_readme_router

def register_routes(app: FastAPI, limiter: Limiter, settings: Settings):
    api_router = APIRouter(prefix="/api")
    api_router.include_router(health.router)
    app.include_router(api_router)
    app.include_router(create_readme_router(limiter, settings.rate_limit))
