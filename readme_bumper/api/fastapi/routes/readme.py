from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter

from readme_bumper.api.fastapi.dependencies import get_readme_service
from readme_bumper.services.readme.readme_service import ReadmeUpsertService


def create_readme_router(limiter: Limiter, rate_limit: str) -> APIRouter:
    """
    Build the README router with its per-caller limit bound to ``limiter``.

    Each application owns its limiter, so the route is decorated per app
    rather than at import time.
    """
    router = APIRouter(tags=["README"])

    @router.get("/", response_class=PlainTextResponse)
    @limiter.limit(rate_limit)
    async def bump_readme(
        request: Request,
        repo_url: Optional[str] = Query(None, alias="repoUrl"),
        readme_service: ReadmeUpsertService = Depends(get_readme_service),
    ):
        """Append a space to the repository's README.md, creating it if missing."""
        result = await readme_service.handle(repo_url)
        return PlainTextResponse(result.message, status_code=result.status_code)

    return router
