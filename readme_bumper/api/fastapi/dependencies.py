from fastapi import Request

from readme_bumper.core.config import Settings
from readme_bumper.services.github.contents_client import GitHubContentsClient
from readme_bumper.services.readme.readme_service import ReadmeUpsertService
from readme_bumper.utils.logging import Logger


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_contents_client(request: Request) -> GitHubContentsClient:
    return request.app.state.contents_client


def get_request_logger(request: Request) -> Logger:
    """Logger carrying the request id assigned by LogMiddleware."""
    request_id = getattr(request.state, "id", None)
    return Logger("ReadmeUpsertService", {"request_id": request_id} if request_id else None)


def get_readme_service(request: Request) -> ReadmeUpsertService:
    settings = get_settings(request)
    return ReadmeUpsertService(
        contents_client=get_contents_client(request),
        allowed_org=settings.ALLOWED_ORG,
        readme_path=settings.README_PATH,
        logger=get_request_logger(request),
    )
