from fastapi import FastAPI
import uvicorn
from dotenv import load_dotenv
from contextlib import asynccontextmanager

from readme_bumper.api.fastapi import FastAPIApp
from readme_bumper.core.config import settings
from readme_bumper.services.github.contents_client import GitHubContentsClient
from readme_bumper.utils.exception import add_exception_handlers
from readme_bumper.utils.logging import Logger, logger

load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings = app.state.settings
    logger.info("Starting up README bumper")

    owns_client = app.state.contents_client is None
    if owns_client:
        app.state.contents_client = GitHubContentsClient.from_settings(app_settings)
    if not app_settings.GITHUB_TOKEN:
        logger.warning("GITHUB_TOKEN is not set; README writes will be rejected by GitHub")

    logger.info(f"Accepting repositories under {app_settings.allowed_repo_prefix}")
    logger.info(f"Server running on http://localhost:{app_settings.PORT}")

    yield

    logger.info("Shutting down README bumper")
    if owns_client:
        await app.state.contents_client.aclose()
        app.state.contents_client = None


def create_app(**kwargs) -> FastAPI:
    app_instance = FastAPIApp(lifespan=lifespan, **kwargs)
    app = app_instance.get_app()
    add_exception_handlers(app, Logger("readme_bumper.errors"))
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level="info")


if __name__ == "__main__":
    run()
