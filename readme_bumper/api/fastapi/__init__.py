from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from readme_bumper.core.config import Settings, settings as default_settings
from readme_bumper.core.rate_limiter import create_limiter
from readme_bumper.services.github.contents_client import GitHubContentsClient
from .middlewares.logging import LogMiddleware
from .routes import register_routes


class FastAPIApp:
    def __init__(
        self,
        lifespan=None,
        settings: Optional[Settings] = None,
        contents_client: Optional[GitHubContentsClient] = None,
    ):
        self.settings = settings or default_settings
        self.app = FastAPI(title=self.settings.app_name, lifespan=lifespan)
        self.app.state.settings = self.settings
        self.app.state.contents_client = contents_client
        self.app.state.limiter = create_limiter(self.settings)
        self.app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
        self.__register_routes()
        self.app.add_middleware(LogMiddleware)

    def get_app(self):
        return self.app

    def __register_routes(self):
        register_routes(self.app, self.app.state.limiter, self.settings)
