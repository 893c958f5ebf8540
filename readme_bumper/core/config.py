import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "readme-bumper"

    env: str = "development"

    GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", "")
    GITHUB_API_URL: str = os.getenv("GITHUB_API_URL", "https://api.github.com")
    GITHUB_API_TIMEOUT: float = 30.0

    ALLOWED_ORG: str = os.getenv("ALLOWED_ORG", "The-Matrix-Labs")
    README_PATH: str = "README.md"

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    RATE_LIMIT_MAX_REQUESTS: int = 10

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def allowed_repo_prefix(self) -> str:
        return f"https://github.com/{self.ALLOWED_ORG}/"

    @property
    def rate_limit(self) -> str:
        return f"{self.RATE_LIMIT_MAX_REQUESTS} per {self.RATE_LIMIT_WINDOW_SECONDS} seconds"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
