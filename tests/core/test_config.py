from readme_bumper.core.config import Settings
from readme_bumper.core.rate_limiter import create_limiter


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("ALLOWED_ORG", "PORT", "RATE_LIMIT_MAX_REQUESTS", "RATE_LIMIT_WINDOW_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.RATE_LIMIT_WINDOW_SECONDS == 60
        assert settings.RATE_LIMIT_MAX_REQUESTS == 10
        assert settings.README_PATH == "README.md"
        assert settings.rate_limit == "10 per 60 seconds"

    def test_env_file_settings(self):
        assert Settings.model_config["env_file"] == ".env"
        assert Settings.model_config["extra"] == "ignore"

    def test_allowed_prefix_follows_org(self):
        settings = Settings(_env_file=None, ALLOWED_ORG="acme")

        assert settings.allowed_repo_prefix == "https://github.com/acme/"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "3")
        monkeypatch.setenv("PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.RATE_LIMIT_MAX_REQUESTS == 3
        assert settings.PORT == 8080


class TestCreateLimiter:

    def test_enabled_flag_is_passed_through(self, test_settings):
        assert create_limiter(test_settings).enabled is True

        test_settings.RATE_LIMIT_ENABLED = False

        assert create_limiter(test_settings).enabled is False
