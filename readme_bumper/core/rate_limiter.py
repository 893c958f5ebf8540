from slowapi import Limiter
from slowapi.util import get_remote_address

from readme_bumper.core.config import Settings


def create_limiter(settings: Settings) -> Limiter:
    """
    Build the per-caller limiter shared by every request of one application.

    Callers are identified by their remote address. Routes opt in with
    ``limiter.limit(settings.rate_limit)``; requests beyond
    RATE_LIMIT_MAX_REQUESTS within RATE_LIMIT_WINDOW_SECONDS get a 429.
    """
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.RATE_LIMIT_ENABLED,
        headers_enabled=False,
    )
