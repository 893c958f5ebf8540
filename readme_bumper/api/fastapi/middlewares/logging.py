import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from readme_bumper.utils.logging import Logger

SKIPPED_PATHS = {"/api/health", "/api/ping"}


class LogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.id = request_id

        LOGGER = Logger("FastAPIApp", {"request_id": request_id})
        request.state.logger = LOGGER

        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        extra = {
            "method": request.method,
            "url": str(request.url),
            "ip": request.client.host if request.client else "unknown",
        }

        LOGGER.info("Incoming Request", extra)

        try:
            response = await call_next(request)
        except Exception as e:
            extra.update({"error": str(e)})
            LOGGER.error("Error in request processing", extra=extra)
            raise

        extra.update({"status_code": response.status_code})
        LOGGER.info("Response", extra=extra)

        return response
