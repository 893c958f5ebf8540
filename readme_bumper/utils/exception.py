import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from readme_bumper.models.schemas.responses import ErrorResponse
from readme_bumper.utils.logging import Logger


class ExceptionHandler:
    def __init__(self, logger: Logger):
        self.logger = logger

    def handle_exception(self, e: Exception, logger: Logger = None) -> JSONResponse:
        logger = logger or self.logger
        if isinstance(e, ValueError):
            logger.error(f"Value error: {str(e)}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(errorMessage=f"validation error: {e}").model_dump(),
            )

        tb_str = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        logger.error(
            f"Internal error - Type: {type(e).__name__}, Message: {str(e)}\nTraceback:\n{tb_str}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(errorMessage="an internal error just occurred").model_dump(),
        )


def add_exception_handlers(app: FastAPI, logger: Logger) -> None:
    """Turn exceptions escaping a route into an ErrorResponse, logged with the request id."""
    handler = ExceptionHandler(logger)

    async def _handle(request: Request, exc: Exception) -> JSONResponse:
        request_logger = getattr(request.state, "logger", None)
        return handler.handle_exception(exc, request_logger)

    app.add_exception_handler(Exception, _handle)
