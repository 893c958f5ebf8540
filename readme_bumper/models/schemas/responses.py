from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response model for unhandled 400 and 5xx responses"""

    success: bool = False
    errorMessage: str
