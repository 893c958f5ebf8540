"""
README Bumper Exception Hierarchy

Errors raised while resolving a repository and upserting its README. All of
them are caught at the request boundary and mapped to a plain-text response.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ReadmeBumperError(Exception):
    """Base exception for all README upsert errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class InvalidRepositoryUrlError(ReadmeBumperError, ValueError):
    """Raised when a repository URL is missing, malformed or outside the allowed org."""

    def __init__(self, message: str, repo_url: Optional[Any] = None):
        super().__init__(
            message=message,
            error_code="INVALID_REPOSITORY_URL",
            details={"repo_url": repo_url if isinstance(repo_url, str) else repr(repo_url)},
        )


class MalformedContentError(ReadmeBumperError):
    """Raised when a successful content fetch carries no string ``content`` field."""

    def __init__(self, message: str, path: str, payload_type: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="MALFORMED_CONTENT",
            details={"path": path, "payload_type": payload_type},
        )


class GitHubAPIError(ReadmeBumperError):
    """Raised when a GitHub API call fails (non-2xx status or transport error)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            message=message,
            error_code="GITHUB_API_ERROR",
            details={
                "status_code": status_code,
                "cause": str(cause) if cause else None
            },
        )
        self.status_code = status_code
        self.__cause__ = cause
