"""
Content lookup results

A fetch of a file from the contents API resolves to exactly one of these
variants. Callers branch on the variant rather than on exceptions.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ContentFound:
    """The file exists; ``payload`` is the decoded JSON body."""
    payload: Any


@dataclass(frozen=True)
class ContentNotFound:
    """The contents API answered 404 for the path."""
    path: str = ""


@dataclass(frozen=True)
class ContentError:
    """Any other failure: non-404 error status or a transport error."""
    detail: str
    status_code: Optional[int] = field(default=None)


ContentLookup = Union[ContentFound, ContentNotFound, ContentError]


@dataclass(frozen=True)
class UpsertResult:
    """HTTP outcome of one README upsert request."""
    status_code: int
    message: str
