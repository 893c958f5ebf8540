import base64
import re
from typing import Any
from urllib.parse import urlparse

from readme_bumper.exceptions.readme_exceptions import InvalidRepositoryUrlError
from readme_bumper.models.schemas.repositories import RepositoryReference

GITHUB_HOST = "github.com"

# GitHub repository names: ASCII letters, digits, '.', '-' and '_'
_REPO_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


def parse_repository_url(repo_url: Any, allowed_org: str) -> RepositoryReference:
    """
    Resolve a GitHub repository URL into an owner/repo reference.

    The URL must start with ``https://github.com/<allowed_org>/``. Owner and repo
    are the first two path segments; anything after them (``/tree/main``, a
    trailing slash) is ignored and a ``.git`` suffix on the repo is dropped.

    Raises:
        InvalidRepositoryUrlError: If the URL is not a string, is outside the
            allowed organization, or has no usable repo segment.
    """
    prefix = f"https://{GITHUB_HOST}/{allowed_org}/"
    if not isinstance(repo_url, str) or not repo_url.startswith(prefix):
        raise InvalidRepositoryUrlError("Repository URL is outside the allowed namespace", repo_url)

    parsed = urlparse(repo_url)
    if parsed.hostname != GITHUB_HOST:
        raise InvalidRepositoryUrlError("Repository URL must point at github.com", repo_url)

    segments = parsed.path.strip("/").split("/")
    if len(segments) < 2:
        raise InvalidRepositoryUrlError("Repository URL has no repository segment", repo_url)

    owner, repo = segments[0], segments[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]

    if owner != allowed_org:
        raise InvalidRepositoryUrlError("Repository owner is not the allowed organization", repo_url)
    if not repo or repo in (".", "..") or not _REPO_NAME_PATTERN.match(repo):
        raise InvalidRepositoryUrlError("Repository name is empty or invalid", repo_url)

    return RepositoryReference(owner=owner, repo=repo)


def encode_content(text: str) -> str:
    """Base64-encode UTF-8 text the way the contents API expects it."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_content(encoded: str) -> str:
    """
    Decode a contents API payload to text.

    GitHub wraps the base64 payload at 60 columns; the embedded newlines are
    discarded by the decoder. Invalid UTF-8 sequences become U+FFFD.
    """
    return base64.b64decode(encoded).decode("utf-8", errors="replace")
