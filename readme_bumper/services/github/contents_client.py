"""
GitHub Contents API client

Reads and writes single files through the repository contents endpoints.
One instance is created per application and shared by all requests.
"""

from typing import Any, Dict, Optional

import httpx

from readme_bumper.core.config import Settings
from readme_bumper.exceptions.readme_exceptions import GitHubAPIError
from readme_bumper.models.schemas.contents import (
    ContentError,
    ContentFound,
    ContentLookup,
    ContentNotFound,
)
from readme_bumper.models.schemas.repositories import RepositoryReference
from readme_bumper.utils.logging import get_logger

logger = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class GitHubContentsClient:
    def __init__(
        self,
        token: str = "",
        api_url: str = "https://api.github.com",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubContentsClient":
        return cls(
            token=settings.GITHUB_TOKEN,
            api_url=settings.GITHUB_API_URL,
            timeout=settings.GITHUB_API_TIMEOUT,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": "readme-bumper",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _contents_url(self, ref: RepositoryReference, path: str) -> str:
        return f"{self._api_url}/repos/{ref.owner}/{ref.repo}/contents/{path}"

    async def get_content(self, ref: RepositoryReference, path: str) -> ContentLookup:
        """
        Fetch a file's metadata and base64 content.

        Returns:
            ContentFound with the decoded JSON body on 200, ContentNotFound on
            404, ContentError for any other status or a transport failure.
        """
        url = self._contents_url(ref, path)
        try:
            response = await self._client.get(url, headers=self._headers(), follow_redirects=True)
        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching {path} from {ref.full_name}: {e}")
            return ContentError(detail=str(e))

        if response.status_code == 404:
            return ContentNotFound(path=path)

        if response.status_code != 200:
            detail = self._error_message(response)
            logger.warning(
                f"GitHub API error {response.status_code} fetching {path} from {ref.full_name}: {detail}"
            )
            return ContentError(detail=detail, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            return ContentError(detail=f"Invalid JSON in contents response: {e}", status_code=200)

        return ContentFound(payload=payload)

    async def create_or_update_file_contents(
        self,
        ref: RepositoryReference,
        path: str,
        message: str,
        content: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a file, or replace it when ``sha`` names its current blob.

        ``content`` must already be base64-encoded.

        Raises:
            GitHubAPIError: On a non-2xx response (409/422 on a stale or missing
                sha) or a transport error.
        """
        body: Dict[str, Any] = {"message": message, "content": content}
        if sha is not None:
            body["sha"] = sha

        url = self._contents_url(ref, path)
        try:
            response = await self._client.put(
                url, headers=self._headers(), json=body, follow_redirects=True
            )
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Transport error writing {path} to {ref.full_name}", cause=e) from e

        if not response.is_success:
            raise GitHubAPIError(
                f"GitHub API error {response.status_code} PUT {path} on {ref.full_name}: "
                f"{self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text
        if isinstance(payload, dict):
            return str(payload.get("message", payload))
        return str(payload)
