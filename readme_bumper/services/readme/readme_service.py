from typing import Any, Optional

from readme_bumper.exceptions.readme_exceptions import (
    GitHubAPIError,
    InvalidRepositoryUrlError,
    MalformedContentError,
)
from readme_bumper.models.schemas.contents import (
    ContentError,
    ContentFound,
    ContentNotFound,
    UpsertResult,
)
from readme_bumper.models.schemas.repositories import ReadmeContent, RepositoryReference
from readme_bumper.services.github.contents_client import GitHubContentsClient
from readme_bumper.services.github.helpers import (
    decode_content,
    encode_content,
    parse_repository_url,
)
from readme_bumper.utils.logging import Logger

README_PATH = "README.md"
UPDATE_MESSAGE = "Update README.md"
CREATE_MESSAGE = "Create README.md"

INVALID_URL = UpsertResult(status_code=400, message="Invalid repository URL.")
UPDATED = UpsertResult(status_code=200, message="README updated successfully.")
CREATED = UpsertResult(status_code=200, message="README created successfully.")
API_FAILURE = UpsertResult(status_code=500, message="Error accessing GitHub API.")


class ReadmeUpsertService:
    """
    Appends one space to a repository's README, creating the file when absent.

    Every call grows the README by one character; repeated trailing spaces are
    kept as-is.
    """

    def __init__(
        self,
        contents_client: GitHubContentsClient,
        allowed_org: str,
        readme_path: str = README_PATH,
        logger: Optional[Logger] = None,
    ):
        self.contents_client = contents_client
        self.allowed_org = allowed_org
        self.readme_path = readme_path
        self.logger = logger or Logger(__name__)

    async def handle(self, repo_url: Any) -> UpsertResult:
        try:
            ref = parse_repository_url(repo_url, self.allowed_org)
        except InvalidRepositoryUrlError as e:
            self.logger.info(f"Rejected repository URL: {e}")
            return INVALID_URL

        try:
            return await self._upsert(ref)
        except (GitHubAPIError, MalformedContentError) as e:
            self.logger.error(
                f"README upsert failed for {ref.full_name}: {e}",
                extra={"error_code": e.error_code, "details": e.details},
            )
            return API_FAILURE
        except Exception as e:
            self.logger.error(f"Unexpected error upserting README for {ref.full_name}: {type(e).__name__}: {e}")
            return API_FAILURE

    async def _upsert(self, ref: RepositoryReference) -> UpsertResult:
        lookup = await self.contents_client.get_content(ref, self.readme_path)

        if isinstance(lookup, ContentFound):
            readme = self._read_payload(lookup.payload)
            await self.contents_client.create_or_update_file_contents(
                ref,
                self.readme_path,
                message=UPDATE_MESSAGE,
                content=encode_content(readme.text + " "),
                sha=readme.content_hash,
            )
            self.logger.info(f"Updated {self.readme_path} in {ref.full_name}")
            return UPDATED

        if isinstance(lookup, ContentNotFound):
            await self.contents_client.create_or_update_file_contents(
                ref,
                self.readme_path,
                message=CREATE_MESSAGE,
                content=encode_content(" "),
            )
            self.logger.info(f"Created {self.readme_path} in {ref.full_name}")
            return CREATED

        if isinstance(lookup, ContentError):
            raise GitHubAPIError(
                f"Failed to fetch {self.readme_path} from {ref.full_name}: {lookup.detail}",
                status_code=lookup.status_code,
            )

        raise GitHubAPIError(f"Unexpected content lookup result: {lookup!r}")

    def _read_payload(self, payload: Any) -> ReadmeContent:
        # A directory at the path comes back as a JSON list
        content = payload.get("content") if isinstance(payload, dict) else None
        if not isinstance(content, str):
            raise MalformedContentError(
                f"{self.readme_path} response has no string content",
                path=self.readme_path,
                payload_type=type(payload).__name__,
            )

        try:
            text = decode_content(content)
        except ValueError as e:
            raise MalformedContentError(
                f"{self.readme_path} content is not valid base64: {e}",
                path=self.readme_path,
                payload_type="str",
            ) from e

        return ReadmeContent(text=text, content_hash=payload.get("sha"))
