"""
In-memory stand-ins for the GitHub contents API used by the tests.
"""

import base64
import hashlib
from typing import Any, Dict, List, Optional, Tuple

from readme_bumper.exceptions.readme_exceptions import GitHubAPIError
from readme_bumper.models.schemas.contents import (
    ContentFound,
    ContentLookup,
    ContentNotFound,
)
from readme_bumper.models.schemas.repositories import RepositoryReference


ALLOWED_ORG = "The-Matrix-Labs"


class InMemoryContentsClient:
    """
    Behaves like the contents API for a set of files keyed by owner/repo/path.

    Writes require the current blob sha for existing files and must omit it for
    new ones, mirroring GitHub's optimistic concurrency.
    """

    def __init__(self, files: Optional[Dict[Tuple[str, str, str], str]] = None):
        self.files: Dict[Tuple[str, str, str], Dict[str, str]] = {}
        self.get_calls: List[Tuple[str, str, str]] = []
        self.write_calls: List[Dict[str, Any]] = []
        for key, text in (files or {}).items():
            self._store(key, text)

    @staticmethod
    def _sha(text: str) -> str:
        return hashlib.sha1(text.encode("utf-8")).hexdigest()

    def _store(self, key: Tuple[str, str, str], text: str) -> None:
        self.files[key] = {"text": text, "sha": self._sha(text)}

    def text(self, owner: str, repo: str, path: str = "README.md") -> Optional[str]:
        entry = self.files.get((owner, repo, path))
        return entry["text"] if entry else None

    async def get_content(self, ref: RepositoryReference, path: str) -> ContentLookup:
        key = (ref.owner, ref.repo, path)
        self.get_calls.append(key)
        entry = self.files.get(key)
        if entry is None:
            return ContentNotFound(path=path)
        encoded = base64.encodebytes(entry["text"].encode("utf-8")).decode("ascii")
        return ContentFound(payload={
            "type": "file",
            "path": path,
            "encoding": "base64",
            "content": encoded,
            "sha": entry["sha"],
        })

    async def create_or_update_file_contents(
        self,
        ref: RepositoryReference,
        path: str,
        message: str,
        content: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        key = (ref.owner, ref.repo, path)
        self.write_calls.append({"key": key, "message": message, "content": content, "sha": sha})
        entry = self.files.get(key)
        if entry is None and sha is not None:
            raise GitHubAPIError("sha given for a file that does not exist", status_code=422)
        if entry is not None and sha != entry["sha"]:
            raise GitHubAPIError(f"{path} does not match {sha}", status_code=409)
        self._store(key, base64.b64decode(content).decode("utf-8"))
        return {"content": {"path": path, "sha": self.files[key]["sha"]}}

    async def aclose(self) -> None:
        pass


def unb64(encoded: str) -> str:
    return base64.b64decode(encoded).decode("utf-8")


