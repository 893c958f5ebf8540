from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RepositoryReference(BaseModel):
    """Owner/repo pair resolved from a repository URL."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner (organization)")
    repo: str = Field(..., min_length=1, description="Repository name")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class ReadmeContent(BaseModel):
    """Decoded README text and the sha needed to overwrite it."""

    text: str
    content_hash: Optional[str] = Field(
        None,
        description="Blob sha of the existing file; None when the file does not exist yet",
    )
