"""
GitHub Services Package

Provides GitHub contents API access and repository URL helpers.
"""

from readme_bumper.services.github.contents_client import GitHubContentsClient
from readme_bumper.services.github.helpers import (
    decode_content,
    encode_content,
    parse_repository_url,
)

__all__ = [
    "GitHubContentsClient",
    "parse_repository_url",
    "encode_content",
    "decode_content",
]
