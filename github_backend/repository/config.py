"""
Repository configuration and credentials.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from common.config.config import (
    GITHUB_ACCESS_TOKEN,
    GITHUB_BRANCH,
    GITHUB_REPOSITORY,
)


@dataclass
class RepositoryConfig:
    """Repository and branch the backend reads from and commits to."""

    repo: str
    branch: str = "main"

    def __post_init__(self):
        parts = self.repo.strip("/").split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Repository must be in 'owner/name' form, got '{self.repo}'")
        self.repo = "/".join(parts)
        if not self.branch:
            raise ValueError("Branch name must not be empty")

    @property
    def owner(self) -> str:
        return self.repo.split("/")[0]

    @property
    def name(self) -> str:
        return self.repo.split("/")[1]

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """Create repository config from environment configuration.

        Raises:
            ValueError: If GITHUB_REPOSITORY is not set
        """
        if not GITHUB_REPOSITORY:
            raise ValueError("GITHUB_REPOSITORY is not configured")
        return cls(repo=GITHUB_REPOSITORY, branch=GITHUB_BRANCH)


class Credentials(BaseModel):
    """Credentials used to authenticate against the GitHub API."""

    github_access_token: Optional[str] = Field(
        default=None, description="Personal access token or installation token"
    )

    @classmethod
    def from_env(cls) -> "Credentials":
        return cls(github_access_token=GITHUB_ACCESS_TOKEN)
