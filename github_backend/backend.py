"""
GitHub content backend - facade used by the host application.

Reads go through the contents API; writes build one commit per call through
the Git Data API (blobs, trees, commits, refs).
"""

import logging
from typing import Iterable, List, Optional, Union

from github_backend.api.client import GitHubAPIClient
from github_backend.api.contents import ContentsOperations
from github_backend.api.git_data import GitDataOperations
from github_backend.commit.orchestrator import CommitOrchestrator
from github_backend.encoding import ContentEncoder
from github_backend.models.types import CommitOptions, CommitResult, FileInfo, PendingFile
from github_backend.repository.config import Credentials, RepositoryConfig

logger = logging.getLogger(__name__)


class GitHubBackend:
    """
    Repository backend storing content in a GitHub repository.

    Holds the repository, branch and token explicitly; every operation goes
    through the client owned by this instance.
    """

    def __init__(
        self,
        config: RepositoryConfig,
        credentials: Credentials,
        client: Optional[GitHubAPIClient] = None,
        encoder: Optional[ContentEncoder] = None,
    ):
        """Initialize the backend.

        Args:
            config: Repository and branch to work on
            credentials: GitHub credentials
            client: GitHub API client (created from credentials if not provided)
            encoder: Default content encoder for uploaded files
        """
        self.config = config
        self.client = client or GitHubAPIClient(token=credentials.github_access_token)

        self.contents = ContentsOperations(self.client, config.repo, config.branch)
        self.git_data = GitDataOperations(self.client, config.repo)
        self.committer = CommitOrchestrator(self.git_data, config.branch, encoder=encoder)

        logger.info(f"GitHub backend initialized for {config.repo}@{config.branch}")

    @classmethod
    def from_env(cls) -> "GitHubBackend":
        """Create a backend from environment configuration."""
        return cls(RepositoryConfig.from_env(), Credentials.from_env())

    @property
    def repo(self) -> str:
        return self.config.repo

    @property
    def branch(self) -> str:
        return self.config.branch

    async def read_file(self, path: str) -> bytes:
        """Read the content of a file at the head of the branch."""
        return await self.contents.read_file(path)

    async def list_files(self, path: str = "") -> List[FileInfo]:
        """List the files of a directory at the head of the branch."""
        return await self.contents.list_files(path)

    async def update_files(
        self,
        files: Iterable[PendingFile],
        options: Union[CommitOptions, dict],
    ) -> CommitResult:
        """Commit files to the branch in one commit.

        A commit message must be given in ``options`` as ``message``.
        """
        return await self.committer.update_files(files, options)
