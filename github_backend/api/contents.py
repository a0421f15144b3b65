"""
GitHub repository contents operations.

Provides methods to read files and list directory contents at the head of a branch.
"""

import logging
from typing import List
from urllib.parse import quote

from github_backend.api.client import GitHubAPIClient
from github_backend.models.types import FileInfo

logger = logging.getLogger(__name__)


class ContentsOperations:
    """Handles GitHub repository contents operations for one repository and branch."""

    def __init__(self, client: GitHubAPIClient, repository: str, branch: str):
        """Initialize contents operations.

        Args:
            client: GitHub API client
            repository: Repository in ``owner/name`` form
            branch: Branch to read from
        """
        self.client = client
        self.repository = repository
        self.branch = branch

    def _contents_path(self, path: str) -> str:
        return f"repos/{self.repository}/contents/{quote(path.strip('/'), safe='/')}"

    async def read_file(self, path: str) -> bytes:
        """Read the raw content of a file.

        Args:
            path: Path of the file relative to the repository root

        Returns:
            File content as bytes
        """
        return await self.client.request_raw(
            self._contents_path(path), params={"ref": self.branch}
        )

    async def list_files(self, path: str = "") -> List[FileInfo]:
        """List the contents of a directory.

        Args:
            path: Directory path (empty string for root)

        Returns:
            List of FileInfo objects; a single element when ``path`` names a file
        """
        response = await self.client.get(
            self._contents_path(path), params={"ref": self.branch}
        )

        # Response can be a single file or list of files
        if isinstance(response, list):
            return [FileInfo(item) for item in response]
        return [FileInfo(response)]
