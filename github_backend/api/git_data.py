"""
GitHub Git Data operations.

Thin wrappers over the blobs, trees, commits and refs endpoints. Together they
form the object store used by the tree merger and the commit orchestrator.
"""

import logging
from typing import List, Optional, Protocol
from urllib.parse import quote

from common.exception.exceptions import HttpError, NotFastForward
from github_backend.api.client import GitHubAPIClient
from github_backend.models.types import BranchState, TreeEntry, TreeObject

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    """Read/write access to a repository's immutable objects and its branch refs."""

    async def get_tree(self, sha: Optional[str]) -> TreeObject:
        ...

    async def get_branch(self, name: str) -> BranchState:
        ...

    async def create_blob(self, content: str, encoding: str) -> str:
        ...

    async def create_tree(self, entries: List[TreeEntry], base_tree: Optional[str] = None) -> str:
        ...

    async def create_commit(self, message: str, tree_sha: str, parent_shas: List[str]) -> str:
        ...

    async def update_ref(self, branch: str, sha: str) -> None:
        ...


class GitDataOperations:
    """Handles GitHub Git Data API operations for one repository."""

    def __init__(self, client: GitHubAPIClient, repository: str):
        """Initialize git data operations.

        Args:
            client: GitHub API client
            repository: Repository in ``owner/name`` form
        """
        self.client = client
        self.repository = repository

    @property
    def base_path(self) -> str:
        return f"repos/{self.repository}"

    async def get_tree(self, sha: Optional[str]) -> TreeObject:
        """Get a tree object.

        Args:
            sha: Tree SHA, or None for a directory that does not exist yet

        Returns:
            TreeObject with its entries (empty when sha is None)
        """
        if not sha:
            return TreeObject(sha=None, entries=[])

        response = await self.client.get(f"{self.base_path}/git/trees/{sha}")
        tree = TreeObject(
            sha=response.get("sha", sha),
            entries=[TreeEntry.from_api(item) for item in response.get("tree", [])],
            truncated=bool(response.get("truncated", False)),
        )
        if tree.truncated:
            logger.warning(f"Tree {sha} in {self.repository} was truncated by the API")
        return tree

    async def get_branch(self, name: str) -> BranchState:
        """Get the head commit and root tree of a branch.

        Args:
            name: Branch name

        Returns:
            BranchState with head commit SHA and root tree SHA
        """
        response = await self.client.get(f"{self.base_path}/branches/{quote(name, safe='/')}")
        commit = response["commit"]
        return BranchState(
            name=response.get("name", name),
            head_commit_sha=commit["sha"],
            head_tree_sha=commit["commit"]["tree"]["sha"],
        )

    async def create_blob(self, content: str, encoding: str) -> str:
        """Create a blob.

        Args:
            content: Encoded content
            encoding: ``base64`` or ``utf-8``

        Returns:
            SHA of the blob
        """
        response = await self.client.post(
            f"{self.base_path}/git/blobs",
            data={"content": content, "encoding": encoding},
        )
        return response["sha"]

    async def create_tree(self, entries: List[TreeEntry], base_tree: Optional[str] = None) -> str:
        """Create a tree.

        Args:
            entries: Entries of the new tree
            base_tree: Tree the new one is based on, sent as a hint

        Returns:
            SHA of the new tree
        """
        data = {"tree": [entry.to_api() for entry in entries]}
        if base_tree:
            data["base_tree"] = base_tree

        response = await self.client.post(f"{self.base_path}/git/trees", data=data)
        logger.debug(f"Created tree {response['sha']} with {len(entries)} entries")
        return response["sha"]

    async def create_commit(self, message: str, tree_sha: str, parent_shas: List[str]) -> str:
        """Create a commit.

        Returns:
            SHA of the new commit
        """
        response = await self.client.post(
            f"{self.base_path}/git/commits",
            data={"message": message, "tree": tree_sha, "parents": list(parent_shas)},
        )
        logger.info(f"Created commit {response['sha']} in {self.repository}")
        return response["sha"]

    async def update_ref(self, branch: str, sha: str) -> None:
        """Move a branch to a new commit without forcing.

        Raises:
            NotFastForward: If the branch no longer points at an ancestor of ``sha``
            HttpError: For any other failure
        """
        try:
            await self.client.patch(
                f"{self.base_path}/git/refs/heads/{quote(branch, safe='/')}",
                data={"sha": sha, "force": False},
            )
        except HttpError as e:
            if e.status == 422 and "fast forward" in (e.body or "").lower():
                raise NotFastForward(branch, sha, e.status, e.body, e.url) from e
            raise

        logger.info(f"Updated {self.repository} branch '{branch}' to {sha}")
