"""
Commit orchestrator.

Turns a set of pending files into a single commit on a branch:

1. group all files into a directory tree
2. upload the content of every file not uploaded yet, concurrently
3. read the branch head
4. merge the directory tree into the head tree
5. create the commit
6. move the branch to the new commit

The branch update is the only step visible to other readers; a failure at any
earlier step leaves the branch untouched.
"""

import logging
from typing import Iterable, Optional, Union

from github_backend.api.git_data import ObjectStore
from github_backend.concurrency import gather_or_cancel
from github_backend.encoding import Base64Encoder, ContentEncoder
from github_backend.models.types import CommitOptions, CommitResult, PendingFile
from github_backend.tree.directory import build_directory_tree
from github_backend.tree.merger import TreeMerger

logger = logging.getLogger(__name__)


class CommitOrchestrator:
    """Creates one commit per update_files call and advances the branch."""

    def __init__(
        self,
        store: ObjectStore,
        branch: str,
        encoder: Optional[ContentEncoder] = None,
        merger: Optional[TreeMerger] = None,
    ):
        """Initialize the orchestrator.

        Args:
            store: Object store of the target repository
            branch: Branch to commit to
            encoder: Default content encoder (base64 if not provided)
            merger: Tree merger (created over ``store`` if not provided)
        """
        self.store = store
        self.branch = branch
        self.encoder = encoder or Base64Encoder()
        self.merger = merger or TreeMerger(store)

    async def upload_blob(self, file: PendingFile) -> PendingFile:
        """Store a file's content as a blob and record its SHA on the file."""
        encoder = file.encoder or self.encoder
        encoded = encoder.encode(file.content)
        sha = await self.store.create_blob(encoded.content, encoded.encoding)
        file.mark_uploaded(sha)
        logger.debug(f"Uploaded blob {sha} for {file.path}")
        return file

    async def update_files(
        self,
        files: Iterable[PendingFile],
        options: Union[CommitOptions, dict],
    ) -> CommitResult:
        """Commit all files in a single commit and advance the branch.

        Args:
            files: Pending files; already-uploaded files are not uploaded again
            options: Commit options, at least a ``message``

        Returns:
            CommitResult describing the new commit

        Raises:
            ValueError: If no files are given or two paths conflict
            TransportError: If a request fails at the network level
            HttpError: If a request is rejected by the API
            NotFastForward: If the branch moved while the commit was being built
        """
        if not isinstance(options, CommitOptions):
            options = CommitOptions(**options)

        files = list(files)
        if not files:
            raise ValueError("update_files requires at least one file")

        root = build_directory_tree(files)

        to_upload = [file for file in files if not file.uploaded]
        if to_upload:
            await gather_or_cancel(self.upload_blob(file) for file in to_upload)
        logger.info(
            f"Uploaded {len(to_upload)} blob(s), "
            f"{len(files) - len(to_upload)} file(s) were already uploaded"
        )

        branch = await self.store.get_branch(self.branch)
        merged = await self.merger.merge_tree(branch.head_tree_sha, "/", root)

        commit_sha = await self.store.create_commit(
            options.message, merged.sha, [branch.head_commit_sha]
        )
        await self.store.update_ref(self.branch, commit_sha)

        logger.info(
            f"Committed {len(files)} file(s) to branch '{self.branch}': "
            f"{branch.head_commit_sha} -> {commit_sha}"
        )
        return CommitResult(
            commit_sha=commit_sha,
            tree_sha=merged.sha,
            parent_sha=branch.head_commit_sha,
            branch=self.branch,
            files=[file.path for file in files],
        )
