"""
Tree merger.

Merges a nested set of pending files into an existing remote tree, bottom-up,
creating one new tree object per touched directory. Untouched entries are
carried over as-is.
"""

import logging
import posixpath
from typing import List, Optional, Set, Tuple

from common.exception.exceptions import UploadIncomplete
from github_backend.api.git_data import ObjectStore
from github_backend.concurrency import gather_or_cancel
from github_backend.models.types import (
    DirectoryNode,
    FileNode,
    MergedTree,
    TreeEntry,
)

logger = logging.getLogger(__name__)


class TreeMerger:
    """Builds new tree objects from a base tree and pending changes."""

    def __init__(self, store: ObjectStore):
        self.store = store

    async def merge_tree(
        self,
        base_tree_sha: Optional[str],
        current_path: str,
        pending: DirectoryNode,
    ) -> MergedTree:
        """Merge pending changes into the tree at ``base_tree_sha``.

        Args:
            base_tree_sha: SHA of the existing tree, or None for a new directory
            current_path: Path of the directory being merged ("/" for the root)
            pending: Pending files and subdirectories of this directory

        Returns:
            MergedTree with the SHA of the newly created tree

        Raises:
            UploadIncomplete: If a pending file has no blob SHA
        """
        tree = await self.store.get_tree(base_tree_sha)
        consumed: Set[str] = set()
        entries: List[Optional[TreeEntry]] = []
        subtrees: List[Tuple[int, str, Optional[str], DirectoryNode]] = []

        for entry in tree.entries:
            node = pending.children.get(entry.path)
            if node is None:
                entries.append(entry)
                continue

            consumed.add(entry.path)
            if isinstance(node, FileNode):
                entries.append(self._file_entry(entry.path, node, existing=entry))
            else:
                # a blob cannot be read as a tree, so a directory replacing it starts empty
                base = entry.sha if entry.is_tree else None
                subtrees.append((len(entries), entry.path, base, node))
                entries.append(None)

        for name, node in pending.children.items():
            if name in consumed:
                continue
            if isinstance(node, FileNode):
                entries.append(self._file_entry(name, node))
            else:
                subtrees.append((len(entries), name, None, node))
                entries.append(None)

        if subtrees:
            merged = await gather_or_cancel(
                self.merge_tree(base, posixpath.join(current_path, name), node)
                for _, name, base, node in subtrees
            )
            for (index, name, _, _), subtree in zip(subtrees, merged):
                entries[index] = TreeEntry.tree(name, subtree.sha)

        sha = await self.store.create_tree(entries, base_tree=base_tree_sha)
        logger.debug(
            f"Merged {len(pending.children)} pending change(s) into '{current_path}' "
            f"(base {base_tree_sha}, new {sha})"
        )
        return MergedTree(path=current_path, sha=sha, parent_sha=base_tree_sha)

    @staticmethod
    def _file_entry(name: str, node: FileNode, existing: Optional[TreeEntry] = None) -> TreeEntry:
        file = node.file
        if not file.uploaded or not file.sha:
            raise UploadIncomplete(file.path)

        if existing is not None and existing.is_blob:
            # keep executable and symlink modes
            return TreeEntry(path=name, mode=existing.mode, type=existing.type, sha=file.sha)
        return TreeEntry.blob(name, file.sha)
