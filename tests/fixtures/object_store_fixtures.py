"""
Test fixtures for tree and commit tests.

Provides an in-memory, content-addressed object store implementing the same
interface as GitDataOperations, plus helpers to seed and inspect it.
"""

import base64
import hashlib
import json
from typing import Callable, Dict, List, Optional, Set, Tuple

from common.exception.exceptions import HttpError, NotFastForward
from github_backend.models.types import (
    BranchState,
    CommitObject,
    PendingFile,
    TreeEntry,
    TreeObject,
)


def git_blob_sha(data: bytes) -> str:
    """SHA-1 of a blob the way git computes it."""
    header = f"blob {len(data)}\0".encode()
    return hashlib.sha1(header + data).hexdigest()


class InMemoryObjectStore:
    """Object store keeping blobs, trees, commits and refs in dictionaries.

    ``fail_on`` names methods that raise an HTTP 500 when called.
    ``before_update_ref`` runs right before a ref update, to simulate another writer.
    """

    def __init__(self, branch: str = "main"):
        self.blobs: Dict[str, bytes] = {}
        self.trees: Dict[str, List[TreeEntry]] = {}
        self.commits: Dict[str, CommitObject] = {}
        self.refs: Dict[str, str] = {}
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.fail_on: Set[str] = set()
        self.before_update_ref: Optional[Callable[[], None]] = None

        empty_tree = self._store_tree([])
        self.refs[branch] = self._store_commit("Initial commit", empty_tree, [])

    def _check_failure(self, method: str) -> None:
        if method in self.fail_on:
            raise HttpError(500, f"{method} failed")

    def _store_tree(self, entries: List[TreeEntry]) -> str:
        entries = sorted(entries, key=lambda entry: entry.path)
        payload = json.dumps([entry.to_api() for entry in entries]).encode()
        sha = hashlib.sha1(b"tree " + payload).hexdigest()
        self.trees[sha] = entries
        return sha

    def _store_commit(self, message: str, tree_sha: str, parent_shas: List[str]) -> str:
        payload = json.dumps(
            {"message": message, "tree": tree_sha, "parents": parent_shas, "n": len(self.commits)}
        ).encode()
        sha = hashlib.sha1(b"commit " + payload).hexdigest()
        self.commits[sha] = CommitObject(
            sha=sha, message=message, tree_sha=tree_sha, parent_shas=list(parent_shas)
        )
        return sha

    def _is_ancestor(self, ancestor: str, sha: str) -> bool:
        stack = [sha]
        while stack:
            current = stack.pop()
            if current == ancestor:
                return True
            stack.extend(self.commits[current].parent_shas)
        return False

    async def get_tree(self, sha: Optional[str]) -> TreeObject:
        self.calls.append(("get_tree", sha))
        self._check_failure("get_tree")
        if not sha:
            return TreeObject(sha=None, entries=[])
        if sha not in self.trees:
            raise HttpError(404, "Not Found")
        return TreeObject(sha=sha, entries=list(self.trees[sha]))

    async def get_branch(self, name: str) -> BranchState:
        self.calls.append(("get_branch", name))
        self._check_failure("get_branch")
        if name not in self.refs:
            raise HttpError(404, "Branch not found")
        head = self.refs[name]
        return BranchState(name=name, head_commit_sha=head, head_tree_sha=self.commits[head].tree_sha)

    async def create_blob(self, content: str, encoding: str) -> str:
        self.calls.append(("create_blob", None))
        self._check_failure("create_blob")
        data = base64.b64decode(content) if encoding == "base64" else content.encode("utf-8")
        sha = git_blob_sha(data)
        self.blobs[sha] = data
        return sha

    async def create_tree(self, entries: List[TreeEntry], base_tree: Optional[str] = None) -> str:
        self.calls.append(("create_tree", base_tree))
        self._check_failure("create_tree")
        paths = [entry.path for entry in entries]
        if len(paths) != len(set(paths)):
            raise HttpError(422, "Duplicate tree entry paths")
        for entry in entries:
            known = self.trees if entry.is_tree else self.blobs
            if entry.sha not in known:
                raise HttpError(422, f"Object {entry.sha} does not exist")
        return self._store_tree(entries)

    async def create_commit(self, message: str, tree_sha: str, parent_shas: List[str]) -> str:
        self.calls.append(("create_commit", tree_sha))
        self._check_failure("create_commit")
        if tree_sha not in self.trees:
            raise HttpError(422, "Tree does not exist")
        return self._store_commit(message, tree_sha, parent_shas)

    async def update_ref(self, branch: str, sha: str) -> None:
        self.calls.append(("update_ref", sha))
        if self.before_update_ref:
            self.before_update_ref()
        self._check_failure("update_ref")
        if not self._is_ancestor(self.refs[branch], sha):
            raise NotFastForward(branch, sha, 422, "Update is not a fast forward")
        self.refs[branch] = sha

    # Helpers for tests

    def seed(self, files: Dict[str, bytes], branch: str = "main", modes: Optional[Dict[str, str]] = None) -> str:
        """Commit ``files`` directly on ``branch`` and return the commit SHA."""
        modes = modes or {}
        nested: Dict = {}
        for path, data in files.items():
            parts = path.split("/")
            node = nested
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            node[parts[-1]] = (path, data)

        def build(node: Dict) -> str:
            entries = []
            for name, value in node.items():
                if isinstance(value, dict):
                    entries.append(TreeEntry.tree(name, build(value)))
                else:
                    path, data = value
                    sha = git_blob_sha(data)
                    self.blobs[sha] = data
                    entries.append(TreeEntry.blob(name, sha, mode=modes.get(path, "100644")))
            return self._store_tree(entries)

        head = self.refs[branch]
        commit = self._store_commit("Seed", build(nested), [head])
        self.refs[branch] = commit
        return commit

    def head_tree(self, branch: str = "main") -> str:
        return self.commits[self.refs[branch]].tree_sha

    def flatten(self, tree_sha: str, prefix: str = "") -> Dict[str, TreeEntry]:
        """Map every path below ``tree_sha`` (trees included) to its entry."""
        result = {}
        for entry in self.trees[tree_sha]:
            path = f"{prefix}{entry.path}"
            result[path] = entry
            if entry.is_tree:
                result.update(self.flatten(entry.sha, f"{path}/"))
        return result

    def read(self, path: str, branch: str = "main") -> bytes:
        return self.blobs[self.flatten(self.head_tree(branch))[path].sha]


def create_uploaded_file(store: InMemoryObjectStore, path: str, content: bytes) -> PendingFile:
    """Create a PendingFile whose blob already exists in ``store``."""
    sha = git_blob_sha(content)
    store.blobs[sha] = content
    return PendingFile(path=path, content=content, sha=sha, uploaded=True)
