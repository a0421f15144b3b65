"""
Shared types and models for the GitHub content backend.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from common.config.config import DIRECTORY_MODE, FILE_MODE
from github_backend.encoding import ContentEncoder


@dataclass
class PendingFile:
    """A file change waiting to be committed.

    ``sha`` and ``uploaded`` are filled in once the content has been stored
    as a blob.
    """

    path: str
    content: Union[bytes, str] = b""
    sha: Optional[str] = None
    uploaded: bool = False
    encoder: Optional[ContentEncoder] = None

    def mark_uploaded(self, sha: str) -> None:
        self.sha = sha
        self.uploaded = True


@dataclass
class FileNode:
    """Leaf of a directory tree: one pending file."""

    file: PendingFile


@dataclass
class DirectoryNode:
    """Branch of a directory tree, keyed by path segment."""

    children: Dict[str, Union[FileNode, "DirectoryNode"]] = field(default_factory=dict)


@dataclass
class TreeEntry:
    path: str
    mode: str
    type: str
    sha: Optional[str]

    @property
    def is_tree(self) -> bool:
        return self.type == "tree"

    @property
    def is_blob(self) -> bool:
        return self.type == "blob"

    @classmethod
    def blob(cls, path: str, sha: str, mode: str = FILE_MODE) -> "TreeEntry":
        return cls(path=path, mode=mode, type="blob", sha=sha)

    @classmethod
    def tree(cls, path: str, sha: str) -> "TreeEntry":
        return cls(path=path, mode=DIRECTORY_MODE, type="tree", sha=sha)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TreeEntry":
        return cls(
            path=data["path"],
            mode=data["mode"],
            type=data["type"],
            sha=data.get("sha"),
        )

    def to_api(self) -> Dict[str, Any]:
        return {"path": self.path, "mode": self.mode, "type": self.type, "sha": self.sha}


@dataclass
class TreeObject:
    sha: Optional[str]
    entries: List[TreeEntry] = field(default_factory=list)
    truncated: bool = False


@dataclass
class MergedTree:
    """Result of merging pending changes into one directory."""

    path: str
    sha: str
    parent_sha: Optional[str] = None
    mode: str = DIRECTORY_MODE
    type: str = "tree"


@dataclass
class BranchState:
    name: str
    head_commit_sha: str
    head_tree_sha: str


@dataclass
class CommitObject:
    sha: str
    message: str
    tree_sha: str
    parent_shas: List[str] = field(default_factory=list)


@dataclass
class CommitResult:
    """Outcome of a successful update_files call."""

    commit_sha: str
    tree_sha: str
    parent_sha: str
    branch: str
    files: List[str] = field(default_factory=list)


class CommitOptions(BaseModel):
    """Options accepted by update_files."""

    message: str = Field(..., min_length=1, description="Commit message")


class FileInfo:
    """Information about a file or directory in a repository listing."""

    def __init__(self, data: Dict[str, Any]):
        self.name: str = data.get("name", "")
        self.path: str = data.get("path", "")
        self.type: str = data.get("type", "")  # "file", "dir", "symlink" or "submodule"
        self.size: int = data.get("size", 0)
        self.sha: str = data.get("sha", "")
        self.url: str = data.get("url", "")
        self.download_url: Optional[str] = data.get("download_url")

    @property
    def is_file(self) -> bool:
        """Check if this is a file."""
        return self.type == "file"

    @property
    def is_directory(self) -> bool:
        """Check if this is a directory."""
        return self.type == "dir"

    def __repr__(self) -> str:
        return f"FileInfo(name='{self.name}', type='{self.type}', path='{self.path}')"
