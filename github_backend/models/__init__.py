"""
Models Module

Shared types, dataclasses and DTOs for the content backend.
"""

from github_backend.models.types import (
    BranchState,
    CommitObject,
    CommitOptions,
    CommitResult,
    DirectoryNode,
    FileInfo,
    FileNode,
    MergedTree,
    PendingFile,
    TreeEntry,
    TreeObject,
)

__all__ = [
    "BranchState",
    "CommitObject",
    "CommitOptions",
    "CommitResult",
    "DirectoryNode",
    "FileInfo",
    "FileNode",
    "MergedTree",
    "PendingFile",
    "TreeEntry",
    "TreeObject",
]
