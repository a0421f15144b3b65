"""Grouping of pending files into a nested directory structure."""

from typing import Iterable, List

from github_backend.models.types import DirectoryNode, FileNode, PendingFile


def split_path(path: str) -> List[str]:
    """Split a slash-separated path into its non-empty segments."""
    return [part for part in path.split("/") if part]


def build_directory_tree(files: Iterable[PendingFile]) -> DirectoryNode:
    """Build a directory tree from pending files, keyed by path segment.

    Args:
        files: Pending files with paths relative to the repository root

    Returns:
        Root DirectoryNode

    Raises:
        ValueError: If a path is empty or a path is used both as a file and a directory
    """
    root = DirectoryNode()

    for file in files:
        parts = split_path(file.path)
        if not parts:
            raise ValueError(f"Invalid file path: '{file.path}'")

        filename = parts.pop()
        node = root
        for part in parts:
            child = node.children.get(part)
            if child is None:
                child = node.children[part] = DirectoryNode()
            elif isinstance(child, FileNode):
                raise ValueError(f"Path '{file.path}' conflicts with file '{child.file.path}'")
            node = child

        if isinstance(node.children.get(filename), DirectoryNode):
            raise ValueError(f"Path '{file.path}' is also used as a directory")
        # later entries for the same path win
        node.children[filename] = FileNode(file)

    return root
