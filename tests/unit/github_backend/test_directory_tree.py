"""Tests for grouping pending files into a directory tree."""

import pytest

from github_backend.models.types import DirectoryNode, FileNode, PendingFile
from github_backend.tree.directory import build_directory_tree, split_path


class TestSplitPath:
    """Test split_path function."""

    def test_split_path_ignores_empty_segments(self):
        """Test leading, trailing and doubled slashes are dropped."""
        assert split_path("/a//b/c.txt/") == ["a", "b", "c.txt"]

    def test_split_path_root(self):
        """Test the root path has no segments."""
        assert split_path("/") == []


class TestBuildDirectoryTree:
    """Test build_directory_tree function."""

    def test_groups_files_by_directory(self):
        """Test files are nested under their directories."""
        readme = PendingFile(path="README.md", content="hi")
        page = PendingFile(path="content/pages/about.md", content="about")
        post = PendingFile(path="content/posts/first.md", content="post")

        root = build_directory_tree([readme, page, post])

        assert set(root.children) == {"README.md", "content"}
        assert root.children["README.md"] == FileNode(readme)

        content = root.children["content"]
        assert isinstance(content, DirectoryNode)
        assert set(content.children) == {"pages", "posts"}
        assert content.children["pages"].children["about.md"].file is page
        assert content.children["posts"].children["first.md"].file is post

    def test_includes_already_uploaded_files(self):
        """Test files uploaded in an earlier attempt keep their place."""
        uploaded = PendingFile(path="a/b.txt", sha="abc", uploaded=True)

        root = build_directory_tree([uploaded])

        assert root.children["a"].children["b.txt"].file is uploaded

    def test_last_file_for_a_path_wins(self):
        """Test a later file with the same path replaces the earlier one."""
        first = PendingFile(path="a.txt", content="one")
        second = PendingFile(path="/a.txt", content="two")

        root = build_directory_tree([first, second])

        assert root.children["a.txt"].file is second

    def test_empty_path_rejected(self):
        """Test a path without segments is rejected."""
        with pytest.raises(ValueError, match="Invalid file path"):
            build_directory_tree([PendingFile(path="//")])

    def test_file_then_directory_conflict(self):
        """Test a file path cannot also be used as a directory."""
        with pytest.raises(ValueError, match="conflicts with file"):
            build_directory_tree([PendingFile(path="a"), PendingFile(path="a/b.txt")])

    def test_directory_then_file_conflict(self):
        """Test a directory path cannot also be used as a file."""
        with pytest.raises(ValueError, match="also used as a directory"):
            build_directory_tree([PendingFile(path="a/b.txt"), PendingFile(path="a")])
