"""
Tree Module

Directory grouping of pending files and the recursive tree merger.
"""

from github_backend.tree.directory import build_directory_tree, split_path
from github_backend.tree.merger import TreeMerger

__all__ = ["TreeMerger", "build_directory_tree", "split_path"]
