"""
GitHub API Module

Handles all GitHub REST API interactions including:
- Repository contents (read path)
- Git Data objects: blobs, trees, commits and refs
"""

from github_backend.api.client import GitHubAPIClient
from github_backend.api.contents import ContentsOperations
from github_backend.api.git_data import GitDataOperations, ObjectStore

__all__ = [
    "GitHubAPIClient",
    "ContentsOperations",
    "GitDataOperations",
    "ObjectStore",
]
