"""
GitHub content backend.

Persists content changes into a GitHub repository through the Git Data API,
one commit per update.
"""

from github_backend.backend import GitHubBackend
from github_backend.models.types import CommitOptions, CommitResult, PendingFile
from github_backend.repository.config import Credentials, RepositoryConfig

__all__ = [
    "GitHubBackend",
    "CommitOptions",
    "CommitResult",
    "Credentials",
    "PendingFile",
    "RepositoryConfig",
]
