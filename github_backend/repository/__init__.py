"""
Repository Module

Repository configuration and credentials.
"""

from github_backend.repository.config import Credentials, RepositoryConfig

__all__ = ["Credentials", "RepositoryConfig"]
