"""
Commit Module

Single-commit, multi-file updates of a branch.
"""

from github_backend.commit.orchestrator import CommitOrchestrator

__all__ = ["CommitOrchestrator"]
