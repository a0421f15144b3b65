"""Exceptions raised by the GitHub content backend."""

from typing import Optional


class GitHubBackendError(Exception):
    """Base class for backend errors."""

    pass


class TransportError(GitHubBackendError):
    """Raised when a request fails at the network level."""

    pass


class HttpError(GitHubBackendError):
    """Raised when the GitHub API answers with a non-2xx status."""

    def __init__(self, status: int, body: str = "", url: Optional[str] = None):
        self.status = status
        self.body = body
        self.url = url
        target = f" for {url}" if url else ""
        super().__init__(f"GitHub API request failed{target} (status {status}): {body}")


class NotFastForward(HttpError):
    """Raised when a branch update is rejected because the branch moved."""

    def __init__(
        self,
        branch: str,
        sha: str,
        status: int = 422,
        body: str = "",
        url: Optional[str] = None,
    ):
        super().__init__(status, body, url)
        self.branch = branch
        self.sha = sha
        self.args = (f"Update of branch '{branch}' to {sha} is not a fast forward",)


class UploadIncomplete(GitHubBackendError):
    """Raised when a file without a blob sha is about to be referenced by a tree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File '{path}' has not been uploaded")
