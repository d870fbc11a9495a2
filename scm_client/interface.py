"""Source-control client interface definition."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Signature:
    """Identity used to author a commit."""

    name: str
    email: str
    date: Optional[datetime] = None


@dataclass
class Content:
    """File contents read from a repository."""

    path: str
    data: bytes
    sha: str
    blob_id: str = ""


@dataclass
class PullRequestInput:
    """Parameters for opening a pull request."""

    title: str
    source: str
    target: str
    body: str = ""


@dataclass
class PullRequest:
    """A pull request as returned by the backend."""

    number: int
    link: str


class AbstractGitClient(ABC):
    """Abstract interface for a source-control backend client."""

    @abstractmethod
    def get_file(self, repo: str, ref: str, path: str) -> Content:
        """Read a file at the given ref."""
        pass

    @abstractmethod
    def update_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        """Commit new contents for a file on a branch."""
        pass

    @abstractmethod
    def delete_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        """Delete a file on a branch."""
        pass

    @abstractmethod
    def create_pull_request(self, repo: str, inp: PullRequestInput) -> PullRequest:
        """Open a pull request."""
        pass

    @abstractmethod
    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        """Create a branch pointing at sha."""
        pass

    @abstractmethod
    def get_branch_head(self, repo: str, branch: str) -> str:
        """Return the sha at the tip of a branch."""
        pass
