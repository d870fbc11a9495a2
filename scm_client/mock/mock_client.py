"""
In-memory git client for tests.

MockGitClient implements AbstractGitClient without any network access.
Tests seed the state the backend is assumed to hold (files, branch heads),
run the code under test, then use the assert_*/refute_* helpers to check
which mutating calls were made. Seeded state and recorded writes are kept
in separate tables, so reads never observe writes made during the test.

    client = MockGitClient()
    client.add_file_contents("org/repo", "README.md", "main", b"hello")
    run_code_under_test(client)
    client.assert_branch_created("org/repo", "feature", "abc123")
"""

import hashlib
import logging
from dataclasses import dataclass, fields
from typing import NamedTuple, Optional

from ..config import MockClientConfig
from ..errors import ConfigurationError, NotFoundError, NotSupportedError
from ..interface import (
    AbstractGitClient,
    Content,
    PullRequest,
    PullRequestInput,
    Signature,
)
from .reporter import PytestReporter, TestReporter

logger = logging.getLogger(__name__)


class FileKey(NamedTuple):
    repo: str
    path: str
    ref: str


class BranchKey(NamedTuple):
    repo: str
    branch: str
    sha: str


class HeadKey(NamedTuple):
    repo: str
    branch: str


@dataclass
class ErrorInjection:
    """Exceptions to raise instead of running an operation.

    A field left as None means the operation behaves normally.
    """

    get_file: Optional[Exception] = None
    update_file: Optional[Exception] = None
    delete_file: Optional[Exception] = None
    create_branch: Optional[Exception] = None
    create_pull_request: Optional[Exception] = None
    get_branch_head: Optional[Exception] = None

    @classmethod
    def operations(cls) -> list[str]:
        return [f.name for f in fields(cls)]


def content_sha(data: bytes) -> str:
    """Return the lowercase hex SHA-1 digest of data."""
    return hashlib.sha1(data).hexdigest()


class MockGitClient(AbstractGitClient):
    """AbstractGitClient backed by in-memory tables."""

    def __init__(
        self,
        reporter: Optional[TestReporter] = None,
        errors: Optional[ErrorInjection] = None,
        config: Optional[MockClientConfig] = None,
    ):
        self.reporter = reporter or PytestReporter()
        self.errors = errors or ErrorInjection()
        self.config = config or MockClientConfig()
        self.config.validate()

        self._files: dict[FileKey, bytes] = {}
        self._branch_heads: dict[HeadKey, str] = {}
        self._updated_files: dict[FileKey, bytes] = {}
        self._created_branches: set[BranchKey] = set()
        self._created_pull_requests: dict[str, list[PullRequestInput]] = {}

    def set_error(self, operation: str, error: Optional[Exception]) -> None:
        """Make operation raise error; pass None to restore normal behaviour."""
        if operation not in ErrorInjection.operations():
            raise ConfigurationError(
                f"Unknown operation for error injection: {operation}",
                {"operation": operation, "known": ErrorInjection.operations()},
            )
        setattr(self.errors, operation, error)

    def _raise_injected(self, operation: str) -> None:
        error = getattr(self.errors, operation)
        if error is not None:
            logger.debug(f"Injected failure for {operation}: {error!r}")
            raise error

    # AbstractGitClient

    def get_file(self, repo: str, ref: str, path: str) -> Content:
        self._raise_injected("get_file")
        key = FileKey(repo, path, ref)
        if key not in self._files:
            raise NotFoundError(
                f"File {path} not found in {repo} at {ref}",
                {"repo": repo, "path": path, "ref": ref},
            )
        data = self._files[key]
        return Content(path=path, data=data, sha=content_sha(data))

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
        self._raise_injected("update_file")
        # previous_sha is accepted without checking it against current content.
        self._updated_files[FileKey(repo, path, branch)] = content
        logger.debug(f"Updated {path} in {repo} on {branch}: {message}")

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
        self._raise_injected("delete_file")
        raise NotSupportedError(
            "delete_file is not supported by MockGitClient",
            {"repo": repo, "branch": branch, "path": path},
        )

    def create_pull_request(self, repo: str, inp: PullRequestInput) -> PullRequest:
        self._raise_injected("create_pull_request")
        existing = self._created_pull_requests.setdefault(repo, [])
        existing.append(inp)
        # Not safe under concurrent calls for the same repo.
        number = len(existing)
        logger.debug(f"Created pull request #{number} in {repo}: {inp.title}")
        return PullRequest(number=number, link=self.config.link_for(number))

    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        self._raise_injected("create_branch")
        self._created_branches.add(BranchKey(repo, branch, sha))
        logger.debug(f"Created branch {branch} in {repo} from {sha}")

    def get_branch_head(self, repo: str, branch: str) -> str:
        self._raise_injected("get_branch_head")
        key = HeadKey(repo, branch)
        if key not in self._branch_heads:
            raise NotFoundError(
                f"Branch {branch} not found in {repo}",
                {"repo": repo, "branch": branch},
            )
        return self._branch_heads[key]

    # Fixture setup

    def add_file_contents(self, repo: str, path: str, ref: str, body: bytes) -> None:
        """Seed the contents get_file returns for (repo, path, ref)."""
        self._files[FileKey(repo, path, ref)] = body

    def add_branch_head(self, repo: str, branch: str, sha: str) -> None:
        """Seed the sha get_branch_head returns for (repo, branch)."""
        self._branch_heads[HeadKey(repo, branch)] = sha

    def get_updated_contents(self, repo: str, path: str, ref: str) -> Optional[bytes]:
        """Return the bytes captured by update_file, or None if never written."""
        return self._updated_files.get(FileKey(repo, path, ref))

    # Assertions

    def assert_branch_created(self, repo: str, branch: str, sha: str) -> None:
        """Fail if no matching branch was created with create_branch."""
        __tracebackhide__ = True
        if BranchKey(repo, branch, sha) not in self._created_branches:
            self.reporter.fail(
                f"branch {branch} not created in repo {repo} from sha {sha}"
            )

    def refute_branch_created(self, repo: str, branch: str, sha: str) -> None:
        """Fail if a matching branch was created with create_branch."""
        __tracebackhide__ = True
        if BranchKey(repo, branch, sha) in self._created_branches:
            self.reporter.fail(
                f"branch {branch} was created in repo {repo} from sha {sha}"
            )

    def assert_pull_request_created(self, repo: str, inp: PullRequestInput) -> None:
        """Fail if no pull request equal to inp was created in repo."""
        __tracebackhide__ = True
        if inp not in self._created_pull_requests.get(repo, []):
            self.reporter.fail(f"pull request not created in repo {repo}: {inp!r}")

    def refute_pull_request_created(self, repo: str, inp: PullRequestInput) -> None:
        """Fail if a pull request equal to inp was created in repo."""
        __tracebackhide__ = True
        if inp in self._created_pull_requests.get(repo, []):
            self.reporter.fail(f"pull request was created in repo {repo}: {inp!r}")

    def assert_no_branches_created(self) -> None:
        """Fail if any branch was created in any repository."""
        __tracebackhide__ = True
        count = len(self._created_branches)
        if count > 0:
            self.reporter.fail(f"expected no branches to be created: got {count}")

    def assert_no_pull_requests_created(self) -> None:
        """Fail if any pull request was created in any repository."""
        __tracebackhide__ = True
        count = sum(len(prs) for prs in self._created_pull_requests.values())
        if count > 0:
            self.reporter.fail(
                f"expected no pull requests to be created: got {count}"
            )

    def assert_no_interactions(self) -> None:
        """Fail if any write call was recorded."""
        __tracebackhide__ = True
        if self._updated_files:
            self.reporter.fail(f"files were updated {self._updated_files!r}")
        if self._created_branches:
            self.reporter.fail(f"branches created {self._created_branches!r}")
        if self._created_pull_requests:
            self.reporter.fail(
                f"pull requests created {self._created_pull_requests!r}"
            )
