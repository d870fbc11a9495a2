"""In-memory test doubles for the source-control client."""

from .mock_client import (
    BranchKey,
    ErrorInjection,
    FileKey,
    HeadKey,
    MockGitClient,
    content_sha,
)
from .reporter import PytestReporter, TestReporter, UnittestReporter

__all__ = [
    "BranchKey",
    "ErrorInjection",
    "FileKey",
    "HeadKey",
    "MockGitClient",
    "PytestReporter",
    "TestReporter",
    "UnittestReporter",
    "content_sha",
]
