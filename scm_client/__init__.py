"""
Source-control client contract and in-memory test double.

The ``scm_client.mock`` subpackage provides MockGitClient, which satisfies
AbstractGitClient without touching the network.
"""

from .config import MockClientConfig
from .errors import (
    ConfigurationError,
    NotFoundError,
    NotSupportedError,
    SCMClientError,
)
from .interface import (
    AbstractGitClient,
    Content,
    PullRequest,
    PullRequestInput,
    Signature,
)
from .logging_config import scoped_logging, setup_logging

__all__ = [
    "AbstractGitClient",
    "ConfigurationError",
    "Content",
    "MockClientConfig",
    "NotFoundError",
    "NotSupportedError",
    "PullRequest",
    "PullRequestInput",
    "SCMClientError",
    "Signature",
    "scoped_logging",
    "setup_logging",
]
