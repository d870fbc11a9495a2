"""Mock objects for testing."""

from .mock_reporter import MockReporter, ReportedFailure

__all__ = [
    "MockReporter",
    "ReportedFailure",
]
