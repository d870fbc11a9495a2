"""Test reporters used by MockGitClient to fail the running test."""

import unittest
from abc import ABC, abstractmethod
from typing import NoReturn

import pytest


class TestReporter(ABC):
    """Something that can stop the current test with a failure message."""

    # Keep pytest from collecting this class.
    __test__ = False

    @abstractmethod
    def fail(self, message: str) -> NoReturn:
        """Fail the current test immediately."""
        pass


class PytestReporter(TestReporter):
    """Fails via pytest.fail, which is not caught by ``except Exception``."""

    def fail(self, message: str) -> NoReturn:
        __tracebackhide__ = True
        pytest.fail(message, pytrace=False)


class UnittestReporter(TestReporter):
    """Fails via the owning unittest.TestCase."""

    def __init__(self, test_case: unittest.TestCase):
        self.test_case = test_case

    def fail(self, message: str) -> NoReturn:
        __tracebackhide__ = True
        self.test_case.fail(message)
