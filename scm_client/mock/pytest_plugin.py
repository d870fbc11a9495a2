"""pytest plugin providing a MockGitClient fixture.

Registered through the ``pytest11`` entry point, so installing scm_client
makes ``mock_git_client`` available to every test. Set the
``scm_mock_config`` ini option to a YAML file to change the defaults.
"""

from pathlib import Path

import pytest

from ..config import MockClientConfig
from ..logging_config import scoped_logging
from .mock_client import MockGitClient
from .reporter import PytestReporter


def pytest_addoption(parser):
    """Register ini options for the mock git client."""
    parser.addini(
        "scm_mock_config",
        "Path to a YAML config file for the mock_git_client fixture",
        default="",
    )


@pytest.fixture
def mock_git_client_config(pytestconfig) -> MockClientConfig:
    """Config for mock_git_client, loaded from the scm_mock_config ini option."""
    config_path = pytestconfig.getini("scm_mock_config")
    if not config_path:
        return MockClientConfig()
    return MockClientConfig.from_yaml(Path(pytestconfig.rootpath) / config_path)


@pytest.fixture
def mock_git_client(mock_git_client_config):
    """Fresh in-memory git client for the running test.

    Logging settings from the config last until the test tears down.
    """
    with scoped_logging(mock_git_client_config):
        yield MockGitClient(reporter=PytestReporter(), config=mock_git_client_config)
