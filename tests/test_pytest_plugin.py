"""Tests for the mock_git_client pytest fixture."""

import logging

from scm_client.config import MockClientConfig
from scm_client.mock import MockGitClient, PytestReporter

LOGGING_AFTER_FIXTURE = """
import logging

from scm_client.mock import MockGitClient


def test_uses_fixture(mock_git_client):
    mock_git_client.create_branch("r", "feature", "abc123")


def test_debug_logs_still_captured(caplog):
    caplog.set_level(logging.DEBUG)

    MockGitClient().create_branch("r", "feature", "abc123")

    assert "Created branch" in caplog.text
"""


def test_fixture_provides_fresh_client(mock_git_client):
    """Test the fixture yields an untouched client."""
    assert isinstance(mock_git_client, MockGitClient)
    assert isinstance(mock_git_client.reporter, PytestReporter)
    mock_git_client.assert_no_interactions()


def test_fixture_default_config(mock_git_client_config):
    """Test no ini option means default config."""
    assert mock_git_client_config == MockClientConfig()


def test_fixture_is_not_shared(mock_git_client):
    """Test state does not leak from other tests."""
    mock_git_client.create_branch("r", "feature", "abc123")
    mock_git_client.assert_branch_created("r", "feature", "abc123")


def test_default_config_keeps_logger_level(mock_git_client):
    """Test the fixture leaves the scm_client level alone without log_level."""
    assert logging.getLogger("scm_client").level == logging.NOTSET


class TestPluginInPytestRun:
    """Test the plugin inside a separate pytest run."""

    def test_debug_capture_after_fixture(self, pytester):
        """Test caplog sees client debug logs in a test after the fixture ran."""
        pytester.makepyfile(test_logging_after_fixture=LOGGING_AFTER_FIXTURE)

        result = pytester.runpytest()

        result.assert_outcomes(passed=2)

    def test_configured_level_is_scoped(self, pytester):
        """Test a configured log level ends with the test that used the fixture."""
        pytester.makeini("[pytest]\nscm_mock_config = scm.yaml\n")
        pytester.makefile(".yaml", scm="log_level: WARNING\n")
        pytester.makepyfile(test_logging_after_fixture=LOGGING_AFTER_FIXTURE)

        result = pytester.runpytest()

        result.assert_outcomes(passed=2)

    def test_ini_option_loads_yaml_config(self, pytester):
        """Test scm_mock_config points the fixture at a YAML file."""
        pytester.makeini("[pytest]\nscm_mock_config = config/scm.yaml\n")
        config_dir = pytester.mkdir("config")
        (config_dir / "scm.yaml").write_text(
            'pull_request_link_template: "https://git.example.com/pulls/{number}"\n'
            "log_level: DEBUG\n"
            "log_file: logs/scm.log\n"
        )
        pytester.makepyfile(
            """
            import logging

            from scm_client import PullRequestInput


            def test_configured_client(mock_git_client, mock_git_client_config):
                pr = mock_git_client.create_pull_request(
                    "r", PullRequestInput("title", "feature", "main")
                )

                assert pr.link == "https://git.example.com/pulls/1"
                assert logging.getLogger("scm_client").level == logging.DEBUG
                assert mock_git_client_config.log_file.endswith("logs/scm.log")
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)
        log_text = (pytester.path / "config" / "logs" / "scm.log").read_text()
        assert "Created pull request #1 in r: title" in log_text

    def test_missing_config_file_uses_defaults(self, pytester):
        """Test an ini option naming a missing file falls back to defaults."""
        pytester.makeini("[pytest]\nscm_mock_config = nope.yaml\n")
        pytester.makepyfile(
            """
            from scm_client import PullRequestInput


            def test_default_link(mock_git_client):
                pr = mock_git_client.create_pull_request(
                    "r", PullRequestInput("title", "feature", "main")
                )

                assert pr.link == "https://example.com/pull-request/1"
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)
