"""Tests for the command line interface."""
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import HOST, StubHttp, make_response
from config import AppConfig, MatterApiConfig
from main import cli


@pytest.fixture
def test_config(workspace):
    config = AppConfig(
        config_dir=str(workspace / "config"),
        output_dir=str(workspace / "out"),
        matter_api=MatterApiConfig(host=HOST),
    )
    with patch("src.cli.interactive.app_config", config):
        yield config


class TestCli:
    """Test click commands."""

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_explore_without_token_exits_non_zero(self, test_config):
        test_config.settings_file.unlink()

        result = CliRunner().invoke(cli, ["explore"])

        assert result.exit_code == 1
        assert "No access token found" in result.output
        assert not test_config.results_file.exists()

    def test_explore_without_catalog_exits_non_zero(self, test_config):
        test_config.endpoints_file.unlink()

        result = CliRunner().invoke(cli, ["explore"])

        assert result.exit_code == 1
        assert not test_config.results_file.exists()

    @patch("requests.Session.request")
    def test_explore_writes_docs(self, mock_request, test_config):
        stub = StubHttp({("GET", f"{HOST}/tags/"): make_response(200, [{"id": "t1"}])})
        mock_request.side_effect = stub.request

        result = CliRunner().invoke(cli, ["explore"])

        assert result.exit_code == 0, result.output
        assert "Found 1 working endpoints." in result.output
        assert json.loads(test_config.summary_file.read_text())[0]["endpoint"] == "tags/"
        assert "### `tags/`" in test_config.docs_file.read_text()

    def test_docs_without_results_exits_non_zero(self, test_config):
        result = CliRunner().invoke(cli, ["docs"])

        assert result.exit_code == 1
        assert "Cannot read exploration results" in result.output

    def test_menu_exit(self, test_config):
        result = CliRunner().invoke(cli, ["menu"], input="3\n")

        assert result.exit_code == 0
        assert "Exiting..." in result.output
