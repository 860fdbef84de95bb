"""
Tests for the CLI module.
"""

import json
from unittest.mock import patch, AsyncMock, MagicMock

import pytest
from click.testing import CliRunner

from marketeer.cli import main
from marketeer.clients.base import GenerationClient
from marketeer.core.error_handler import ConfigurationError, TransportError

BRIEF = "A sustainable water bottle made from recycled ocean plastic."
VALID_RAW = json.dumps({
    "marketingCopy": "Copy text",
    "visualStrategy": "Visual text",
    "targetAudience": "Audience text"
})


def fake_client(result=None, error=None):
    client = MagicMock(spec=GenerationClient)
    client.generate = AsyncMock(return_value=result, side_effect=error)
    return client


class TestCLI:
    """
    Tests for the CLI module.
    """

    @pytest.fixture
    def runner(self):
        """
        Click CLI test runner.
        """
        return CliRunner()

    @pytest.fixture(autouse=True)
    def no_logging_setup(self):
        """
        Keep the CLI from replacing the root logging handlers during tests.
        """
        with patch('marketeer.cli.configure_logging'):
            yield

    @patch('marketeer.clients.create_generation_client')
    def test_generate(self, mock_create, runner):
        mock_create.return_value = fake_client(VALID_RAW)

        result = runner.invoke(main, ['generate', BRIEF])

        assert result.exit_code == 0
        assert "MARKETING COPY" in result.output
        assert "Copy text" in result.output
        assert "VISUAL STRATEGY" in result.output
        assert "Audience text" in result.output
        mock_create.assert_called_once_with(provider=None, model=None)

    @patch('marketeer.clients.create_generation_client')
    def test_generate_single_section(self, mock_create, runner):
        mock_create.return_value = fake_client(VALID_RAW)

        result = runner.invoke(main, ['generate', BRIEF, '--section', 'visualStrategy'])

        assert result.exit_code == 0
        assert "Visual text" in result.output
        assert "Copy text" not in result.output

    @patch('marketeer.clients.create_generation_client')
    def test_generate_json(self, mock_create, runner):
        mock_create.return_value = fake_client(VALID_RAW)

        result = runner.invoke(main, ['generate', BRIEF, '--json'])

        assert result.exit_code == 0
        data = json.loads(result.output[result.output.index("{"):result.output.rindex("}") + 1])
        assert data == json.loads(VALID_RAW)

    @patch('marketeer.clients.create_generation_client')
    def test_generate_from_file(self, mock_create, runner, tmp_path):
        mock_create.return_value = fake_client(VALID_RAW)
        brief_path = tmp_path / "brief.txt"
        brief_path.write_text(BRIEF)

        result = runner.invoke(main, ['generate', '--file', str(brief_path), '--provider', 'openai', '--model', 'gpt-4o'])

        assert result.exit_code == 0
        mock_create.assert_called_once_with(provider='openai', model='gpt-4o')
        request = mock_create.return_value.generate.call_args.args[0]
        assert request.brief == BRIEF

    @patch('marketeer.clients.create_generation_client')
    def test_generate_from_stdin(self, mock_create, runner):
        mock_create.return_value = fake_client(VALID_RAW)

        result = runner.invoke(main, ['generate'], input=BRIEF)

        assert result.exit_code == 0
        assert "Copy text" in result.output

    @patch('marketeer.clients.create_generation_client')
    def test_generate_short_brief(self, mock_create, runner):
        client = fake_client(VALID_RAW)
        mock_create.return_value = client

        result = runner.invoke(main, ['generate', 'short'])

        assert result.exit_code == 1
        assert "Minimum 20 characters required" in result.output
        client.generate.assert_not_called()

    @patch('marketeer.clients.create_generation_client')
    def test_generate_transport_failure(self, mock_create, runner):
        mock_create.return_value = fake_client(error=TransportError("Connection error"))

        result = runner.invoke(main, ['generate', BRIEF])

        assert result.exit_code == 1
        assert "Generation failed. Please try again." in result.output
        assert "Error: Connection error" in result.output

    @patch('marketeer.clients.create_generation_client')
    def test_generate_incomplete_response(self, mock_create, runner):
        mock_create.return_value = fake_client('{"marketingCopy":"A","visualStrategy":"B"}')

        result = runner.invoke(main, ['generate', BRIEF])

        assert result.exit_code == 1
        assert "Response is missing required strategy fields" in result.output

    @patch('marketeer.clients.create_generation_client')
    def test_generate_configuration_error(self, mock_create, runner):
        mock_create.side_effect = ConfigurationError("OPENROUTER_API_KEY environment variable is required but not set")

        result = runner.invoke(main, ['generate', BRIEF])

        assert result.exit_code == 1
        assert "OPENROUTER_API_KEY" in result.output

    @patch('marketeer.clients.create_generation_client')
    def test_generate_log_file(self, mock_create, runner, tmp_path):
        mock_create.return_value = fake_client(VALID_RAW)
        log_file = str(tmp_path / "requests.log")

        result = runner.invoke(main, ['generate', BRIEF, '--log', log_file])

        assert result.exit_code == 0
        mock_create.assert_called_once_with(provider=None, model=None, log_file=log_file)

    def test_generate_log_requires_openrouter(self, runner, tmp_path):
        result = runner.invoke(main, ['generate', BRIEF, '--provider', 'openai', '--log', str(tmp_path / "x.log")])

        assert result.exit_code == 2
        assert "only supported with the openrouter provider" in result.output

    @patch('marketeer.clients.create_generation_client')
    @patch('marketeer.cli.get_config_value', return_value='openai')
    def test_generate_log_with_configured_openai_provider(self, mock_config, mock_create, runner, tmp_path):
        result = runner.invoke(main, ['generate', BRIEF, '--log', str(tmp_path / "x.log")])

        assert result.exit_code == 2
        assert "only supported with the openrouter provider" in result.output
        mock_config.assert_called_once_with("generation.provider", "openrouter")
        mock_create.assert_not_called()

    def test_check_eligible(self, runner):
        result = runner.invoke(main, ['check', "x" * 25])

        assert result.exit_code == 0
        assert "25 / 2000" in result.output
        assert "Ready to generate" in result.output

    def test_check_too_short(self, runner):
        result = runner.invoke(main, ['check', 'short'])

        assert result.exit_code == 1
        assert "5 / 2000" in result.output
        assert "Minimum 20 characters required" in result.output

    def test_check_too_long(self, runner):
        result = runner.invoke(main, ['check'], input="x" * 2001)

        assert result.exit_code == 1
        assert "Maximum 2000 characters exceeded" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
