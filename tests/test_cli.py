# Tests for appresync.cli
# CLI commands using Click testing

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from conftest import ENV_ID, ORIGINAL_URL, FakeOperation
from appresync.cli import cli
from appresync.sync.models import AppRef, CodedError, ResyncResponse

OK = ResyncResponse(app=AppRef(id="1"))


class TestCliGroup:
    """Tests for main CLI group."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "appresync" in result.output
        assert "resync" in result.output
        assert "config" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "appresync" in result.output


class TestResyncCommand:
    """Tests for resync command."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "--help"])
        assert result.exit_code == 0
        assert "--override-url" in result.output
        assert "--method" in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_success(self, mock_client_cls, config_file: Path, temp_home: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])

        assert result.exit_code == 0, result.output
        assert "Synced app" in result.output
        request, tags = operation.calls[0]
        assert request.app_external_id == "my-app"
        assert request.app_url == ORIGINAL_URL
        assert request.env_id == ENV_ID
        assert tags == ("Workflow",)

        kwargs = mock_client_cls.call_args.kwargs
        assert kwargs["token"] == "secret-token"
        assert kwargs["timeout"] == 5.0

        log_text = (temp_home / "resync.md").read_text(encoding="utf-8")
        assert "synced (app 1)" in log_text

    @patch("appresync.cli.GraphQLResyncClient")
    def test_override_url(self, mock_client_cls, config_file: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["resync", "my-app", "--url", ORIGINAL_URL, "--override-url", "https://b.com/x", "--yes"],
        )

        assert result.exit_code == 0, result.output
        assert operation.calls[0][0].app_url == "https://b.com/x"

    @patch("appresync.cli.GraphQLResyncClient")
    def test_application_error(self, mock_client_cls, config_file: Path):
        error = CodedError(code="invalid_url", message="bad host")
        mock_client_cls.return_value = FakeOperation(ResyncResponse(error=error))

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])

        assert result.exit_code == 1
        assert "Invalid URL" in result.output
        assert "bad host" in result.output
        assert "Synced app" not in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_transport_failure(self, mock_client_cls, config_file: Path):
        mock_client_cls.return_value = FakeOperation(exc=ConnectionError("refused"))

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])

        assert result.exit_code == 1
        assert "Something went wrong" in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_connect_requires_override(self, mock_client_cls, config_file: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--method", "connect", "--yes"])

        assert result.exit_code == 1
        assert "Migrate to serve" in result.output
        assert "requires --override-url" in result.output
        assert operation.calls == []

    @patch("appresync.cli.GraphQLResyncClient")
    def test_connect_migration(self, mock_client_cls, config_file: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "resync",
                "my-app",
                "--url",
                "",
                "--method",
                "connect",
                "--override-url",
                "https://b.com/api/inngest",
                "--yes",
            ],
        )

        assert result.exit_code == 0, result.output
        assert operation.calls[0][0].app_url == "https://b.com/api/inngest"

    @patch("appresync.cli.GraphQLResyncClient")
    def test_prompt_declined(self, mock_client_cls, config_file: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL], input="n\n")

        assert result.exit_code == 0
        assert "Resync cancelled" in result.output
        assert operation.calls == []

    def test_scalar_config(self, temp_home: Path):
        config_path = temp_home / ".config" / "appresync" / "config.yaml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("5\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_missing_environment(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])
        assert result.exit_code == 1
        assert "No environment ID" in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_env_id_option(self, mock_client_cls, temp_home: Path):
        operation = FakeOperation(OK)
        mock_client_cls.return_value = operation

        runner = CliRunner()
        result = runner.invoke(
            cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--env-id", str(ENV_ID), "--yes"]
        )

        assert result.exit_code == 0, result.output
        assert operation.calls[0][0].env_id == ENV_ID


class TestLogCommand:
    """Tests for log command."""

    def test_no_log(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["log"])
        assert result.exit_code == 0
        assert "No resync log found" in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_shows_entries(self, mock_client_cls, config_file: Path):
        mock_client_cls.return_value = FakeOperation(OK)
        runner = CliRunner()
        runner.invoke(cli, ["resync", "my-app", "--url", ORIGINAL_URL, "--yes"])

        result = runner.invoke(cli, ["log"])
        assert result.exit_code == 0
        assert "my-app" in result.output

    @patch("appresync.cli.GraphQLResyncClient")
    def test_newest_entries_shown(self, mock_client_cls, config_file: Path):
        mock_client_cls.return_value = FakeOperation(OK)
        runner = CliRunner()
        for app in ("first-app", "second-app", "third-app"):
            runner.invoke(cli, ["resync", app, "--url", ORIGINAL_URL, "--yes"])

        result = runner.invoke(cli, ["log", "-n", "1"])

        assert result.exit_code == 0
        assert "third-app" in result.output
        assert "first-app" not in result.output
        assert "second-app" not in result.output

    def test_invalid_config(self, temp_home: Path):
        config_path = temp_home / ".config" / "appresync" / "config.yaml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("api:\n  endpoint: ftp://x\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["log"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Invalid configuration" in result.output


class TestConfigCommands:
    """Tests for config commands."""

    def test_init(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert "Created configuration" in result.output
        assert (temp_home / ".config" / "appresync" / "config.yaml").exists()

        result = runner.invoke(cli, ["config", "init"])
        assert "already exists" in result.output

    def test_path(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "path"])
        assert result.exit_code == 0
        assert result.output.strip() == str(temp_home / ".config" / "appresync" / "config.yaml")

    def test_show(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "api.example.com" in result.output

    def test_show_missing(self, temp_home: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_validate(self, config_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_validate_invalid(self, temp_home: Path):
        runner = CliRunner()
        runner.invoke(cli, ["config", "init"])
        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 1
        assert "environment.id" in result.output
