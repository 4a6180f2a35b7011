"""Tests for CLI functionality."""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cognitopy.cli.commands import OperationHandler
from cognitopy.cli.main import cli
from cognitopy.core.sdk_operations import CognitoUserOperations

USER_POOL_ID = "eu-west-1_TestPool1"


class TestCLIMain:
    """Test main CLI functionality."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "export users from an AWS Cognito user pool" in result.output
        assert "export-users" in result.output
        assert "import-users" in result.output

    def test_cli_no_command(self):
        """Test CLI with no command shows usage and exits 0."""
        runner = CliRunner()
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "export-users" in result.output

    def test_cli_unknown_command(self):
        """Test an unknown subcommand shows usage and exits 0."""
        runner = CliRunner()
        result = runner.invoke(cli, ["delete-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 0
        assert "export-users" in result.output

    @patch("cognitopy.cli.main.OperationHandler")
    def test_export_defaults_to_json(self, mock_handler_class):
        mock_handler = MagicMock()
        mock_handler.handle_export_users.return_value = 0
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 0
        mock_handler.handle_export_users.assert_called_once_with(
            USER_POOL_ID, "json", None, "cognito"
        )

    @pytest.mark.parametrize(
        "args",
        [
            ["--format", "CSV"],
            ["--format", "csv"],
            ["--Format", "CsV"],
            ["--FORMAT", "cSv"],
        ],
    )
    @patch("cognitopy.cli.main.OperationHandler")
    def test_export_format_is_case_insensitive(self, mock_handler_class, args):
        mock_handler = MagicMock()
        mock_handler.handle_export_users.return_value = 0
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(
            cli, ["export-users", "--user-pool-id", USER_POOL_ID, *args]
        )

        assert result.exit_code == 0
        assert mock_handler.handle_export_users.call_args[0][1] == "csv"

    @patch("cognitopy.cli.main.OperationHandler")
    def test_export_passes_profile_and_header_style(self, mock_handler_class):
        mock_handler = MagicMock()
        mock_handler.handle_export_users.return_value = 0
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "export-users",
                "--user-pool-id",
                USER_POOL_ID,
                "--format",
                "csv",
                "--profile",
                "staging",
                "--header-style",
                "Pinpoint",
            ],
        )

        assert result.exit_code == 0
        mock_handler.handle_export_users.assert_called_once_with(
            USER_POOL_ID, "csv", "staging", "pinpoint"
        )

    @patch("cognitopy.cli.main.OperationHandler")
    def test_export_failure_exit_code(self, mock_handler_class):
        mock_handler = MagicMock()
        mock_handler.handle_export_users.return_value = 1
        mock_handler_class.return_value = mock_handler

        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 1


class TestValidationShortCircuit:
    """Validation errors stop the command before any remote call."""

    @patch("cognitopy.core.cognito_client.boto3")
    @patch("cognitopy.cli.main.OperationHandler")
    def test_missing_user_pool_id(self, mock_handler_class, mock_boto3):
        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--format", "csv"])

        assert result.exit_code != 0
        assert "--user-pool-id is required" in result.output
        assert "Usage" in result.output
        mock_handler_class.assert_not_called()
        mock_boto3.Session.assert_not_called()

    @patch("cognitopy.cli.main.OperationHandler")
    def test_invalid_format(self, mock_handler_class):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["export-users", "--user-pool-id", USER_POOL_ID, "--format", "xml"]
        )

        assert result.exit_code == 1
        assert "only JSON and CSV are supported" in result.output
        mock_handler_class.assert_not_called()

    @patch("cognitopy.cli.main.OperationHandler")
    def test_pool_id_without_region(self, mock_handler_class):
        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--user-pool-id", "nopool"])

        assert result.exit_code == 1
        mock_handler_class.assert_not_called()

    @patch("cognitopy.cli.main.OperationHandler")
    def test_import_missing_file_option(self, mock_handler_class):
        runner = CliRunner()
        result = runner.invoke(cli, ["import-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 1
        assert "--file is required" in result.output
        mock_handler_class.assert_not_called()

    @patch("cognitopy.cli.main.OperationHandler")
    def test_import_nonexistent_file(self, mock_handler_class, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "import-users",
                "--user-pool-id",
                USER_POOL_ID,
                "--file",
                str(tmp_path / "missing.csv"),
            ],
        )

        assert result.exit_code == 1
        assert "does not exist" in result.output
        mock_handler_class.assert_not_called()

    @patch("cognitopy.cli.main.OperationHandler")
    def test_import_non_csv_file(self, mock_handler_class, tmp_path):
        users_file = tmp_path / "users.json"
        users_file.write_text("[]")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["import-users", "--user-pool-id", USER_POOL_ID, "--file", str(users_file)],
        )

        assert result.exit_code == 1
        assert "not in CSV format" in result.output
        mock_handler_class.assert_not_called()


class TestImportCommand:
    """Test the import-users stub."""

    def test_import_reports_not_implemented(self, tmp_path):
        users_file = tmp_path / "users.csv"
        users_file.write_text("cognito:username\r\nalice\r\n")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["import-users", "--user-pool-id", USER_POOL_ID, "--file", str(users_file)],
        )

        assert result.exit_code == 1
        assert "not implemented" in result.output


class TestExportEndToEnd:
    """Run export-users against a mocked Cognito client."""

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_export_csv(self, mock_get_operations, paged_client, in_tmp_dir):
        mock_get_operations.return_value = CognitoUserOperations(paged_client)

        runner = CliRunner()
        result = runner.invoke(
            cli, ["export-users", "--user-pool-id", USER_POOL_ID, "--format", "CSV"]
        )

        assert result.exit_code == 0
        output = in_tmp_dir / f"{USER_POOL_ID}.csv"
        assert output.exists()
        assert output.read_bytes().count(b"\r\n") == 4
        client_config = mock_get_operations.call_args[0][0]
        assert client_config.region == "eu-west-1"

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_export_json(self, mock_get_operations, paged_client, in_tmp_dir):
        mock_get_operations.return_value = CognitoUserOperations(paged_client)

        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 0
        data = json.loads((in_tmp_dir / f"{USER_POOL_ID}.json").read_text())
        assert len(data) == 3

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_remote_error_exits_non_zero(
        self, mock_get_operations, mock_cognito_client, in_tmp_dir
    ):
        from botocore.exceptions import ClientError

        mock_cognito_client.list_users.side_effect = ClientError(
            {
                "Error": {
                    "Code": "ResourceNotFoundException",
                    "Message": "User pool does not exist.",
                },
                "ResponseMetadata": {"HTTPStatusCode": 400},
            },
            "ListUsers",
        )
        mock_get_operations.return_value = CognitoUserOperations(mock_cognito_client)

        runner = CliRunner()
        result = runner.invoke(cli, ["export-users", "--user-pool-id", USER_POOL_ID])

        assert result.exit_code == 1
        assert "User pool does not exist." in result.output
        assert not (in_tmp_dir / f"{USER_POOL_ID}.json").exists()


class TestOperationHandler:
    """Test OperationHandler class."""

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_profile_flag_wins_over_environment(
        self, mock_get_operations, mock_cognito_client, in_tmp_dir, monkeypatch
    ):
        monkeypatch.setenv("COGNITOPY_AWS_PROFILE", "from-env")
        mock_get_operations.return_value = CognitoUserOperations(mock_cognito_client)

        handler = OperationHandler()
        code = handler.handle_export_users(USER_POOL_ID, "json", profile="from-flag")

        assert code == 0
        assert mock_get_operations.call_args[0][0].profile == "from-flag"

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_profile_from_environment(
        self, mock_get_operations, mock_cognito_client, in_tmp_dir, monkeypatch
    ):
        monkeypatch.setenv("COGNITOPY_AWS_PROFILE", "from-env")
        mock_get_operations.return_value = CognitoUserOperations(mock_cognito_client)

        code = OperationHandler().handle_export_users(USER_POOL_ID, "json")

        assert code == 0
        assert mock_get_operations.call_args[0][0].profile == "from-env"

    @patch("cognitopy.cli.commands.get_user_operations")
    def test_client_setup_failure(self, mock_get_operations, in_tmp_dir):
        from cognitopy.core.exceptions import AuthConfigError

        mock_get_operations.side_effect = AuthConfigError("profile not found")

        code = OperationHandler().handle_export_users(USER_POOL_ID, "json")

        assert code == 1

    def test_import_returns_error_code(self, tmp_path):
        code = OperationHandler().handle_import_users(
            USER_POOL_ID, tmp_path / "users.csv"
        )
        assert code == 1
