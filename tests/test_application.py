"""Tests for the command line tool in clparse."""

import pytest

from clparse.application import Application, format_value, main, print_help
from clparse.config_manager import ConfigManager
from clparse.exceptions import ArrayFieldMismatchError, SchemaNotFoundError

SCHEMA = (
    "heading=demo 1.0\n"
    'option verbose=-v --verbose bool "help=Print more output"\n'
    "option output=-o --output metavar=FILE\n"
    "option files=-f --files array\n"
    "values rest\n"
)


@pytest.fixture
def schema_path(temp_config_with_content):
    return temp_config_with_content(SCHEMA)


@pytest.fixture
def no_default_config(mocker):
    """Make sure no schema file from the real environment is picked up."""
    return mocker.patch(
        "clparse.config_manager.ConfigManager.find_config_file", return_value=None
    )


class TestPrintHelp:
    """Test help message functionality."""

    def test_print_help_contains_expected_content(self, capsys):
        print_help()
        output = capsys.readouterr().out

        assert "clparse - command line argument parser" in output
        assert "Usage:" in output
        assert "Schema file:" in output
        assert "Schema format:" in output
        assert "CLPARSE_DEBUG" in output

    def test_print_help_with_schema(self, capsys, schema_path):
        print_help(ConfigManager.load_config(schema_path))
        output = capsys.readouterr().out

        assert "demo 1.0" in output
        assert "-v, --verbose" in output
        assert "Print more output" in output
        assert "-o, --output FILE" in output


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,expected",
        [(None, ""), (True, "True"), (["a", "b"], "a,b"), ([], ""), (3, "3")],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected


class TestApplicationUnit:
    """Unit tests for the Application class."""

    def test_application_initialization_with_defaults(self):
        app = Application()
        assert app.config_manager is not None
        assert app.parser is not None

    def test_application_initialization_with_custom_components(self, mocker):
        mock_config_manager = mocker.Mock()
        mock_parser = mocker.Mock()

        app = Application(config_manager=mock_config_manager, parser=mock_parser)

        assert app.config_manager == mock_config_manager
        assert app.parser == mock_parser

    def test_run_without_arguments_prints_help(self, capsys, no_default_config):
        assert Application().run([]) == 0
        assert "Usage:" in capsys.readouterr().out

    @pytest.mark.parametrize("flag", ["--help", "--HELP", "-h"])
    def test_run_help_flags(self, capsys, schema_path, flag):
        assert Application().run(["-c", str(schema_path), flag]) == 0
        output = capsys.readouterr().out
        assert "Usage:" in output
        assert "--verbose" in output

    def test_run_help_with_missing_schema(self, capsys, no_default_config):
        assert Application().run(["--help"]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_run_parses_arguments(self, capsys, schema_path):
        exit_code = Application().run(
            ["-c", str(schema_path), "--", "-v", "--output", "out.txt", "-f", "a", "b", "--", "x"]
        )
        captured = capsys.readouterr()

        assert exit_code == 0
        assert captured.out.splitlines() == [
            "verbose=True",
            "output=out.txt",
            "files=a,b",
            "rest=--,x",
        ]
        assert captured.err == ""

    def test_run_reports_errors(self, capsys, schema_path):
        exit_code = Application().run(["-c", str(schema_path), "--", "-z", "--output"])
        captured = capsys.readouterr()

        assert exit_code == 1
        assert "error: Option '-z' has an invalid format" in captured.err
        assert "error: Option '--output' has an invalid format" in captured.err

    def test_run_uses_found_config(self, mocker, capsys, schema_path):
        mocker.patch(
            "clparse.config_manager.ConfigManager.find_config_file",
            return_value=schema_path,
        )
        assert Application().run(["--", "-v"]) == 0
        assert "verbose=True" in capsys.readouterr().out

    def test_run_rejects_stray_tool_arguments(self, schema_path, mocker):
        mock_error = mocker.patch("logging.error")
        assert Application().run(["-c", str(schema_path), "stray", "--", "-v"]) == 2
        mock_error.assert_called_once()

    def test_run_missing_schema(self, no_default_config):
        with pytest.raises(SchemaNotFoundError):
            Application().run(["--", "-v"])

    def test_run_explicit_missing_schema(self, tmp_path):
        with pytest.raises(SchemaNotFoundError) as exc_info:
            Application().run(["-c", str(tmp_path / "nope.conf"), "--", "-v"])
        assert "nope.conf" in str(exc_info.value)

    def test_run_uses_injected_parser(self, mocker, schema_path):
        mock_parser = mocker.Mock()
        mock_parser.parse_arguments.return_value.success = True
        mock_parser.parse_arguments.return_value.errors = []

        app = Application(parser=mock_parser)
        mocker.patch.object(Application, "_report")
        assert app.run(["-c", str(schema_path), "--", "-v"]) == 0

        args, options, option_map = mock_parser.parse_arguments.call_args[0]
        assert args == ["-v"]
        assert option_map["verbose"] is not None


class TestMain:
    """Tests for the main entry point."""

    def test_main_success(self, mocker, schema_path, capsys):
        mocker.patch("sys.argv", ["clparse", "-c", str(schema_path), "--", "-v"])
        assert main() == 0

    def test_main_parse_failure(self, mocker, schema_path, capsys):
        mocker.patch("sys.argv", ["clparse", "-c", str(schema_path), "--", "-z"])
        assert main() == 1

    def test_main_handles_clparse_error(self, mocker, no_default_config):
        mocker.patch("sys.argv", ["clparse", "--", "-v"])
        mock_error = mocker.patch("logging.error")

        assert main() == 1
        assert "Schema file not found" in mock_error.call_args[0][0]

    def test_main_handles_unexpected_error(self, mocker):
        mocker.patch("sys.argv", ["clparse", "--", "-v"])
        mocker.patch.object(Application, "run", side_effect=RuntimeError("boom"))
        mock_error = mocker.patch("logging.error")

        assert main() == 1
        assert "Unexpected error: boom" in mock_error.call_args[0][0]

    def test_main_handles_internal_parser_error(self, mocker, schema_path):
        mocker.patch("sys.argv", ["clparse", "-c", str(schema_path), "--", "-v"])
        mocker.patch(
            "clparse.command_line_parser.CommandLineParser.parse_arguments",
            side_effect=ArrayFieldMismatchError("--files"),
        )
        mock_error = mocker.patch("logging.error")

        assert main() == 1
        assert "bound to a scalar field" in mock_error.call_args[0][0]
