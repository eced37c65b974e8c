#!/usr/bin/env python3
"""Command line tool parsing an argument vector against a schema file."""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .argument_parser import ArgumentParser
from .argument_processor import ArgumentProcessor
from .command_line_parser import CommandLineParser
from .config_manager import ConfigManager
from .config_result import ConfigResult
from .exceptions import ClparseError, SchemaNotFoundError
from .parse_result import ParseResult
from .text import HelpText
from .types import ArgsList, ExitCode


def print_help(config: ConfigResult | None = None) -> None:
    """Print concise help message, plus the schema's options when one is loaded."""
    help_text = """clparse - command line argument parser
Usage:
  clparse -- -v --output=out.txt a.txt          # Parse with the default schema
  clparse -c app.conf -- -abc --files x y       # Parse with an explicit schema

  Schema file: $CLPARSE_CONFIG, $XDG_CONFIG_HOME/clparse.conf or $HOME/.config/clparse.conf
  Schema format: KEY=VALUE settings, "option DEST=-v --verbose bool", "values DEST [MAX]"
  Set CLPARSE_DEBUG=1 to trace parsing decisions
"""
    print(help_text)
    if config is not None:
        help_screen = HelpText(config.heading, config.copyright)
        print(help_screen.add_options(config).render())


def format_value(value: Any) -> str:
    if isinstance(value, list):
        return ",".join(str(item) for item in value)
    return "" if value is None else str(value)


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        parser: Optional[CommandLineParser] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.parser = parser or CommandLineParser()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        tool_args, parsed_args = ArgumentProcessor.split_at_separator(args)
        config_path, rest = ArgumentProcessor.parse_tool_args(tool_args)

        # Handle help request
        if not args or any(
            ArgumentParser.compare_long(arg, "help", False)
            or ArgumentParser.compare_short(arg, "h", True)
            for arg in rest
        ):
            print_help(self._try_load_config(config_path))
            return 0

        if rest:
            logging.error(f"Unexpected arguments before '--': {' '.join(rest)}")
            return 2

        config = self._load_config(config_path)
        options = config.new_options()
        result = self.parser.parse_arguments(parsed_args, options, config.option_map)
        self._report(config, result)
        return 0 if result.success else 1

    def _load_config(self, config_path: str | None) -> ConfigResult:
        path = Path(config_path) if config_path else self.config_manager.find_config_file()
        if not path or not path.exists():
            raise SchemaNotFoundError(str(path) if path else "could not find clparse.conf")
        return self.config_manager.load_config(path)

    def _try_load_config(self, config_path: str | None) -> ConfigResult | None:
        try:
            return self._load_config(config_path)
        except ClparseError:
            return None

    @staticmethod
    def _report(config: ConfigResult, result: ParseResult) -> None:
        for option in config:
            print(f"{option.dest}={format_value(getattr(result.options, option.dest))}")
        if config.option_map.value_list:
            dest = config.option_map.value_list.dest
            print(f"{dest}={format_value(getattr(result.options, dest))}")

        for error in result.errors:
            print(f"error: {error.describe()}", file=sys.stderr)


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except ClparseError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
