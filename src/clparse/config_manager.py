"""Schema file management functionality for clparse."""

import re
import shlex
from pathlib import Path

from .config_result import ConfigResult
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import DuplicateOptionError, InvalidSchemaError
from .option_info import OptionInfo, ValueListInfo
from .option_map import OptionMap
from .path_helper import PathHelper
from .settings import ParserSettings
from .types import SettingsData

VALUE_TYPES = {
    "bool": bool,
    "str": str,
    "int": int,
    "float": float,
}

EXTRA_KEYS = ("heading", "copyright_holder", "copyright_years")


class ConfigManager:
    """Manages schema file loading."""

    @staticmethod
    def find_config_file() -> Path | None:
        """Find clparse.conf schema file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path) -> ConfigResult:
        """
        Load options and parser settings from a schema file.

        Args:
            config_file: Path to the schema file

        Returns:
            ConfigResult containing the option map and settings

        Raises:
            InvalidSchemaError: If the file has invalid format or content

        Format:
            - ``KEY=VALUE`` parser settings and help text extras
            - ``option DEST=TOKENS`` declares an option
            - ``values DEST [MAX]`` declares the positional value list
        """
        settings_data: SettingsData = {}
        options: list[OptionInfo] = []
        value_lists: list[ValueListInfo] = []

        file_size = config_file.stat().st_size
        if file_size > 1024 * 1024:  # 1MB limit
            raise InvalidSchemaError(
                str(config_file), message=f"Schema file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line,
                        line_num,
                        str(config_file),
                        settings_data,
                        options,
                        value_lists,
                    )
        except UnicodeDecodeError as e:
            raise InvalidSchemaError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e

        if len(value_lists) > 1:
            raise InvalidSchemaError(
                str(config_file), message="Only one 'values' line is allowed"
            )

        ConfigManager._validate_extras(settings_data, str(config_file))
        settings = ParserSettings.from_dict(settings_data)

        try:
            option_map = OptionMap(
                options, settings, value_lists[0] if value_lists else None
            )
        except DuplicateOptionError as e:
            raise InvalidSchemaError(str(config_file), message=e.message) from e

        debug_log(
            f"load_config: {len(option_map)} options from {config_file}, {settings!r}"
        )
        extras = {key: settings_data[key] for key in EXTRA_KEYS if key in settings_data}
        return ConfigResult(option_map, settings, extras)

    @staticmethod
    def _process_config_line(
        line: str,
        line_num: int,
        config_file: str,
        settings_data: SettingsData,
        options: list[OptionInfo],
        value_lists: list[ValueListInfo],
    ) -> None:
        """
        Process a single schema line.

        Args:
            line: The schema line to process
            line_num: Line number for error reporting
            config_file: Schema file path for error reporting
            settings_data: Dictionary to store raw settings
            options: List to store declared options
            value_lists: List to store the value list declaration
        """
        # Skip empty lines and comments
        line = line.strip()
        if not line or line.startswith("#"):
            return

        if len(line) > 10000:  # 10KB line limit
            raise InvalidSchemaError(
                config_file,
                line_num,
                f"Line too long ({len(line)} characters)",
            )

        # Route to appropriate handler based on line type
        keyword = line.split(None, 1)[0]
        if keyword == "option":
            options.append(
                ConfigManager._process_option_line(line, line_num, config_file)
            )
        elif keyword == "values":
            value_lists.append(
                ConfigManager._process_values_line(line, line_num, config_file)
            )
        elif "=" in line:
            key, value = line.split("=", 1)
            settings_data[key.strip()] = ConfigManager._strip_quotes_from_value(
                value.strip()
            )
        else:
            raise InvalidSchemaError(
                config_file, line_num, f"Unrecognized line: '{line}'"
            )

    @staticmethod
    def _process_option_line(line: str, line_num: int, config_file: str) -> OptionInfo:
        """Parse ``option DEST=TOKENS`` into an OptionInfo."""
        declaration = line[len("option ") :]
        if "=" not in declaration:
            raise InvalidSchemaError(
                config_file, line_num, "Option line needs 'DEST=TOKENS'"
            )

        dest, option_tokens = declaration.split("=", 1)
        dest = dest.strip()
        if not ConfigManager._is_valid_dest(dest):
            raise InvalidSchemaError(
                config_file, line_num, f"Invalid option destination: '{dest}'"
            )

        try:
            tokens = shlex.split(option_tokens)
        except ValueError as e:
            raise InvalidSchemaError(config_file, line_num, str(e)) from e

        fields = ConfigManager._parse_option_tokens(tokens, line_num, config_file)
        default = fields.pop("default", None)

        try:
            option = OptionInfo(dest, **fields)
        except ValueError as e:
            raise InvalidSchemaError(config_file, line_num, str(e)) from e

        if default is not None:
            option.default = ConfigManager._convert_default(
                option, default, line_num, config_file
            )
        return option

    @staticmethod
    def _parse_option_tokens(tokens: list[str], line_num: int, config_file: str) -> dict:
        """Map option line tokens to OptionInfo keyword arguments."""
        fields: dict = {}
        for token in tokens:
            if token.startswith("--") and len(token) > 2:
                fields["long_name"] = token[2:]
            elif token.startswith("-") and len(token) == 2 and token != "--":
                fields["short_name"] = token[1]
            elif token in VALUE_TYPES:
                fields["value_type"] = VALUE_TYPES[token]
            elif token == "array":
                fields["is_array"] = True
            elif token == "required":
                fields["required"] = True
            elif token.startswith("default="):
                fields["default"] = token[len("default=") :]
            elif token.startswith("set="):
                fields["mutually_exclusive_set"] = token[len("set=") :]
            elif token.startswith("help="):
                fields["help_text"] = token[len("help=") :]
            elif token.startswith("metavar="):
                fields["meta_value"] = token[len("metavar=") :]
            else:
                raise InvalidSchemaError(
                    config_file, line_num, f"Unknown option token: '{token}'"
                )
        return fields

    @staticmethod
    def _convert_default(option: OptionInfo, raw: str, line_num: int, config_file: str):
        """Coerce a ``default=`` token with the option's value type."""
        if option.is_boolean:
            return EnvironmentHelper.is_truthy(raw)
        try:
            if option.is_array:
                return [option.value_type(item) for item in raw.split(",") if item]
            return option.value_type(raw)
        except ValueError as e:
            raise InvalidSchemaError(
                config_file, line_num, f"Invalid default for '{option.dest}': {e}"
            ) from e

    @staticmethod
    def _process_values_line(
        line: str, line_num: int, config_file: str
    ) -> ValueListInfo:
        """Parse ``values DEST [MAX]`` into a ValueListInfo."""
        parts = line.split()
        if len(parts) not in (2, 3) or not ConfigManager._is_valid_dest(parts[1]):
            raise InvalidSchemaError(
                config_file, line_num, "Values line needs 'values DEST [MAX]'"
            )
        if len(parts) == 3:
            if not parts[2].isdigit():
                raise InvalidSchemaError(
                    config_file, line_num, f"Invalid maximum: '{parts[2]}'"
                )
            return ValueListInfo(parts[1], int(parts[2]))
        return ValueListInfo(parts[1])

    @staticmethod
    def _validate_extras(settings_data: SettingsData, config_file: str) -> None:
        years = settings_data.get("copyright_years", "")
        for year in years.split(","):
            if not year.strip():
                continue
            try:
                int(year)
            except ValueError as e:
                raise InvalidSchemaError(
                    config_file, message=f"Invalid copyright year: '{year.strip()}'"
                ) from e

    @staticmethod
    def _is_valid_dest(name: str) -> bool:
        """Destinations become attribute names, so they must be identifiers."""
        return bool(re.match(r"^[A-Za-z_][A-Za-z0-9_]*$", name))

    @staticmethod
    def _strip_quotes_from_value(value: str) -> str:
        """Strip quotes from value if present."""
        if len(value) >= 2 and (
            (value.startswith('"') and value.endswith('"'))
            or (value.startswith("'") and value.endswith("'"))
        ):
            return value[1:-1]
        return value
