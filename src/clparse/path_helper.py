"""Path operations for clparse."""

import os
from pathlib import Path

from .environment_helper import EnvironmentHelper

CONFIG_FILE_NAME = "clparse.conf"


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def get_config_path() -> Path | None:
        """Get the path to the schema file."""
        # An explicit override wins even when the file is missing
        if override := EnvironmentHelper.get_config_override():
            return Path(override).expanduser()

        # Check XDG_CONFIG_HOME first (standard location)
        if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
            config_path = Path(xdg_config_home) / CONFIG_FILE_NAME
            if config_path.exists():
                return config_path

        # Fall back to HOME/.config/clparse.conf
        home = os.getenv("HOME")
        if home:
            config_path = Path(home) / ".config" / CONFIG_FILE_NAME
            if config_path.exists():
                return config_path

        return None
