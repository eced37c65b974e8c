"""Environment variable operations for clparse."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when CLPARSE_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        return os.environ.get("CLPARSE_DEBUG", "").lower() in TRUTHY_VALUES

    @staticmethod
    def get_config_override() -> str | None:
        """Get an explicit schema path from CLPARSE_CONFIG."""
        value = os.environ.get("CLPARSE_CONFIG", "").strip()
        return value or None

    @staticmethod
    def is_truthy(value: str) -> bool:
        return value.strip().lower() in TRUTHY_VALUES
