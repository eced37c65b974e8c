"""Parser settings for clparse."""

from .environment_helper import EnvironmentHelper
from .types import SettingsData


class ParserSettings:
    """Switches controlling how a parse pass behaves."""

    KEYS = (
        "case_sensitive",
        "ignore_unknown_arguments",
        "mutually_exclusive",
        "halt_on_first_error",
    )

    def __init__(
        self,
        case_sensitive: bool = True,
        ignore_unknown_arguments: bool = False,
        mutually_exclusive: bool = False,
        halt_on_first_error: bool = False,
    ):
        self.case_sensitive = case_sensitive
        self.ignore_unknown_arguments = ignore_unknown_arguments
        self.mutually_exclusive = mutually_exclusive
        self.halt_on_first_error = halt_on_first_error

    @classmethod
    def from_dict(cls, data: SettingsData) -> "ParserSettings":
        """Build settings from raw KEY=VALUE pairs, ignoring unrelated keys."""
        values = {
            key: EnvironmentHelper.is_truthy(data[key]) for key in cls.KEYS if key in data
        }
        return cls(**values)

    def __eq__(self, other):
        if not isinstance(other, ParserSettings):
            return NotImplemented
        return all(getattr(self, key) == getattr(other, key) for key in self.KEYS)

    def __repr__(self):
        fields = ", ".join(f"{key}={getattr(self, key)!r}" for key in self.KEYS)
        return f"ParserSettings({fields})"
