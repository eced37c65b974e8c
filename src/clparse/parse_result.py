"""Parse result container for clparse."""

from typing import Any

from .parsing_error import ErrorAccumulator, ParsingError


class ParseResult:
    """Class to hold the bound options object and the errors of one pass."""

    def __init__(self, success: bool, options: Any, errors: ErrorAccumulator):
        self.success = success
        self.options = options
        self.errors = errors

    def __bool__(self):
        """Allow ``if result:`` checks for a clean parse."""
        return self.success

    def __iter__(self):
        """Allow iterating over the recorded errors."""
        return iter(self.errors)

    def __len__(self):
        return len(self.errors)

    def errors_for(self, name: str) -> list[ParsingError]:
        """Errors recorded against a short or long option name."""
        return [
            error
            for error in self.errors
            if name in (error.short_name, error.long_name)
        ]

    def __repr__(self):
        return f"ParseResult(success={self.success!r}, errors={self.errors!r})"
