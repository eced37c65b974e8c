"""Parsing error records and the append-only error accumulator."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ParsingError:
    """A single user input error found during a parse pass."""

    short_name: str | None
    long_name: str | None
    violates_format: bool = False
    violates_required: bool = False
    violates_mutual_exclusiveness: bool = False

    @property
    def name(self) -> str:
        """Best display name for the offending option."""
        if self.long_name:
            return f"--{self.long_name}"
        if self.short_name:
            return f"-{self.short_name}"
        return "<unknown>"

    def describe(self) -> str:
        if self.violates_required:
            return f"Required option '{self.name}' is missing"
        if self.violates_mutual_exclusiveness:
            return f"Option '{self.name}' is mutually exclusive with another option"
        return f"Option '{self.name}' has an invalid format"


class ErrorAccumulator:
    """Ordered list of parsing errors, in detection order.

    Errors can only be appended; nothing is ever removed.
    """

    def __init__(self):
        self._errors: list[ParsingError] = []

    def add(self, error: ParsingError) -> None:
        self._errors.append(error)

    def __len__(self):
        return len(self._errors)

    def __iter__(self) -> Iterator[ParsingError]:
        return iter(self._errors)

    def __getitem__(self, index):
        return self._errors[index]

    def __bool__(self):
        return bool(self._errors)

    def __eq__(self, other):
        """Allow comparison with a plain list of errors."""
        if isinstance(other, list):
            return self._errors == other
        if isinstance(other, ErrorAccumulator):
            return self._errors == other._errors
        return NotImplemented

    def __repr__(self):
        return f"ErrorAccumulator({self._errors!r})"

    def to_list(self) -> list[ParsingError]:
        return list(self._errors)
