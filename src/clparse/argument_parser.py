"""Switch classification and dispatch for clparse.

Every switch token goes through ``ArgumentParser.create``, which returns a
``LongOrOptionGroupParser`` for tokens starting with one of the recognized
prefixes. That parser decides, using the option map, which concrete
sub-parser handles the token:

* ``--verbose``, ``/output=a.txt``: long option (name longer than one
  character and declared in the map)
* ``-v``: short option (exactly one character after the prefix)
* ``-abc``, ``-ofile``: option group (clustered short switches)

All parsers of one pass share the same ``ErrorAccumulator``.
"""

from enum import Enum
from typing import Any

from .argument_enumerator import ArgumentEnumerator
from .environment_helper import debug_log
from .exceptions import (
    ArrayAttributeMismatchError,
    ArrayFieldMismatchError,
    EnumeratorRetreatError,
)
from .option_info import OptionInfo
from .option_map import OptionMap
from .parser_state import ParserState
from .parsing_error import ErrorAccumulator, ParsingError
from .settings import ParserSettings
from .types import InputValues, SplitSwitch

VALID_SWITCHES = ("--", "-", "/")


class SwitchKind(Enum):
    """Shape of a switch token, selecting the sub-parser that handles it."""

    SHORT_OPTION = "short"
    LONG_OPTION = "long"
    OPTION_GROUP = "group"


class ArgumentParser:
    """Base class and shared helpers for every switch parser."""

    def __init__(
        self,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ):
        self._errors = errors if errors is not None else ErrorAccumulator()
        self.settings = settings or ParserSettings()
        # None defers to the option map's own case setting
        self.case_sensitive = settings.case_sensitive if settings is not None else None

    @property
    def post_parsing_state(self) -> ErrorAccumulator:
        """Errors recorded so far in this pass."""
        return self._errors

    def parse(
        self, enumerator: ArgumentEnumerator, option_map: OptionMap, options: Any
    ) -> ParserState:
        raise NotImplementedError

    def define_option_that_violates_format(self, option: OptionInfo) -> ParserState:
        """Record a format error for a known option and fail."""
        debug_log(f"format violation: {option.name_for_display}")
        self._errors.add(
            ParsingError(option.short_name, option.long_name, violates_format=True)
        )
        return ParserState.FAILURE

    def define_unknown_option(
        self, short_name: str | None = None, long_name: str | None = None
    ) -> ParserState:
        """Record an unresolvable name and fail, unless unknown names are ignored."""
        if self.settings.ignore_unknown_arguments:
            debug_log(f"ignoring unknown option: {short_name or long_name}")
            return ParserState.SUCCESS
        debug_log(f"unknown option: {short_name or long_name}")
        self._errors.add(ParsingError(short_name, long_name, violates_format=True))
        return ParserState.FAILURE

    def lookup_option(self, option_map: OptionMap, name: str) -> OptionInfo | None:
        return option_map.lookup(name, self.case_sensitive)

    @staticmethod
    def create(
        argument: str,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ) -> "LongOrOptionGroupParser | None":
        """Return a dispatch parser for a switch token, None for anything else."""
        if argument in VALID_SWITCHES:
            return None

        for valid_switch in VALID_SWITCHES:
            if argument.startswith(valid_switch):
                return LongOrOptionGroupParser(len(valid_switch), errors, settings)

        return None

    @staticmethod
    def is_input_value(argument: str) -> bool:
        """True for positional values: ``-`` alone, empty tokens, or no switch prefix."""
        if argument:
            return argument == "-" or not ArgumentParser.starts_with_valid_switch(
                argument
            )
        return True

    @staticmethod
    def starts_with_valid_switch(argument: str) -> bool:
        return any(argument.startswith(switch) for switch in VALID_SWITCHES)

    @staticmethod
    def get_next_input_values(enumerator: ArgumentEnumerator) -> InputValues:
        """
        Collect the input values following the current token.

        Stops at the first switch or at the end of input, then steps the
        enumerator back once so the next ``move_next`` lands on that switch.

        Raises:
            EnumeratorRetreatError: If the enumerator cannot step back
        """
        values: InputValues = []

        while enumerator.move_next():
            if ArgumentParser.is_input_value(enumerator.current):
                values.append(enumerator.current)
            else:
                break

        if not enumerator.move_previous():
            raise EnumeratorRetreatError(enumerator.index)

        return values

    @staticmethod
    def split_switch(argument: str, switch_length: int) -> SplitSwitch:
        """Strip the switch prefix and split ``name=value`` on the first '='."""
        parts = argument[switch_length:].split("=", 1)
        if len(parts) == 2:
            return parts[0], parts[1]
        return parts[0], None

    @staticmethod
    def compare_short(argument: str, option: str, case_sensitive: bool) -> bool:
        return ArgumentParser._compare(argument, "-" + option, case_sensitive)

    @staticmethod
    def compare_long(argument: str, option: str, case_sensitive: bool) -> bool:
        return ArgumentParser._compare(argument, "--" + option, case_sensitive)

    @staticmethod
    def _compare(argument: str, expected: str, case_sensitive: bool) -> bool:
        if case_sensitive:
            return argument == expected
        return argument.lower() == expected.lower()

    @staticmethod
    def ensure_option_attribute_is_array_compatible(option: OptionInfo) -> None:
        """Refuse to write a list into an option not declared as an array option."""
        if not option.is_attribute_array_compatible:
            raise ArrayAttributeMismatchError(option.name_for_display)

    @staticmethod
    def ensure_option_array_attribute_is_not_bound_to_scalar(
        option: OptionInfo,
    ) -> None:
        """Refuse array options whose bound field is not a list."""
        if not option.is_array and option.is_attribute_array_compatible:
            raise ArrayFieldMismatchError(option.name_for_display)


def classify_switch(
    argument: str,
    switch_length: int,
    option_map: OptionMap,
    case_sensitive: bool | None = None,
) -> SwitchKind:
    """Decide which sub-parser handles a switch token."""
    name, _ = ArgumentParser.split_switch(argument, switch_length)
    if len(name) > 1 and option_map.lookup(name, case_sensitive) is not None:
        return SwitchKind.LONG_OPTION
    if len(argument) - switch_length == 1:
        return SwitchKind.SHORT_OPTION
    return SwitchKind.OPTION_GROUP


class LongOrOptionGroupParser(ArgumentParser):
    """Dispatches a switch token to the long option, short option or group parser."""

    def __init__(
        self,
        switch_length: int,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ):
        super().__init__(errors, settings)
        self.switch_length = switch_length
        self.inner_parser: ArgumentParser | None = None

    def parse(
        self, enumerator: ArgumentEnumerator, option_map: OptionMap, options: Any
    ) -> ParserState:
        # Import here to avoid circular import
        from .option_parsers import SUB_PARSERS

        kind = classify_switch(
            enumerator.current, self.switch_length, option_map, self.case_sensitive
        )
        debug_log(f"dispatch: {enumerator.current!r} -> {kind.value}")

        # The sub-parser writes into this parser's accumulator
        self.inner_parser = SUB_PARSERS[kind](
            self.switch_length, self.post_parsing_state, self.settings
        )
        self.inner_parser.case_sensitive = self.case_sensitive
        return self.inner_parser.parse(enumerator, option_map, options)
