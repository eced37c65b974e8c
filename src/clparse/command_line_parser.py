"""Top-level parse pass driving the switch parsers over an argument vector."""

from typing import Any

from .argument_enumerator import ArgumentEnumerator
from .argument_parser import ArgumentParser
from .environment_helper import debug_log
from .option_map import OptionMap
from .parse_result import ParseResult
from .parser_state import ParserState
from .parsing_error import ErrorAccumulator, ParsingError
from .settings import ParserSettings
from .types import ArgsList


class CommandLineParser:
    """Parses argument vectors into an options object.

    Explicit settings, including ``case_sensitive``, apply to every name
    lookup of the pass. Without them the option map's settings are used.
    """

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings

    def parse_arguments(
        self, args: ArgsList, options: Any, option_map: OptionMap
    ) -> ParseResult:
        """
        Run one parse pass.

        Args:
            args: Argument vector without the program name
            options: Object receiving option values as attributes
            option_map: Declared options

        Returns:
            ParseResult whose ``errors`` holds every user input error in
            detection order

        Raises:
            ParserInternalError: If the declared options contradict
                themselves; the pass is aborted
        """
        settings = self.settings or option_map.settings
        errors = ErrorAccumulator()
        had_error = False
        halted = False

        option_map.set_defaults(options)
        arguments = ArgumentEnumerator(args)

        while arguments.move_next():
            argument = arguments.current
            if not argument:
                continue

            parser = ArgumentParser.create(argument, errors, settings)
            if parser is not None:
                result = parser.parse(arguments, option_map, options)
                if ParserState.FAILURE in result:
                    debug_log(f"parse_arguments: {argument!r} failed")
                    had_error = True
                    if settings.halt_on_first_error:
                        halted = True
                        break
                    continue

                if ParserState.MOVE_ON_NEXT_ELEMENT in result:
                    arguments.move_next()
            elif option_map.value_list is not None:
                if not option_map.value_list.add_value_item_if_allowed(
                    argument, options
                ):
                    debug_log(f"parse_arguments: value list full at {argument!r}")
                    errors.add(
                        ParsingError(
                            None, option_map.value_list.dest, violates_format=True
                        )
                    )
                    had_error = True
                    if settings.halt_on_first_error:
                        halted = True
                        break

        if not halted and not option_map.enforce_rules(errors, settings):
            had_error = True

        return ParseResult(not had_error and not errors, options, errors)
