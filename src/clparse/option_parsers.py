"""Sub-parsers for each switch shape: long option, short option, option group."""

from typing import Any

from .argument_enumerator import ArgumentEnumerator, CharEnumerator
from .argument_parser import ArgumentParser, SwitchKind
from .option_info import OptionInfo
from .option_map import OptionMap
from .parser_state import ParserState, boolean_to_parser_state
from .parsing_error import ErrorAccumulator
from .settings import ParserSettings


class OptionParser(ArgumentParser):
    """Common constructor and value binding for the concrete sub-parsers."""

    def __init__(
        self,
        switch_length: int,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ):
        super().__init__(errors, settings)
        self.switch_length = switch_length

    def _bind_result(
        self, value_setting: bool, option: OptionInfo, add_move_next: bool = False
    ) -> ParserState:
        """Turn the outcome of a value write into a parser state."""
        if not value_setting:
            self.define_option_that_violates_format(option)
        return boolean_to_parser_state(value_setting, add_move_next)

    def _bind_array(
        self,
        option: OptionInfo,
        enumerator: ArgumentEnumerator,
        options: Any,
        first_value: str | None = None,
    ) -> ParserState:
        """Bind the inline value (if any) plus every input value that follows."""
        self.ensure_option_attribute_is_array_compatible(option)

        items = self.get_next_input_values(enumerator)
        if first_value is not None:
            items.insert(0, first_value)

        return self._bind_result(option.set_values(items, options), option)


class LongOptionParser(OptionParser):
    """Parses ``--name``, ``--name value``, ``--name=value`` and ``--name a b c``."""

    def __init__(
        self,
        switch_length: int = 2,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ):
        super().__init__(switch_length, errors, settings)

    def parse(
        self, enumerator: ArgumentEnumerator, option_map: OptionMap, options: Any
    ) -> ParserState:
        name, inline_value = self.split_switch(enumerator.current, self.switch_length)
        option = self.lookup_option(option_map, name)
        if option is None:
            return self.define_unknown_option(long_name=name)

        option.is_defined = True
        self.ensure_option_array_attribute_is_not_bound_to_scalar(option)

        if option.is_boolean:
            # Flags never take a value
            if inline_value is not None:
                return self.define_option_that_violates_format(option)
            return self._bind_result(option.set_flag(True, options), option)

        if inline_value is not None:
            if not option.is_array:
                return self._bind_result(
                    option.set_value(inline_value, options), option
                )
            return self._bind_array(option, enumerator, options, inline_value)

        if enumerator.is_last or not self.is_input_value(enumerator.next):
            return self.define_option_that_violates_format(option)

        if not option.is_array:
            # The value is the next token, the driver must skip it
            return self._bind_result(
                option.set_value(enumerator.next, options), option, add_move_next=True
            )
        return self._bind_array(option, enumerator, options)


class ShortOptionParser(OptionParser):
    """Parses a single short switch such as ``-v``, ``-o value`` or ``-ovalue``."""

    def __init__(
        self,
        switch_length: int = 1,
        errors: ErrorAccumulator | None = None,
        settings: ParserSettings | None = None,
    ):
        super().__init__(switch_length, errors, settings)

    def parse(
        self, enumerator: ArgumentEnumerator, option_map: OptionMap, options: Any
    ) -> ParserState:
        # Exactly one character follows the prefix, so it is also the last one
        group = CharEnumerator(enumerator.current[self.switch_length :])
        group.move_next()
        return self._parse_character(group, enumerator, option_map, options)

    def _define_unknown_character(
        self, short_name: str, enumerator: ArgumentEnumerator
    ) -> ParserState:
        """Record an unknown character, naming the whole ``--name`` it came from."""
        long_name = None
        if enumerator.current.startswith("--"):
            long_name, _ = self.split_switch(enumerator.current, self.switch_length)
        return self.define_unknown_option(short_name=short_name, long_name=long_name)

    def _parse_character(
        self,
        group: CharEnumerator,
        enumerator: ArgumentEnumerator,
        option_map: OptionMap,
        options: Any,
    ) -> ParserState | None:
        """
        Parse the short switch under the group cursor.

        Returns:
            The final parser state when this character ends the token, or
            None when it was a flag and the following characters still need
            parsing.
        """
        option = self.lookup_option(option_map, group.current)
        if option is None:
            state = self._define_unknown_character(group.current, enumerator)
            if state == ParserState.SUCCESS and not group.is_last:
                return None
            return state

        option.is_defined = True
        self.ensure_option_array_attribute_is_not_bound_to_scalar(option)

        if option.is_boolean:
            if (
                not group.is_last
                and not self.settings.ignore_unknown_arguments
                and self.lookup_option(option_map, group.next) is None
            ):
                # Fail before the flag is set
                return self._define_unknown_character(group.next, enumerator)
            option.set_flag(True, options)
            return None if not group.is_last else ParserState.SUCCESS

        if enumerator.is_last and group.is_last:
            return self.define_option_that_violates_format(option)

        if not group.is_last:
            # -ovalue and -o=value
            value = group.get_remaining_from_next()
            if value.startswith("="):
                value = value[1:]
            if not option.is_array:
                return self._bind_result(option.set_value(value, options), option)
            return self._bind_array(option, enumerator, options, value)

        if not self.is_input_value(enumerator.next):
            return self.define_option_that_violates_format(option)

        if not option.is_array:
            return self._bind_result(
                option.set_value(enumerator.next, options), option, add_move_next=True
            )
        return self._bind_array(option, enumerator, options)


class OptionGroupParser(ShortOptionParser):
    """Parses clustered short switches such as ``-abc`` or ``-vvo out.txt``."""

    def parse(
        self, enumerator: ArgumentEnumerator, option_map: OptionMap, options: Any
    ) -> ParserState:
        group = CharEnumerator(enumerator.current[self.switch_length :])
        while group.move_next():
            state = self._parse_character(group, enumerator, option_map, options)
            if state is not None:
                return state

        return ParserState.SUCCESS


SUB_PARSERS: dict[SwitchKind, type[OptionParser]] = {
    SwitchKind.SHORT_OPTION: ShortOptionParser,
    SwitchKind.LONG_OPTION: LongOptionParser,
    SwitchKind.OPTION_GROUP: OptionGroupParser,
}
