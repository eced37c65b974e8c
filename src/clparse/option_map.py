"""Lookup structure from option names to option descriptors."""

from typing import Any, Iterable, Iterator

from .exceptions import DuplicateOptionError
from .option_info import OptionInfo, ValueListInfo
from .parsing_error import ErrorAccumulator, ParsingError
from .settings import ParserSettings


class OptionMap:
    """Maps short and long names to their OptionInfo.

    ``option_map[name]`` returns None for unknown names instead of raising,
    so parsers can test the result directly. It honors the map's own case
    setting; ``lookup`` lets a parser pass its own.
    """

    def __init__(
        self,
        options: Iterable[OptionInfo],
        settings: ParserSettings | None = None,
        value_list: ValueListInfo | None = None,
    ):
        self.settings = settings or ParserSettings()
        self.value_list = value_list
        self._options: list[OptionInfo] = []
        self._names: dict[str, OptionInfo] = {}
        self._folded_names: dict[str, OptionInfo] = {}
        self._declared: set[str] = set()

        for option in options:
            self._register(option)

    def _key(self, name: str) -> str:
        return name if self.settings.case_sensitive else name.lower()

    def _register(self, option: OptionInfo) -> None:
        for name in (option.short_name, option.long_name):
            if not name:
                continue
            if self._key(name) in self._declared:
                raise DuplicateOptionError(name)
            self._declared.add(self._key(name))
            self._names[name] = option
            # First declaration wins when names only differ in case
            self._folded_names.setdefault(name.lower(), option)
        self._options.append(option)

    def lookup(
        self, name: str, case_sensitive: bool | None = None
    ) -> OptionInfo | None:
        """Find an option by name, None when unknown.

        ``case_sensitive`` defaults to the map's settings.
        """
        if case_sensitive is None:
            case_sensitive = self.settings.case_sensitive
        if case_sensitive:
            return self._names.get(name)
        return self._folded_names.get(name.lower())

    def __getitem__(self, name: str) -> OptionInfo | None:
        return self.lookup(name)

    def __contains__(self, name):
        return self[name] is not None

    def __iter__(self) -> Iterator[OptionInfo]:
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def get(self, name: str, default: OptionInfo | None = None) -> OptionInfo | None:
        option = self[name]
        return default if option is None else option

    def set_defaults(self, options: Any) -> None:
        """Write every option's default, and an empty value list, onto options."""
        for option in self._options:
            option.is_defined = False
            option.set_default(options)
        if self.value_list:
            self.value_list.set_default(options)

    def enforce_rules(
        self, errors: ErrorAccumulator, settings: ParserSettings | None = None
    ) -> bool:
        """Check mutual exclusiveness and required options after a pass."""
        settings = settings or self.settings
        mutually_exclusive_ok = (
            not settings.mutually_exclusive
            or self._enforce_mutually_exclusive(errors)
        )
        required_ok = self._enforce_required(errors)
        return mutually_exclusive_ok and required_ok

    def _enforce_required(self, errors: ErrorAccumulator) -> bool:
        ok = True
        for option in self._options:
            if option.required and not option.is_defined:
                errors.add(
                    ParsingError(
                        option.short_name, option.long_name, violates_required=True
                    )
                )
                ok = False
        return ok

    def _enforce_mutually_exclusive(self, errors: ErrorAccumulator) -> bool:
        defined_by_set: dict[str, list[OptionInfo]] = {}
        for option in self._options:
            if option.is_defined and option.mutually_exclusive_set:
                defined_by_set.setdefault(option.mutually_exclusive_set, []).append(
                    option
                )

        ok = True
        for defined in defined_by_set.values():
            if len(defined) > 1:
                ok = False
                for option in defined:
                    errors.add(
                        ParsingError(
                            option.short_name,
                            option.long_name,
                            violates_mutual_exclusiveness=True,
                        )
                    )
        return ok
