"""Help text and copyright string formatting for clparse."""

from typing import Callable, Iterable

from .option_info import OptionInfo


class CopyrightInfo:
    """Copyright line of a help screen, e.g. ``Copyright (C) 2005 - 2012 Jane Doe``."""

    COPYRIGHT_WORD = "Copyright"
    SYMBOL_LOWER = "(c)"
    SYMBOL_UPPER = "(C)"

    def __init__(self, author: str, *years: int, is_symbol_upper: bool = True):
        if not author:
            raise ValueError("author must not be empty")
        if not years:
            raise ValueError("at least one copyright year is required")

        self.author = author
        self.years = years
        self.is_symbol_upper = is_symbol_upper

    def __str__(self):
        symbol = self.SYMBOL_UPPER if self.is_symbol_upper else self.SYMBOL_LOWER
        return (
            f"{self.COPYRIGHT_WORD} {symbol} "
            f"{self.format_years(self.years)} {self.author}"
        )

    @staticmethod
    def format_years(years: Iterable[int]) -> str:
        """Join years with ', ' when consecutive and ' - ' across a gap."""
        years = list(years)
        if len(years) == 1:
            return str(years[0])

        parts = []
        for i, year in enumerate(years):
            parts.append(str(year))
            if i + 1 < len(years):
                parts.append(" - " if years[i + 1] - year > 1 else ", ")
        return "".join(parts)


OptionFormatter = Callable[[OptionInfo, str], str]


class HelpText:
    """Renders a heading, an optional copyright line and one line per option."""

    def __init__(
        self,
        heading: str,
        copyright: CopyrightInfo | str | None = None,
        on_format_option: OptionFormatter | None = None,
    ):
        self.heading = heading
        self.copyright = copyright
        self.on_format_option = on_format_option
        self._options: list[OptionInfo] = []

    def add_options(self, options: Iterable[OptionInfo]) -> "HelpText":
        self._options.extend(options)
        return self

    @staticmethod
    def format_names(option: OptionInfo) -> str:
        names = []
        if option.short_name:
            names.append(f"-{option.short_name}")
        if option.long_name:
            names.append(f"--{option.long_name}")
        text = ", ".join(names)
        if not option.is_boolean and option.meta_value:
            text += f" {option.meta_value}"
        return text

    def format_option(self, option: OptionInfo) -> str:
        description = option.help_text
        if option.required:
            description = f"Required. {description}".strip()
        if option.has_default_value and not option.is_boolean:
            description = f"{description} (Default: {option.default})".strip()

        # Callers may rewrite the description, e.g. to localize it
        if self.on_format_option:
            description = self.on_format_option(option, description)
        return description

    def render(self) -> str:
        lines = [self.heading]
        if self.copyright:
            lines.append(str(self.copyright))

        if self._options:
            names = [self.format_names(option) for option in self._options]
            width = max(len(name) for name in names) + 4
            lines.append("")
            for name, option in zip(names, self._options):
                lines.append(f"  {name.ljust(width)}{self.format_option(option)}".rstrip())

        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.render()
