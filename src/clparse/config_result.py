"""Config result container for clparse."""

from types import SimpleNamespace

from .option_info import OptionInfo
from .option_map import OptionMap
from .settings import ParserSettings
from .text import CopyrightInfo
from .types import SettingsData


class ConfigResult:
    """Class to hold the option schema and parser settings read from a schema file."""

    def __init__(
        self,
        option_map: OptionMap,
        settings: ParserSettings,
        extras: SettingsData | None = None,
    ):
        self.option_map = option_map
        self.settings = settings
        self.extras = extras or {}

    def __contains__(self, name):
        """Allow checking if an option name is declared using 'in' operator."""
        return name in self.option_map

    def __getitem__(self, name) -> OptionInfo | None:
        """Allow dictionary-style access to options by short or long name."""
        return self.option_map[name]

    def __iter__(self):
        return iter(self.option_map)

    @property
    def heading(self) -> str:
        return self.extras.get("heading", "clparse")

    @property
    def copyright(self) -> CopyrightInfo | None:
        """Copyright line from ``copyright_holder`` and ``copyright_years``."""
        holder = self.extras.get("copyright_holder", "").strip()
        years = [
            int(year)
            for year in self.extras.get("copyright_years", "").split(",")
            if year.strip()
        ]
        if not holder or not years:
            return None
        return CopyrightInfo(holder, *years)

    def new_options(self) -> SimpleNamespace:
        """Blank options object with one attribute per declared destination."""
        options = SimpleNamespace()
        self.option_map.set_defaults(options)
        return options
