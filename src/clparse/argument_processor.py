"""Handling of the clparse tool's own command line."""

from .exceptions import ClparseError
from .types import ArgsList, ArgsPair


class ArgumentProcessor:
    """Splits the tool's own options from the arguments it should parse."""

    @staticmethod
    def split_at_separator(args: ArgsList) -> ArgsPair:
        """Split arguments at the first '--' separator, dropping the separator."""
        if "--" in args:
            idx = args.index("--")
            return args[:idx], args[idx + 1 :]
        return args, []

    @staticmethod
    def parse_tool_args(args: ArgsList) -> tuple[str | None, ArgsList]:
        """
        Extract ``-c/--config PATH`` from the tool's own arguments.

        Returns:
            Tuple of (config_path, remaining_args)
        """
        config_path = None
        rest: ArgsList = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in ("-c", "--config"):
                if i + 1 >= len(args):
                    raise ClparseError(f"{arg} requires value")
                config_path = args[i + 1]
                i += 2
                continue
            elif arg.startswith("--config="):
                config_path = arg.split("=", 1)[1]
                i += 1
                continue

            rest.append(arg)
            i += 1
        return config_path, rest
