"""
Type aliases for clparse.

This module provides centralized type definitions used throughout the parser
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of raw command line tokens
    InputValues: Values collected after a switch
    SplitSwitch: Switch name and its optional inline value
    SettingsData: Dictionary of raw settings read from a schema file
    ValueConverter: Callable coercing a raw string to an option value
    ExitCode: Integer representing exit codes
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

ArgsList = List[str]
"""List of string tokens, usually the process argument vector without the program name."""

InputValues = List[str]
"""Input values collected after a switch (e.g., ['a.txt', 'b.txt'] for '--files a.txt b.txt')."""

SplitSwitch = Tuple[str, Optional[str]]
"""Switch name and inline value (e.g., ('output', 'a.txt') for '--output=a.txt' or ('v', None))."""

SettingsData = Dict[str, str]
"""Dictionary of raw KEY=VALUE settings read from a schema file."""

ValueConverter = Callable[[str], Any]
"""Callable converting a raw string value to the option's type (e.g., int)."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

ArgsPair = Tuple[ArgsList, ArgsList]
"""Tuple representing arguments before and after separator (e.g., (tool_args, parsed_args))."""
