"""Option descriptors and the positional value list declaration."""

from typing import Any

from .environment_helper import debug_log
from .types import InputValues, ValueConverter


class OptionInfo:
    """Describes one declared option and how it binds into an options object.

    Args:
        dest: Attribute name written on the options object
        short_name: Single character name used as ``-x``
        long_name: Name used as ``--name``
        value_type: Callable coercing a raw string, ``bool`` for flags
        is_array: The bound field holds a list
        array_compatible: The option is declared as an array option,
            defaults to ``is_array``
        required: Missing option is reported after the pass
        default: Value written before parsing starts
        mutually_exclusive_set: Options sharing a set may not be combined
    """

    def __init__(
        self,
        dest: str,
        short_name: str | None = None,
        long_name: str | None = None,
        value_type: ValueConverter = str,
        is_array: bool = False,
        array_compatible: bool | None = None,
        required: bool = False,
        default: Any = None,
        mutually_exclusive_set: str | None = None,
        help_text: str = "",
        meta_value: str | None = None,
    ):
        if not short_name and not long_name:
            raise ValueError(f"Option '{dest}' needs a short or a long name")
        if short_name and len(short_name) != 1:
            raise ValueError(f"Short name '{short_name}' must be one character")

        self.dest = dest
        self.short_name = short_name
        self.long_name = long_name
        self.value_type = value_type
        self.is_array = is_array
        self.is_attribute_array_compatible = (
            is_array if array_compatible is None else array_compatible
        )
        self.required = required
        self.default = default
        self.mutually_exclusive_set = mutually_exclusive_set
        self.help_text = help_text
        self.meta_value = meta_value
        self.is_defined = False

    @property
    def is_boolean(self) -> bool:
        return self.value_type is bool

    @property
    def has_default_value(self) -> bool:
        return self.default is not None

    @property
    def name_for_display(self) -> str:
        return f"--{self.long_name}" if self.long_name else f"-{self.short_name}"

    def __repr__(self):
        return (
            f"OptionInfo(dest={self.dest!r}, short_name={self.short_name!r}, "
            f"long_name={self.long_name!r})"
        )

    def set_value(self, value: str | None, options: Any) -> bool:
        """Coerce and bind a scalar value. Returns False when coercion fails."""
        if value is None:
            return False
        try:
            converted = self.value_type(value)
        except (TypeError, ValueError) as e:
            debug_log(f"set_value: {self.name_for_display} rejected {value!r}: {e}")
            return False
        setattr(options, self.dest, converted)
        return True

    def set_values(self, values: InputValues, options: Any) -> bool:
        """Coerce and bind a list value. Returns False when any item fails."""
        try:
            converted = [self.value_type(value) for value in values]
        except (TypeError, ValueError) as e:
            debug_log(f"set_values: {self.name_for_display} rejected {values!r}: {e}")
            return False
        setattr(options, self.dest, converted)
        return True

    def set_flag(self, value: bool, options: Any) -> bool:
        """Bind a boolean flag."""
        setattr(options, self.dest, value)
        return True

    def set_default(self, options: Any) -> None:
        if self.has_default_value:
            value = list(self.default) if self.is_array else self.default
        elif self.is_boolean:
            value = False
        elif self.is_array:
            value = []
        else:
            value = None
        setattr(options, self.dest, value)


class ValueListInfo:
    """Declares the options field receiving positional (non-switch) values."""

    def __init__(self, dest: str, maximum_elements: int = -1):
        self.dest = dest
        self.maximum_elements = maximum_elements

    def set_default(self, options: Any) -> None:
        setattr(options, self.dest, [])

    def add_value_item_if_allowed(self, value: str, options: Any) -> bool:
        items = getattr(options, self.dest)
        if 0 <= self.maximum_elements <= len(items):
            return False
        items.append(value)
        return True
