"""Custom exceptions for clparse."""


class ClparseError(Exception):
    """Base exception for clparse errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParserInternalError(ClparseError):
    """Raised when the parser detects a programmer or declaration error.

    These are never user input errors: the parse pass is aborted and its
    partial results must not be trusted.
    """


class EnumeratorRetreatError(ParserInternalError):
    """Raised when the token enumerator cannot step back after a scan."""

    def __init__(self, index: int):
        super().__init__(f"Cannot move argument enumerator back from position {index}")
        self.index = index


class ArrayAttributeMismatchError(ParserInternalError):
    """Raised when a list value is written to an option not declared as array."""

    def __init__(self, option_name: str):
        super().__init__(
            f"Option '{option_name}' is bound to an array field "
            "but is not declared as an array option"
        )
        self.option_name = option_name


class ArrayFieldMismatchError(ParserInternalError):
    """Raised when an array option is bound to a scalar field."""

    def __init__(self, option_name: str):
        super().__init__(
            f"Option '{option_name}' is declared as an array option "
            "but is bound to a scalar field"
        )
        self.option_name = option_name


class DuplicateOptionError(ClparseError):
    """Raised when two options in a map share a name."""

    def __init__(self, name: str):
        super().__init__(f"Option name '{name}' is declared more than once")
        self.name = name


class SchemaNotFoundError(ClparseError):
    """Raised when the schema file cannot be found."""

    def __init__(self, path: str | None = None):
        message = f"Schema file not found{': ' + path if path else ''}"
        super().__init__(message)
        self.path = path


class InvalidSchemaError(ClparseError):
    """Raised when the schema file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid schema format",
    ):
        full_message = f"Invalid schema in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num
