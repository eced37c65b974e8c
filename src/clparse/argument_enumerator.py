"""Cursors over command line tokens and over the characters of one token."""

from .types import ArgsList


class ArgumentEnumerator:
    """Cursor over the token list.

    The index starts before the first token. ``move_next`` may step one past
    the last token, so a scan that runs off the end can still be undone with
    ``move_previous``.
    """

    def __init__(self, args: ArgsList):
        self._args = list(args)
        self._index = -1

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> str:
        if not 0 <= self._index < len(self._args):
            raise IndexError(f"No current argument at position {self._index}")
        return self._args[self._index]

    @property
    def next(self) -> str | None:
        """The token after the current one, or None at the end."""
        if self._index + 1 < len(self._args):
            return self._args[self._index + 1]
        return None

    @property
    def is_last(self) -> bool:
        return self._index >= len(self._args) - 1

    def move_next(self) -> bool:
        if self._index < len(self._args):
            self._index += 1
        return self._index < len(self._args)

    def move_previous(self) -> bool:
        if self._index < 0:
            return False
        self._index -= 1
        return True


class CharEnumerator(ArgumentEnumerator):
    """Cursor over the characters of a clustered switch such as ``abc`` in ``-abc``."""

    def __init__(self, value: str):
        super().__init__(list(value))
        self._value = value

    def get_remaining_from_next(self) -> str:
        """Text following the current character, e.g. ``out.txt`` for ``o`` in ``oout.txt``."""
        return self._value[self._index + 1 :]
