"""Parser state flags returned by every argument parser."""

from enum import Flag


class ParserState(Flag):
    """Outcome of a single parse step.

    ``FAILURE`` and ``MOVE_ON_NEXT_ELEMENT`` are independent: the driver
    checks each bit on its own.
    """

    SUCCESS = 1
    FAILURE = 2
    MOVE_ON_NEXT_ELEMENT = 4


def boolean_to_parser_state(value: bool, add_move_next: bool = False) -> ParserState:
    """Map a match outcome to a parser state."""
    if value and not add_move_next:
        return ParserState.SUCCESS
    if value and add_move_next:
        return ParserState.SUCCESS | ParserState.MOVE_ON_NEXT_ELEMENT
    return ParserState.FAILURE
