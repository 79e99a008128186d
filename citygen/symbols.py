"""Command symbols understood by the turtle that turns L-system strings into roads."""

FORWARD = "F"
RIGHT = "+"
LEFT = "-"
PUSH = "["
POP = "]"

COMMAND_SYMBOLS = frozenset({FORWARD, RIGHT, LEFT, PUSH, POP})


def is_command_symbol(symbol: str) -> bool:
    """Return True if ``symbol`` is one of the turtle command symbols."""
    return symbol in COMMAND_SYMBOLS