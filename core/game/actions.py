"""Player actions accepted by the round controller."""

from enum import Enum, auto


class Action(Enum):
    """The four inputs the presentation layer can send."""

    HIT = auto()
    HOLD = auto()
    NEW_ROUND = auto()
    QUIT = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
