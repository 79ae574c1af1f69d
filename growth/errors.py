"""
Exceptions raised by the growth engine.
"""


class GrowthError(Exception):
    pass


class ConfigurationError(GrowthError, ValueError):
    """Raised at construction time for settings that can never produce an artwork."""


class OutOfBoundsError(GrowthError):
    """A point or occupant center fell strictly outside the grid bounds."""

    def __init__(self, item, message: str = "out of bounds call for this grid"):
        super().__init__(f"{message}: {item!r}")
        self.item = item
