"""Exception hierarchy for the domino bot.

A missing move is not an error: strategies return ``None`` to signal a
pass.
"""

from __future__ import annotations


class DominoBotError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfiguration(DominoBotError, ValueError):
    """An unknown or unusable difficulty selector was requested."""


class StrategyNotImplemented(InvalidConfiguration, NotImplementedError):
    """A recognised difficulty whose strategy does not exist yet."""


class InvalidInput(DominoBotError, ValueError):
    """A hand or board that the strategy cannot reason about."""
