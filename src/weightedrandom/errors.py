"""Error types raised by the selector and the scenario loader."""

from __future__ import annotations


class WeightedRandomError(Exception):
    """Base class for every error raised by this package."""


class InvalidWeightError(WeightedRandomError, ValueError):
    pass


class LengthMismatchError(WeightedRandomError, ValueError):
    pass


class NoSuchWeightError(WeightedRandomError, LookupError):
    pass


class NoSuchItemError(WeightedRandomError, LookupError):
    pass


class NotFoundError(WeightedRandomError, LookupError):
    pass


class EmptySelectorError(WeightedRandomError, LookupError):
    pass


class ScenarioError(WeightedRandomError):
    pass
