"""Weighted-random item selection."""

from weightedrandom.errors import (
    EmptySelectorError,
    InvalidWeightError,
    LengthMismatchError,
    NoSuchItemError,
    NoSuchWeightError,
    NotFoundError,
    ScenarioError,
    WeightedRandomError,
)
from weightedrandom.selector import WeightedSelector, coerce_weight
from weightedrandom.util.rng import Rng

__all__ = [
    "EmptySelectorError",
    "InvalidWeightError",
    "LengthMismatchError",
    "NoSuchItemError",
    "NoSuchWeightError",
    "NotFoundError",
    "Rng",
    "ScenarioError",
    "WeightedRandomError",
    "WeightedSelector",
    "coerce_weight",
]
