"""Weight-bucketed container that draws one item at random.

Items are grouped into buckets keyed by their integer weight. A draw picks a
number in ``[0, total_weight]`` (both ends inclusive), walks the buckets from
heaviest to lightest subtracting each bucket weight once, and lands in the
first bucket that takes the number below zero. A bucket is reached in
proportion to its weight, not its weight times its size. The lightest bucket
is taken when nothing else is, so it absorbs every remaining outcome,
including ``r == total_weight``.
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import Generic, Iterator, Sequence, TypeVar

from weightedrandom.errors import (
    EmptySelectorError,
    InvalidWeightError,
    LengthMismatchError,
    NoSuchItemError,
    NoSuchWeightError,
    NotFoundError,
)
from weightedrandom.util.rng import Rng

logger = logging.getLogger(__name__)

T = TypeVar("T")


def coerce_weight(weight: float) -> int:
    """Floor ``weight`` to an int, rejecting negative and non-finite values."""
    try:
        value = math.floor(weight)
    except (OverflowError, ValueError) as exc:
        raise InvalidWeightError(f"Weight must be finite: {weight!r}") from exc
    if value < 0:
        raise InvalidWeightError(f"Weights cannot be negative: {weight!r}")
    return value


def _weight_key(weight: float) -> int:
    try:
        return math.floor(weight)
    except (OverflowError, ValueError) as exc:
        raise NoSuchWeightError(f"There are no items with a weight of {weight!r}") from exc


class WeightedSelector(Generic[T]):
    """Holds weighted items and draws one at random.

    Args:
        rng: Random source used by ``draw``. A fresh entropy-seeded ``Rng``
            is created when omitted; pass a seeded one for reproducible runs.

    Mutations are not synchronised. Concurrent ``draw`` calls are fine as long
    as nothing mutates the selector meanwhile.
    """

    def __init__(self, rng: Rng | None = None):
        self.rng = rng if rng is not None else Rng.from_entropy()
        self._buckets: dict[int, list[T]] = {}
        # ascending; walked in reverse for heaviest-first iteration
        self._keys: list[int] = []
        self._total_weight = 0

    @property
    def total_weight(self) -> int:
        return self._total_weight

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def __contains__(self, item: object) -> bool:
        return any(item in bucket for bucket in self._buckets.values())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(buckets={len(self._buckets)}, "
            f"items={len(self)}, total_weight={self._total_weight})"
        )

    def weights(self) -> list[int]:
        """Return the bucket weights, heaviest first."""
        return self._keys[::-1]

    def bucket(self, weight: float) -> tuple[T, ...]:
        key = _weight_key(weight)
        if key not in self._buckets:
            raise NoSuchWeightError(f"There are no items with a weight of {key}")
        return tuple(self._buckets[key])

    def items(self) -> Iterator[tuple[int, T]]:
        for weight in self.weights():
            for item in self._buckets[weight]:
                yield weight, item

    def count(self, item: object) -> int:
        return sum(bucket.count(item) for bucket in self._buckets.values())

    def add(self, item: T, weight: float) -> None:
        key = coerce_weight(weight)
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = self._buckets[key] = []
            bisect.insort(self._keys, key)
            logger.debug("Created bucket for weight %d", key)
        bucket.append(item)
        self._total_weight += key

    def add_all(self, items: Sequence[T], weights: Sequence[float]) -> None:
        """Add ``items[i]`` with ``weights[i]`` for every index, in order."""
        if len(items) != len(weights):
            raise LengthMismatchError(
                f"Items and weights must be equal lengths ({len(items)} != {len(weights)})"
            )
        for item, weight in zip(items, weights):
            self.add(item, weight)

    def remove(self, item: T, weight: float) -> None:
        """Remove the first instance of ``item`` stored under ``weight``."""
        key = _weight_key(weight)
        bucket = self._buckets.get(key)
        if bucket is None:
            raise NoSuchWeightError(f"There are no items with a weight of {key}")
        try:
            bucket.remove(item)
        except ValueError:
            raise NoSuchItemError(f"There is no {item!r} with a weight of {key}") from None
        self._total_weight -= key
        if not bucket:
            self._drop_bucket(key)

    def remove_weight(self, weight: float) -> list[T]:
        """Remove every item stored under ``weight`` and return them."""
        key = _weight_key(weight)
        if key not in self._buckets:
            raise NoSuchWeightError(f"There are no items with a weight of {key}")
        removed = self._drop_bucket(key)
        self._total_weight -= key * len(removed)
        return removed

    def remove_any(self, item: T) -> int:
        """Remove one instance of ``item`` from each bucket holding it.

        Returns the number of instances removed.
        """
        affected = [key for key in self.weights() if item in self._buckets[key]]
        if not affected:
            raise NotFoundError(f"The item {item!r} could not be found")
        for key in affected:
            self.remove(item, key)
        return len(affected)

    def clear(self) -> None:
        self._buckets.clear()
        self._keys.clear()
        self._total_weight = 0

    def percentage_of(self, item: T) -> float:
        """Return ``weight / total_weight`` for the heaviest bucket holding ``item``.

        This is the bucket's share, not the item's draw probability. A draw
        picks a bucket by its weight alone and then one of its N items
        uniformly, so each of N distinct items in the bucket is drawn with
        probability ``weight / (total_weight * N)``. Other buckets holding the
        same item are ignored.
        """
        for key in self.weights():
            if item in self._buckets[key]:
                if self._total_weight == 0:
                    raise EmptySelectorError("Total weight is zero; percentages are undefined")
                return key / self._total_weight
        raise NotFoundError(f"The item {item!r} could not be found")

    def draw(self) -> T:
        if not self._buckets:
            raise EmptySelectorError(
                "There are no items in the selector; use add() to populate it"
            )
        pick = self.rng.randint(0, self._total_weight)
        weights = self.weights()
        for key in weights[:-1]:
            pick -= key
            if pick < 0:
                return self._pick_from(key)
        return self._pick_from(weights[-1])

    def _pick_from(self, key: int) -> T:
        bucket = self._buckets[key]
        if len(bucket) > 1:
            return bucket[self.rng.randbelow(len(bucket))]
        return bucket[0]

    def _drop_bucket(self, key: int) -> list[T]:
        bucket = self._buckets.pop(key)
        self._keys.remove(key)
        logger.debug("Dropped bucket for weight %d (%d items)", key, len(bucket))
        return bucket

