"""Repeated-draw tallies for checking a selector's empirical distribution."""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from weightedrandom.selector import WeightedSelector


class DrawReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    draws: int
    counts: dict[Any, int] = Field(default_factory=dict)

    def share(self, item: Hashable) -> float:
        if self.draws == 0:
            return 0.0
        return self.counts.get(item, 0) / self.draws


def tally_draws(selector: WeightedSelector[Hashable], draws: int) -> DrawReport:
    if draws < 0:
        raise ValueError("draws must be >= 0")
    counter: Counter[Hashable] = Counter(selector.draw() for _ in range(draws))
    return DrawReport(draws=draws, counts=dict(counter))


def expected_shares(selector: WeightedSelector[Hashable]) -> dict[Hashable, float]:
    """Exact per-item draw probabilities for the selector's current contents.

    Out of ``total_weight + 1`` equally likely outcomes every bucket but the
    lightest takes as many as its weight; the lightest takes the rest. Each
    bucket's share is split evenly across its instances.
    """
    outcomes = selector.total_weight + 1
    weights = selector.weights()
    remaining = outcomes
    shares: dict[Hashable, float] = {}
    for index, key in enumerate(weights):
        span = key if index < len(weights) - 1 else remaining
        remaining -= span
        bucket = selector.bucket(key)
        for item in bucket:
            shares[item] = shares.get(item, 0.0) + span / outcomes / len(bucket)
    return shares


def format_report_lines(report: DrawReport, expected: Mapping[Hashable, float]) -> list[str]:
    """Render one row per item: empirical and expected percentages."""
    items = list(expected)
    items.extend(item for item in report.counts if item not in expected)
    labels = [str(item) for item in items]
    width = max([len("Item")] + [len(label) for label in labels])
    lines = [f"{'Item':<{width}} | Percentage | Expected"]
    for item, label in zip(items, labels):
        observed = report.share(item) * 100
        target = expected.get(item)
        target_text = f"{target * 100:.4f}%" if target is not None else "-"
        lines.append(f"{label:<{width}} | {observed:9.4f}% | {target_text}")
    return lines
