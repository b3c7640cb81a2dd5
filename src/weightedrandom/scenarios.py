"""Load demo scenarios from YAML and turn them into selectors."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from weightedrandom import config
from weightedrandom.errors import ScenarioError
from weightedrandom.selector import WeightedSelector
from weightedrandom.util.rng import Rng

logger = logging.getLogger(__name__)


class ScenarioEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    item: str
    weight: float = Field(ge=0)


class Scenario(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    description: str = ""
    draws: int = Field(default=config.DEMO_DRAWS, gt=0)
    entries: list[ScenarioEntry] = Field(default_factory=list)


class ScenarioLibrary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scenarios: list[Scenario] = Field(default_factory=list)

    def get(self, scenario_id: str) -> Scenario:
        for scenario in self.scenarios:
            if scenario.id == scenario_id:
                return scenario
        known = ", ".join(scenario.id for scenario in self.scenarios) or "none"
        raise ScenarioError(f"Unknown scenario id: {scenario_id} (known: {known})")


_LIBRARY_CACHE: dict[Path, ScenarioLibrary] = {}


def load_scenarios(path: Path | None = None) -> ScenarioLibrary:
    """Load the scenario library from YAML once per path and cache it."""
    scenario_path = (path or config.SCENARIOS_PATH).resolve()
    cached = _LIBRARY_CACHE.get(scenario_path)
    if cached is not None:
        return cached
    data = yaml.safe_load(scenario_path.read_text(encoding="utf-8")) or {}
    library = ScenarioLibrary.model_validate(data)
    logger.debug("Loaded %d scenarios from %s", len(library.scenarios), scenario_path)
    _LIBRARY_CACHE[scenario_path] = library
    return library


def build_selector(scenario: Scenario, rng: Rng | None = None) -> WeightedSelector[str]:
    selector: WeightedSelector[str] = WeightedSelector(rng)
    selector.add_all(
        [entry.item for entry in scenario.entries],
        [entry.weight for entry in scenario.entries],
    )
    return selector
