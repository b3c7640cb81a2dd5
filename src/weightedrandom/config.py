"""Defaults shared by the demo scripts."""

from __future__ import annotations

from pathlib import Path

SEED = 1337

DEMO_SCENARIO = "original_demo"
DEMO_DRAWS = 10_000_000

SCENARIOS_PATH = Path(__file__).resolve().parents[2] / "data" / "scenarios.yml"
