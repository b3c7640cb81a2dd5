import pytest
from pydantic import ValidationError

from weightedrandom import config
from weightedrandom.errors import ScenarioError
from weightedrandom.scenarios import Scenario, ScenarioEntry, build_selector, load_scenarios
from weightedrandom.util.rng import Rng


def _write(tmp_path, text):
    path = tmp_path / "scenarios.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_demo_scenario():
    library = load_scenarios(config.SCENARIOS_PATH)
    scenario = library.get(config.DEMO_SCENARIO)
    assert scenario.draws == config.DEMO_DRAWS
    assert [entry.weight for entry in scenario.entries] == [50, 20, 15, 15]


def test_load_is_cached(tmp_path):
    path = _write(tmp_path, "scenarios:\n  - id: one\n    entries: []\n")
    assert load_scenarios(path) is load_scenarios(path)


def test_unknown_scenario(tmp_path):
    path = _write(tmp_path, "scenarios:\n  - id: one\n")
    with pytest.raises(ScenarioError, match="one"):
        load_scenarios(path).get("two")


def test_empty_file(tmp_path):
    path = _write(tmp_path, "")
    assert load_scenarios(path).scenarios == []


def test_rejects_unknown_keys(tmp_path):
    path = _write(tmp_path, "scenarios:\n  - id: one\n    colour: red\n")
    with pytest.raises(ValidationError):
        load_scenarios(path)


def test_rejects_negative_weight():
    with pytest.raises(ValidationError):
        ScenarioEntry(item="a", weight=-1)


def test_build_selector_floors_weights():
    scenario = Scenario(
        id="tied",
        entries=[
            ScenarioEntry(item="A", weight=10),
            ScenarioEntry(item="B", weight=10.7),
            ScenarioEntry(item="C", weight=5),
        ],
    )
    selector = build_selector(scenario, Rng(1))
    assert selector.total_weight == 25
    assert selector.weights() == [10, 5]

