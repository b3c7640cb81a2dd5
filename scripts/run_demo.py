from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from weightedrandom import config
from weightedrandom.sampling import expected_shares, format_report_lines, tally_draws
from weightedrandom.scenarios import build_selector, load_scenarios
from weightedrandom.util.rng import Rng


def main() -> None:
    parser = argparse.ArgumentParser(description="Draw from a weighted scenario and report percentages.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--scenario", type=str, default=config.DEMO_SCENARIO)
    parser.add_argument("--scenarios", type=Path, default=config.SCENARIOS_PATH)
    parser.add_argument("--draws", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scenario = load_scenarios(args.scenarios).get(args.scenario)
    draws = args.draws if args.draws is not None else scenario.draws
    rng = Rng(args.seed)
    selector = build_selector(scenario, rng.fork(scenario.id))
    report = tally_draws(selector, draws)

    print(f"Scenario: {scenario.id} (seed {args.seed}, {draws} draws)")
    if scenario.description:
        print(scenario.description)
    for line in format_report_lines(report, expected_shares(selector)):
        print(line)


if __name__ == "__main__":
    main()
