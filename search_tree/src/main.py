import logging
from pathlib import Path

from search_tree.src.base.config_loader import get_scenarios_from_config
from search_tree.src.exercise import run_exercise


def main(config_path: Path | None = None):
    logging.basicConfig(level=logging.INFO)
    for scenario in get_scenarios_from_config(config_path):
        print(run_exercise(scenario))
        print()


if __name__ == "__main__":
    main()
