import json
import logging
from pathlib import Path

from search_tree.src.base.scenario import Scenario


def get_scenarios(json_data_from_file: dict) -> list[Scenario]:
    assert (
        isinstance(json_data_from_file, dict) and "scenarios" in json_data_from_file
    ), "Config has no `scenarios` list"
    assert isinstance(
        json_data_from_file["scenarios"], list
    ), "Config `scenarios` must be a list"

    scenarios = []
    for ind, entry in enumerate(json_data_from_file["scenarios"]):
        assert isinstance(entry, dict), f"Scenario {ind} must be an object: {entry}"
        title = entry.get("title")
        assert isinstance(title, str), f"Scenario {ind} needs a string title"

        keys = entry.get("keys")
        assert isinstance(keys, list), f"Scenario `{title}` needs a list of keys"
        # bool is an int subclass, but true/false in the config is a typo
        assert all(
            isinstance(key, int) and not isinstance(key, bool) for key in keys
        ), f"Scenario `{title}` has non integer keys: {keys}"

        scenarios.append(Scenario(title=title, keys=keys))
    return scenarios


SCENARIO_CONFIG_FILE = "scenarios_config.json"


def get_scenarios_from_config(config_path: Path | None = None) -> list[Scenario]:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / SCENARIO_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    scenarios = get_scenarios(json_data_from_file)
    logging.debug(f"loaded {len(scenarios)} scenarios from {config_path}")
    return scenarios
