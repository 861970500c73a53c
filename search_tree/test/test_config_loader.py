import json
import tempfile
import unittest
from pathlib import Path

from search_tree.src.base.config_loader import (
    get_scenarios,
    get_scenarios_from_config,
)
from search_tree.src.base.scenario import Scenario


class TestGetScenarios(unittest.TestCase):
    def test_parses_entries_in_order(self):
        scenarios = get_scenarios(
            {
                "scenarios": [
                    {"title": "first", "keys": [3, 1, 2]},
                    {"title": "empty", "keys": []},
                ]
            }
        )
        self.assertEqual(
            scenarios, [Scenario("first", [3, 1, 2]), Scenario("empty", [])]
        )

    def test_missing_scenarios(self):
        with self.assertRaises(AssertionError):
            get_scenarios({})

    def test_scenarios_not_a_list(self):
        with self.assertRaises(AssertionError):
            get_scenarios({"scenarios": {"title": "t", "keys": [1]}})

    def test_entry_not_an_object(self):
        with self.assertRaisesRegex(AssertionError, "Scenario 1 must be an object"):
            get_scenarios({"scenarios": [{"title": "ok", "keys": []}, [1, 2, 3]]})

    def test_config_not_an_object(self):
        with self.assertRaises(AssertionError):
            get_scenarios([{"title": "t", "keys": [1]}])  # type: ignore[arg-type]

    def test_missing_title(self):
        with self.assertRaises(AssertionError):
            get_scenarios({"scenarios": [{"keys": [1]}]})

    def test_keys_not_a_list(self):
        with self.assertRaises(AssertionError):
            get_scenarios({"scenarios": [{"title": "t", "keys": "1 2 3"}]})

    def test_non_integer_keys(self):
        for bad_keys in [[1, "2"], [1.5], [True, 2]]:
            with self.assertRaises(AssertionError):
                get_scenarios({"scenarios": [{"title": "t", "keys": bad_keys}]})


class TestGetScenariosFromConfig(unittest.TestCase):
    def test_default_config(self):
        scenarios = get_scenarios_from_config()
        self.assertEqual(
            scenarios,
            [
                Scenario("Exercise 1 (1..9)", [1, 2, 3, 4, 5, 6, 7, 8, 9]),
                Scenario("Exercise 2 (1,4,87,2,6,9,0)", [1, 4, 87, 2, 6, 9, 0]),
            ],
        )

    def test_explicit_path(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "scenarios.json"
            config_path.write_text(
                json.dumps({"scenarios": [{"title": "dups", "keys": [5, 5]}]})
            )
            self.assertEqual(
                get_scenarios_from_config(config_path), [Scenario("dups", [5, 5])]
            )
