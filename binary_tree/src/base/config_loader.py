import json
import logging
from pathlib import Path


def get_values(json_data_from_file: object) -> list[int]:
    if not isinstance(json_data_from_file, dict):
        raise ValueError(
            f"Expected a JSON object at the top level, got {type(json_data_from_file).__name__}"
        )
    values = json_data_from_file.get("values")
    if not isinstance(values, list):
        raise ValueError(f"Expected a list under 'values', got {type(values).__name__}")

    for value in values:
        # bool is an int subclass but never a sensible tree key here
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Tree values must be integers, got {value!r}")

    logging.debug(f"loaded {len(values)} values: {values}")
    return values


TREE_CONFIG_FILE = "tree_config.json"


def get_values_from_config(config_path: Path | str | None = None) -> list[int]:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / TREE_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_values(json_data_from_file)
