import json
from pathlib import Path


def load_json(filepath: Path | str):
    with open(filepath, "r") as file:
        return json.load(file)


def get_example_path(example_name: str, examples_dir: Path | str = "examples") -> Path:
    """
    :return: Path to the entry script of an example: <examples_dir>/<example_name>/index.py
    """
    return Path(examples_dir) / example_name / "index.py"
