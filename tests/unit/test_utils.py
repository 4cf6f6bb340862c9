"""Unit tests for file helpers."""
from __future__ import annotations

import json
from pathlib import Path

from axelar_helpers import get_example_path
from axelar_helpers.utils import load_json


class TestGetExamplePath:
    def test_default_examples_dir(self) -> None:
        assert get_example_path("call-contract") == Path("examples/call-contract/index.py")

    def test_custom_examples_dir(self, tmp_path: Path) -> None:
        assert get_example_path("deposit-address", tmp_path) == tmp_path / "deposit-address" / "index.py"


class TestLoadJson:
    def test_reads_array(self, tmp_path: Path) -> None:
        path = tmp_path / "chains.json"
        path.write_text(json.dumps([{"name": "Avalanche"}]))
        assert load_json(path) == [{"name": "Avalanche"}]
