from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from charlesblog.core.config import load_config

ROOT = Path(__file__).resolve().parents[1]
CONFIG_PATH = ROOT / "config.yaml"


@pytest.fixture(scope="session")
def _raw_config() -> Dict[str, Any]:
    return yaml.safe_load(CONFIG_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def raw_cfg(_raw_config: Dict[str, Any]) -> Dict[str, Any]:
    """The checked-in config.yaml as plain data, safe to mutate."""
    return copy.deepcopy(_raw_config)


@pytest.fixture
def cfg() -> Dict[str, Any]:
    return load_config(CONFIG_PATH)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    def _write(data: Dict[str, Any]) -> Path:
        p = tmp_path / "config.yaml"
        p.write_text(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8")
        return p

    return _write
