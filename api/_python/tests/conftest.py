"""
Pytest fixtures for sleep calculator tests.
"""

import json

import pytest

import sys
from pathlib import Path

# Add both tests dir and parent dir to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycle import config
from sleepcycle.types import CaffeineIntake
from helpers import at


@pytest.fixture
def utc_default_timezone(monkeypatch):
    """Pin the configured default timezone regardless of the environment."""
    monkeypatch.setattr(config, "DEFAULT_TIMEZONE", "UTC")
    return "UTC"


@pytest.fixture
def two_coffees():
    """Morning and afternoon coffee (95 mg each)."""
    return [
        CaffeineIntake(source="Coffee (8 oz)", amount_mg=95, time=at("07:30")),
        CaffeineIntake(source="Coffee (8 oz)", amount_mg=95, time=at("14:30")),
    ]


@pytest.fixture
def morning_espresso():
    """Single espresso shot at 08:00."""
    return [CaffeineIntake(source="Espresso (1 shot)", amount_mg=63, time=at("08:00"))]


@pytest.fixture
def request_file(tmp_path):
    """Factory writing a JSON request file and returning its path."""
    def _write(data) -> str:
        path = tmp_path / "request.json"
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data))
        return str(path)

    return _write
