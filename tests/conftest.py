from datetime import date
from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.adapters.dev_trip_server import InMemoryTripServer, InMemoryTripStorage
from src.app_shell.config import AppConfig, config_from_rules
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The real rules file from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def app_config(rules: Rules) -> AppConfig:
    return config_from_rules(rules)


@pytest.fixture
def clock() -> FixedClock:
    # Fixed "today" so calendar picks in June 2024 are selectable
    return FixedClock(date(2024, 6, 1))


@pytest.fixture
def server() -> InMemoryTripServer:
    return InMemoryTripServer()


@pytest.fixture
def storage() -> InMemoryTripStorage:
    return InMemoryTripStorage()
