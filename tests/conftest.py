"""Shared fixtures.

Every test gets its own SQLite file under tmp_path and its own config file
location, so nothing leaks between tests or into the user's home directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from database.budget_dao import BudgetDAO
from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from services.connectivity import StaticConnectivity
from services.data_service import DataService
from services.notifier import Notifier
from utils import app_config


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr(app_config, "CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def db(tmp_path: Path):
    manager = DatabaseManager(str(tmp_path / "finance.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def connectivity() -> StaticConnectivity:
    return StaticConnectivity(online=True)


@pytest.fixture
def notices() -> list:
    return []


@pytest.fixture
def notifier(notices: list) -> Notifier:
    n = Notifier()
    n.subscribe(notices.append)
    return n


@pytest.fixture
def data_service(db, connectivity, notifier) -> DataService:
    return DataService(db, TransactionDAO(db), BudgetDAO(db), connectivity, notifier)
