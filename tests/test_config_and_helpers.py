import json
import logging
import socket
from datetime import date
from decimal import Decimal

import pytest

from services.connectivity import (
    Connectivity, SocketConnectivity, StaticConnectivity, connectivity_from_config,
)
from services.notifier import Notifier
from utils import app_config
from utils.currency import format_currency, to_amount, to_decimal
from utils.date_helpers import (
    add_months, format_display_date, parse_display_date,
)
from utils.logging_setup import LOG_LEVEL_ENV, resolve_level


def write_config(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")


# ── app_config ───────────────────────────────────────────────────────────────

def test_missing_config_gives_defaults():
    assert app_config.load_config() == {}
    assert app_config.get_db_folder() is None
    assert app_config.is_offline_mode() is False
    assert app_config.get_connectivity_probe() == ("1.1.1.1", 53, 2.0)


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unusable_config_is_ignored(_isolate_config, content):
    write_config(_isolate_config, content)

    assert app_config.load_config() == {}


def test_config_values(_isolate_config):
    write_config(_isolate_config, {
        "db_folder": "/data/finance",
        "log_level": "DEBUG",
        "offline_mode": True,
        "connectivity_host": "example.org",
        "connectivity_port": "443",
        "connectivity_timeout": 0.5,
    })

    assert app_config.get_db_folder() == "/data/finance"
    assert app_config.get_log_level() == "DEBUG"
    assert app_config.is_offline_mode() is True
    assert app_config.get_connectivity_probe() == ("example.org", 443, 0.5)


def test_bad_probe_numbers_fall_back(_isolate_config):
    write_config(_isolate_config, {"connectivity_port": "https"})

    assert app_config.get_connectivity_probe() == ("1.1.1.1", 53, 2.0)


# ── connectivity ─────────────────────────────────────────────────────────────

def test_offline_mode_builds_static_oracle(_isolate_config):
    write_config(_isolate_config, {"offline_mode": True})

    oracle = connectivity_from_config()

    assert isinstance(oracle, StaticConnectivity)
    assert oracle.is_online() is False


def test_default_oracle_probes_socket():
    assert isinstance(connectivity_from_config(), SocketConnectivity)


class _FakeConnection:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_socket_oracle_online(monkeypatch):
    calls = []

    def fake_connect(address, timeout):
        calls.append((address, timeout))
        return _FakeConnection()

    monkeypatch.setattr(socket, "create_connection", fake_connect)

    assert SocketConnectivity("example.org", 80, 1.5).is_online() is True
    assert calls == [(("example.org", 80), 1.5)]


def test_socket_oracle_offline(monkeypatch):
    def refuse(address, timeout):
        raise ConnectionRefusedError("no route")

    monkeypatch.setattr(socket, "create_connection", refuse)

    assert SocketConnectivity("example.org", 80).is_online() is False


# ── currency ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value, expected", [
    ("12.34", Decimal("12.34")),
    (" 1,250.5 ", Decimal("1250.5")),
    (0.1, Decimal("0.1")),
    (7, Decimal("7")),
    (Decimal("3.30"), Decimal("3.30")),
])
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


@pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
def test_to_decimal_rejects_junk(value):
    with pytest.raises(ValueError):
        to_decimal(value)


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("0")) == "$0.00"
    assert format_currency(Decimal("9.999"), "€") == "€10.00"


# ── dates ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("start, n, expected", [
    (date(2025, 1, 31), 1, date(2025, 2, 28)),
    (date(2024, 1, 31), 1, date(2024, 2, 29)),
    (date(2025, 3, 1), -5, date(2024, 10, 1)),
    (date(2025, 12, 15), 1, date(2026, 1, 15)),
])
def test_add_months(start, n, expected):
    assert add_months(start, n) == expected


def test_display_dates():
    d = date(2025, 7, 4)

    assert format_display_date(d, "DD/MM/YYYY") == "04/07/2025"
    assert parse_display_date("04/07/2025", "DD/MM/YYYY") == d
    assert parse_display_date("2025-07-04", "MM/DD/YYYY") == d
    assert parse_display_date("13/13/2025", "MM/DD/YYYY") is None
    assert parse_display_date("", "MM/DD/YYYY") is None


# ── logging ──────────────────────────────────────────────────────────────────

def test_resolve_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert resolve_level(None) == logging.INFO
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nonsense") == logging.INFO

    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    assert resolve_level("debug") == logging.WARNING


# ── notifier ─────────────────────────────────────────────────────────────────

def test_notifier_fan_out():
    first, second = [], []
    notifier = Notifier()
    notifier.subscribe(first.append)
    notifier.subscribe(second.append)

    notifier.warning("No Internet", "offline")
    notifier.unsubscribe(second.append)
    notifier.error()

    assert [n.severity for n in first] == ["warning", "error"]
    assert [n.title for n in second] == ["No Internet"]


def test_unsubscribe_unknown_listener_is_ignored():
    Notifier().unsubscribe(print)


def test_notices_sent_before_subscribe_are_replayed_once():
    notifier = Notifier()
    notifier.error()
    notifier.warning("No Internet", "offline")

    first, second = [], []
    notifier.subscribe(first.append)
    notifier.subscribe(second.append)

    assert [n.severity for n in first] == ["error", "warning"]
    assert second == []


def test_connectivity_base_is_abstract():
    class Incomplete(Connectivity):
        pass

    with pytest.raises(TypeError):
        Incomplete()


@pytest.mark.parametrize("value, expected", [
    ("12.345", Decimal("12.35")),
    ("0.004", Decimal("0.00")),
    (Decimal("999999999999.994"), Decimal("999999999999.99")),
])
def test_to_amount_rounds_to_cents(value, expected):
    assert to_amount(value) == expected


@pytest.mark.parametrize("value", [
    "1e1000000", Decimal("1E+12"), Decimal("-1E+13"), Decimal("NaN"), Decimal("Infinity"),
])
def test_to_amount_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        to_amount(value)
