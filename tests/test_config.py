"""
Tests for configuration helpers.
"""

import pytest

from exee.config import (
    DEFAULTS,
    coerce_float,
    coerce_int,
    get_env_config,
    merge_configs,
    parse_endpoint,
)
from exee.errors import ConfigurationError


def test_defaults():
    assert DEFAULTS["uri"] == "localhost:80"
    assert DEFAULTS["transaction_id"] == "General Transaction"
    assert DEFAULTS["timeout"] is None


def test_get_env_config(monkeypatch):
    monkeypatch.setenv("EXEE_READ_TIMEOUT", "2.5")
    assert get_env_config("read_timeout") == "2.5"
    monkeypatch.delenv("EXEE_READ_TIMEOUT")
    assert get_env_config("read_timeout") is None


def test_merge_configs():
    merged = merge_configs({"a": 1, "b": 2}, None, {"b": 3})
    assert merged == {"a": 1, "b": 3}
    assert merge_configs() == {}


@pytest.mark.parametrize(
    "uri,expected",
    [
        ("localhost:80", ("localhost", 80)),
        ("10.0.0.5:9100", ("10.0.0.5", 9100)),
        ("terminal.local", ("terminal.local", 80)),
        ("tcp://terminal.local:31419", ("terminal.local", 31419)),
        ("[::1]:9000", ("::1", 9000)),
        ("[::1]", ("::1", 80)),
        ("  host:1  ", ("host", 1)),
    ],
)
def test_parse_endpoint(uri, expected):
    assert parse_endpoint(uri) == expected


@pytest.mark.parametrize(
    "uri",
    ["", ":80", "host:abc", "host:0", "host:70000", "::1:80", "[::1", "[::1]x"],
)
def test_parse_endpoint_invalid(uri):
    with pytest.raises(ConfigurationError):
        parse_endpoint(uri)


def test_coerce_float():
    assert coerce_float("timeout", None) is None
    assert coerce_float("timeout", "") is None
    assert coerce_float("timeout", "1.5") == 1.5
    assert coerce_float("timeout", 3) == 3.0
    with pytest.raises(ConfigurationError, match="timeout"):
        coerce_float("timeout", "soon")


def test_coerce_int():
    assert coerce_int("max_bytes", "1024") == 1024
    assert coerce_int("max_bytes", 512) == 512
    with pytest.raises(ConfigurationError, match="max_bytes"):
        coerce_int("max_bytes", "lots")
    with pytest.raises(ConfigurationError, match="positive"):
        coerce_int("max_bytes", 0)
    with pytest.raises(ConfigurationError):
        coerce_int("max_bytes", None)
