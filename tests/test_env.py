"""Tests for environment variable overrides."""

from component_health_checks.env import get_env, get_env_list


def test_unset_variable_returns_config_value():
    assert get_env("REDIS_ADDRESS", "redis:6379") == "redis:6379"


def test_set_variable_overrides_config_value(monkeypatch):
    monkeypatch.setenv("REDIS_ADDRESS", "other:6380")
    assert get_env("REDIS_ADDRESS", "redis:6379") == "other:6380"


def test_empty_variable_counts_as_set(monkeypatch):
    monkeypatch.setenv("REDIS_PASSWORD", "")
    assert get_env("REDIS_PASSWORD", "from-config") == ""


def test_fallback_returned_unchanged():
    assert get_env("MONGO_DATABASE", None) is None


def test_list_override_is_split_on_commas(monkeypatch):
    monkeypatch.setenv("KAFKA_ADDRESS", "k1:9092,k2:9092")
    assert get_env_list("KAFKA_ADDRESS", ["kafka:9092"]) == ["k1:9092", "k2:9092"]


def test_list_without_override_keeps_config():
    assert get_env_list("KAFKA_ADDRESS", ["a:1", "b:2"]) == ["a:1", "b:2"]
