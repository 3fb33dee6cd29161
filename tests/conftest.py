"""
Pytest fixtures for the component checks. Backends are replaced by fakes,
so no test opens a network connection.
"""

import os

import pytest

from component_health_checks.models.health_check_config import ComponentConfig

ENV_PREFIXES = ("MONGO_", "MINIO_", "REDIS_", "ZOOKEEPER_", "KAFKA_")

BASE_CONFIG = {
    "mongo": {
        "address": ["mongo-0:27017", "mongo-1:27017"],
        "database": "openim",
        "username": "root",
        "password": "s3cret",
        "maxPoolSize": 50,
    },
    "object": {
        "enable": "minio",
        "apiURL": "http://10.0.0.5:10002",
        "minio": {
            "endpoint": "http://minio:9000",
            "accessKeyID": "access",
            "secretAccessKey": "minio-secret",
            "signEndpoint": "http://10.0.0.5:9000",
        },
    },
    "redis": {"address": ["redis:6379"], "username": "", "password": "pw"},
    "zookeeper": {"zkAddr": ["zk-0:2181", "zk-1:2181"], "username": "", "password": ""},
    "kafka": {
        "addr": ["kafka:9092"],
        "msgToMongo": {"topic": "toMongo"},
        "msgToPush": {"topic": "toPush"},
        "latestMsgToRedis": {"topic": "toRedis"},
    },
    "checks": {"zookeeper_connect": 0.2},
}


def make_config(**sections) -> ComponentConfig:
    """Build a config from BASE_CONFIG with whole sections replaced or merged."""
    data = {key: dict(value) for key, value in BASE_CONFIG.items()}
    for key, value in sections.items():
        data[key] = {**data.get(key, {}), **value}
    return ComponentConfig.model_validate(data)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any backend overrides inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> ComponentConfig:
    """Provide the default test configuration."""
    return make_config()
