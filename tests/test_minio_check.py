"""Tests for the MinIO check."""

import pytest
from urllib3.exceptions import NewConnectionError, ReadTimeoutError

from component_health_checks.checks import minio_check
from component_health_checks.checks.minio_check import MinioCheck, extract_host, is_loopback
from component_health_checks.errors import (
    CheckTimeoutError,
    ConfigurationError,
    ConnectivityError,
    ResourceStateError,
)

from conftest import make_config


class FakeResponse:
    def __init__(self, status):
        self.status = status


class FakePoolManager:
    instances = []
    status = 200
    error = None

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.urls = []
        self.clear_count = 0
        FakePoolManager.instances.append(self)

    def request(self, method, url):
        self.urls.append(url)
        if FakePoolManager.error:
            raise FakePoolManager.error
        return FakeResponse(FakePoolManager.status)

    def clear(self):
        self.clear_count += 1


class FakeMinio:
    instances = []
    error = None

    def __init__(self, endpoint, access_key, secret_key, secure, http_client):
        if FakeMinio.error:
            raise FakeMinio.error
        self.endpoint = endpoint
        self.secure = secure
        FakeMinio.instances.append(self)


@pytest.fixture(autouse=True)
def fakes(monkeypatch):
    FakePoolManager.instances = []
    FakePoolManager.status = 200
    FakePoolManager.error = None
    FakeMinio.instances = []
    FakeMinio.error = None
    monkeypatch.setattr(minio_check, "PoolManager", FakePoolManager)
    monkeypatch.setattr(minio_check, "Minio", FakeMinio)


def test_success_probes_health_endpoint(config):
    descriptor = MinioCheck().verify(config)

    assert descriptor == "the addr is:minio:9000"
    pool = FakePoolManager.instances[0]
    assert pool.urls == ["http://minio:9000/minio/health/live"]
    assert pool.clear_count == 1
    assert FakeMinio.instances[0].secure is False


def test_other_storage_backend_is_skipped(config):
    cfg = make_config(object={"enable": "cos"})

    assert MinioCheck().verify(cfg) is None
    result = MinioCheck().execute(cfg)
    assert result.passed is True
    assert result.skipped is True
    assert result.descriptor == ""
    assert FakePoolManager.instances == []


def test_https_scheme_alone_enables_tls(monkeypatch):
    cfg = make_config(
        object={
            "minio": {
                "endpoint": "https://minio:9000",
                "accessKeyID": "access",
                "secretAccessKey": "minio-secret",
            }
        }
    )
    monkeypatch.setenv("MINIO_USE_SSL", "false")

    MinioCheck().verify(cfg)

    assert FakeMinio.instances[0].secure is True
    assert FakePoolManager.instances[0].urls == ["https://minio:9000/minio/health/live"]


def test_ssl_flag_alone_enables_tls(config, monkeypatch):
    monkeypatch.setenv("MINIO_USE_SSL", "true")

    MinioCheck().verify(config)

    assert FakeMinio.instances[0].secure is True


@pytest.mark.parametrize("env_key", ["MINIO_ENDPOINT", "MINIO_ACCESS_KEY_ID", "MINIO_SECRET_ACCESS_KEY"])
def test_missing_setting_is_configuration_error(config, monkeypatch, env_key):
    monkeypatch.setenv(env_key, "")

    with pytest.raises(ConfigurationError) as exc_info:
        MinioCheck().verify(config)

    assert exc_info.value.code == 6001
    assert FakePoolManager.instances == []


def test_loopback_api_url_is_configuration_error():
    cfg = make_config(object={"apiURL": "http://127.0.0.1:9000"})

    with pytest.raises(ConfigurationError) as exc_info:
        MinioCheck().verify(cfg)

    assert not isinstance(exc_info.value, ConnectivityError)
    assert "127.0.0.1" in str(exc_info.value)


def test_loopback_sign_endpoint_is_configuration_error():
    cfg = make_config(
        object={
            "minio": {
                "endpoint": "http://minio:9000",
                "accessKeyID": "access",
                "secretAccessKey": "minio-secret",
                "signEndpoint": "http://localhost:9000",
            }
        }
    )

    with pytest.raises(ConfigurationError):
        MinioCheck().verify(cfg)


def test_offline_store_is_resource_state_error(config):
    FakePoolManager.status = 503

    with pytest.raises(ResourceStateError) as exc_info:
        MinioCheck().verify(config)

    assert str(exc_info.value) == "Minio server is offline;the addr is:minio:9000"
    assert exc_info.value.code == 6000
    assert FakePoolManager.instances[0].clear_count == 1


def test_refused_connection_is_connectivity_error(config):
    FakePoolManager.error = NewConnectionError(None, "Connection refused")

    with pytest.raises(ConnectivityError):
        MinioCheck().verify(config)
    assert FakePoolManager.instances[0].clear_count == 1


def test_slow_probe_is_timeout_error(config):
    FakePoolManager.error = ReadTimeoutError(None, "/minio/health/live", "timed out")

    with pytest.raises(CheckTimeoutError):
        MinioCheck().verify(config)
    assert FakePoolManager.instances[0].clear_count == 1


def test_client_error_redacts_secret(config):
    FakeMinio.error = ValueError("invalid endpoint")

    with pytest.raises(ConfigurationError) as exc_info:
        MinioCheck().verify(config)

    message = str(exc_info.value)
    assert "minio-secret" not in message
    assert "secretAccessKey:**********" in message
    assert "accessKeyID:access" in message
    assert FakePoolManager.instances[0].clear_count == 1


def test_client_error_shows_secret_in_debug(config):
    FakeMinio.error = ValueError("invalid endpoint")

    with pytest.raises(ConfigurationError) as exc_info:
        MinioCheck().verify(config, debug=True)

    assert "secretAccessKey:minio-secret" in str(exc_info.value)


@pytest.mark.parametrize(
    "url,host",
    [
        ("http://127.0.0.1:9000", "127.0.0.1"),
        ("http://10.0.0.1", "10.0.0.1"),
        ("http://[::1]:9000/path", "::1"),
        ("", ""),
    ],
)
def test_extract_host(url, host):
    assert extract_host(url) == host


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://127.0.0.1:9000", True),
        ("http://127.0.0.2", True),
        ("http://[::1]:9000", True),
        ("http://LOCALHOST:10002", True),
        ("http://10.0.0.5:10002", False),
        ("http://minio.example.com", False),
        ("", False),
    ],
)
def test_is_loopback(url, expected):
    assert is_loopback(url) is expected
