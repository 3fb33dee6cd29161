"""Check that the MinIO object store is reachable, online and publicly addressable."""

import ipaddress
from typing import Optional
from urllib.parse import urlparse

from loguru import logger
from minio import Minio
from urllib3 import PoolManager, Timeout
from urllib3.exceptions import HTTPError, NewConnectionError
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from component_health_checks.env import get_env
from component_health_checks.errors import (
    CheckTimeoutError,
    ConfigurationError,
    ConnectivityError,
    ResourceStateError,
)
from component_health_checks.models.check_base_model import ComponentCheck
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig

MINIO_KIND = "minio"
HEALTH_PATH = "/minio/health/live"
REDACTED = "**********"


def extract_host(url: str) -> str:
    """Get the host part of a URL, without port or brackets.

    Args:
        url: A URL such as "http://10.0.0.1:10002/object/".

    Returns:
        str: The host, or an empty string if the URL has none.
    """
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def is_loopback(url: str) -> bool:
    """Check whether a URL points at the local machine.

    Args:
        url: The URL to inspect.

    Returns:
        bool: True for "localhost" or any loopback IP literal.
    """
    host = extract_host(url)
    if not host:
        return False
    if host.lower() == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


class MinioCheck(ComponentCheck):
    """Check that MinIO is reachable and configured for external access."""

    def __init__(self) -> None:
        """Initialize the MinIO check."""
        super().__init__(
            name="minio",
            check_name="MINIO",
            kind=ComponentKind.OBJECT_STORE,
            description="MinIO must be online and its public URLs must not be loopback addresses.",
        )

    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        """Execute the MinIO check.

        Args:
            config: The loaded configuration snapshot.
            debug: Show the secret key in client construction errors.

        Returns:
            The checked address, or None when another storage backend is in use.
        """
        obj = config.object
        if obj.enable != MINIO_KIND:
            logger.debug(f"[MINIO] Object storage is '{obj.enable}', skipping")
            return None

        endpoint = get_env("MINIO_ENDPOINT", obj.minio.endpoint)
        access_key_id = get_env("MINIO_ACCESS_KEY_ID", obj.minio.access_key_id)
        secret_access_key = get_env(
            "MINIO_SECRET_ACCESS_KEY", obj.minio.secret_access_key.get_secret_value()
        )
        use_ssl = get_env("MINIO_USE_SSL", "false")

        if not endpoint or not access_key_id or not secret_access_key:
            raise ConfigurationError("MinIO configuration missing")

        # Public URLs are handed to clients, so a loopback host is a deployment error
        # even when the store itself is reachable from here.
        if is_loopback(obj.api_url) or is_loopback(obj.minio.sign_endpoint):
            raise ConfigurationError(
                "apiURL or Minio SignEndpoint endpoint contain 127.0.0.1"
            )

        try:
            u = urlparse(endpoint)
        except ValueError as e:
            raise ConfigurationError(e, "the endpoint is:" + endpoint) from e
        secure = u.scheme == "https" or use_ssl == "true"
        host = u.netloc
        addr = "the addr is:" + host
        logger.debug(f"[MINIO] Checking {host} (secure={secure})")

        http_client = PoolManager(
            timeout=Timeout(total=config.checks.minio_health), retries=False
        )
        try:
            # minio-py has no health API; the client is built only to validate
            # the endpoint and credentials before the probe below.
            try:
                Minio(
                    host,
                    access_key=access_key_id,
                    secret_key=secret_access_key,
                    secure=secure,
                    http_client=http_client,
                )
            except ValueError as e:
                shown = secret_access_key if debug else REDACTED
                raise ConfigurationError(
                    e,
                    f"host:{host},accessKeyID:{access_key_id},"
                    f"secretAccessKey:{shown},Secure:{secure}",
                ) from e

            scheme = "https" if secure else "http"
            try:
                response = http_client.request("GET", f"{scheme}://{host}{HEALTH_PATH}")
            except NewConnectionError as e:
                raise ConnectivityError(e, addr) from e
            except Urllib3TimeoutError as e:
                raise CheckTimeoutError(e, addr) from e
            except HTTPError as e:
                raise ConnectivityError(e, addr) from e

            if response.status != 200:
                raise ResourceStateError("Minio server is offline", addr)
        finally:
            http_client.clear()

        return addr


def create_check() -> MinioCheck:
    """Create the MinIO check.

    Returns:
        MinioCheck: The configured check.
    """
    return MinioCheck()
