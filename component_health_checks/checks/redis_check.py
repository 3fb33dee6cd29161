"""Check that Redis answers a ping, as a single node or a cluster."""

from typing import List, Optional, Tuple

from loguru import logger
from redis import Redis
from redis.cluster import ClusterNode, RedisCluster
from redis.exceptions import RedisClusterException, RedisError

from component_health_checks.env import get_env, get_env_list
from component_health_checks.errors import ConnectivityError
from component_health_checks.models.check_base_model import ComponentCheck
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig

DEFAULT_REDIS_PORT = 6379


def _split_host_port(address: str) -> Tuple[str, int]:
    """Split a host:port entry.

    Args:
        address: An entry such as "redis-0:6379" or a bare host.

    Returns:
        Tuple[str, int]: The host and port, 6379 when no port is given.

    Raises:
        ValueError: If the port is not an integer.
    """
    host, _, port = address.strip().rpartition(":")
    if not host:
        return port, DEFAULT_REDIS_PORT
    return host, int(port)


def new_redis_client(
    addresses: List[str], username: str, password: str, socket_timeout: float
):
    """Create a cluster client for several addresses, a plain client for one.

    Args:
        addresses: The host:port entries.
        username: The ACL user, may be empty.
        password: The password, may be empty.
        socket_timeout: Bound in seconds for connect and each command.

    Returns:
        Redis or RedisCluster: The client.
    """
    options = dict(
        username=username or None,
        password=password or None,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
    )
    if len(addresses) > 1:
        nodes = [ClusterNode(*_split_host_port(a)) for a in addresses]
        return RedisCluster(startup_nodes=nodes, **options)

    host, port = _split_host_port(addresses[0])
    return Redis(host=host, port=port, **options)


class RedisCheck(ComponentCheck):
    """Check that Redis is reachable."""

    def __init__(self) -> None:
        """Initialize the Redis check."""
        super().__init__(
            name="redis",
            check_name="REDIS",
            kind=ComponentKind.CACHE,
            description="Redis must answer a PING.",
        )

    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        redis_cfg = config.redis
        addresses = get_env_list("REDIS_ADDRESS", redis_cfg.address)
        username = get_env("REDIS_USERNAME", redis_cfg.username)
        password = get_env("REDIS_PASSWORD", redis_cfg.password.get_secret_value())

        addr = "the addr is:" + ",".join(addresses)
        logger.debug(
            f"[REDIS] Checking {','.join(addresses)} "
            f"({'cluster' if len(addresses) > 1 else 'single node'})"
        )

        try:
            client = new_redis_client(
                addresses, username, password, config.checks.redis_socket
            )
        except (RedisError, RedisClusterException, ValueError) as e:
            # RedisCluster discovers the topology while it is constructed
            raise ConnectivityError(e, addr) from e

        try:
            client.ping()
        except (RedisError, RedisClusterException) as e:
            raise ConnectivityError(e, addr) from e
        finally:
            client.close()

        return addr


def create_check() -> RedisCheck:
    """Create the Redis check.

    Returns:
        RedisCheck: The configured check.
    """
    return RedisCheck()
