"""Check that a ZooKeeper session can be established and authenticated."""

import threading
from typing import Optional

from kazoo.client import KazooClient
from kazoo.exceptions import KazooException
from kazoo.protocol.states import KazooState
from loguru import logger

from component_health_checks.env import get_env, get_env_list
from component_health_checks.errors import (
    AuthenticationError,
    CheckTimeoutError,
    ConnectivityError,
)
from component_health_checks.models.check_base_model import ComponentCheck
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig

SESSION_TIMEOUT = 10.0


class ZookeeperCheck(ComponentCheck):
    """Check that ZooKeeper accepts a session within the connect bound."""

    def __init__(self) -> None:
        """Initialize the ZooKeeper check."""
        super().__init__(
            name="zookeeper",
            check_name="ZOOKEEPER",
            kind=ComponentKind.COORDINATION_SERVICE,
            description="ZooKeeper must reach the CONNECTED state and accept the configured credentials.",
        )

    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        """Execute the ZooKeeper check.

        The session is opened asynchronously; the check waits for the
        CONNECTED state event up to ``checks.zookeeper_connect`` seconds.
        A timeout reports the addresses from the configuration file, not
        the environment overrides.

        Args:
            config: The loaded configuration snapshot.
            debug: Unused.

        Returns:
            str: The checked address descriptor.
        """
        zk = config.zookeeper
        schema = get_env("ZOOKEEPER_SCHEMA", zk.schema_ or "digest")
        addresses = get_env_list("ZOOKEEPER_ADDRESS", zk.zk_addr)
        username = get_env("ZOOKEEPER_USERNAME", zk.username)
        password = get_env("ZOOKEEPER_PASSWORD", zk.password.get_secret_value())

        address = ",".join(addresses)
        addr = "the addr is:" + address
        logger.debug(f"[ZOOKEEPER] Connecting to {address}")

        try:
            client = KazooClient(hosts=address, timeout=SESSION_TIMEOUT)
        except (KazooException, ValueError) as e:
            raise ConnectivityError(e, addr) from e

        connected = threading.Event()

        def on_state(state):
            if state == KazooState.CONNECTED:
                connected.set()
            return False

        client.add_listener(on_state)
        try:
            try:
                client.start_async()
            except (KazooException, ValueError) as e:
                raise ConnectivityError(e, addr) from e

            if not connected.wait(config.checks.zookeeper_connect):
                raise CheckTimeoutError(
                    "timeout waiting for Zookeeper connection",
                    "Zookeeper Addr: " + " ".join(zk.zk_addr),
                )
            logger.debug("[ZOOKEEPER] Connected to Zookeeper")

            if username and password:
                try:
                    client.add_auth(schema, f"{username}:{password}")
                except KazooException as e:
                    raise AuthenticationError(e, addr) from e
        finally:
            try:
                client.stop()
            finally:
                client.close()

        return addr


def create_check() -> ZookeeperCheck:
    """Create the ZooKeeper check.

    Returns:
        ZookeeperCheck: The configured check.
    """
    return ZookeeperCheck()
