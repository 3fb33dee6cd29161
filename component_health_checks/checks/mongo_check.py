"""Check that the document store accepts connections and answers a ping."""

from typing import List, Optional
from urllib.parse import quote_plus

import pymongo
from loguru import logger
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from component_health_checks.env import get_env, get_env_list
from component_health_checks.errors import ConfigurationError, ConnectivityError
from component_health_checks.models.check_base_model import ComponentCheck
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig


def build_mongo_uri(
    hosts: List[str],
    database: str,
    max_pool_size: int,
    username: str = "",
    password: str = "",
) -> str:
    """Build a MongoDB connection URI.

    Credentials are only embedded when both username and password are set.

    Args:
        hosts: The host:port entries.
        database: The database name.
        max_pool_size: The driver pool size.
        username: The login user.
        password: The login password.

    Returns:
        str: The connection URI.
    """
    mongodb_hosts = ",".join(hosts)
    if username and password:
        return (
            f"mongodb://{quote_plus(username)}:{quote_plus(password)}@{mongodb_hosts}"
            f"/{database}?maxPoolSize={max_pool_size}"
        )
    return f"mongodb://{mongodb_hosts}/{database}?maxPoolSize={max_pool_size}"


class MongoCheck(ComponentCheck):
    """Check that MongoDB is reachable."""

    def __init__(self) -> None:
        """Initialize the MongoDB check."""
        super().__init__(
            name="mongo",
            check_name="MONGO",
            kind=ComponentKind.DOCUMENT_STORE,
            description="MongoDB must accept a connection and answer a ping.",
        )

    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        mongo = config.mongo
        timeouts = config.checks

        hosts = get_env_list("MONGO_ADDRESS", mongo.address)
        try:
            max_pool_size = int(
                get_env("MONGO_MAX_POOL_SIZE", str(mongo.max_pool_size))
            )
        except ValueError as e:
            raise ConfigurationError(e, "MONGO_MAX_POOL_SIZE must be an integer") from e
        uri = get_env(
            "MONGO_URI",
            build_mongo_uri(
                hosts=hosts,
                database=get_env("MONGO_DATABASE", mongo.database),
                max_pool_size=max_pool_size,
                username=get_env("MONGO_USERNAME", mongo.username),
                password=get_env("MONGO_PASSWORD", mongo.password.get_secret_value()),
            ),
        )
        addr = "the addr is:" + ",".join(hosts)
        logger.debug(f"[MONGO] Connecting to {','.join(hosts)}")

        connect_ms = int(timeouts.mongo_connect * 1000)
        try:
            client = MongoClient(
                uri,
                connectTimeoutMS=connect_ms,
                serverSelectionTimeoutMS=connect_ms,
            )
        except PyMongoError as e:
            raise ConnectivityError(e, addr) from e

        try:
            with pymongo.timeout(timeouts.mongo_ping):
                client.admin.command("ping")
        except PyMongoError as e:
            raise ConnectivityError(e, addr) from e
        finally:
            client.close()

        return addr


def create_check() -> MongoCheck:
    """Create the MongoDB check.

    Returns:
        MongoCheck: The configured check.
    """
    return MongoCheck()
