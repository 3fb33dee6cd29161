"""Check that Kafka is reachable and has the topics the service requires."""

from typing import Iterable, List, Optional

from kafka import KafkaAdminClient
from kafka.errors import KafkaError
from loguru import logger

from component_health_checks.env import get_env, get_env_list
from component_health_checks.errors import ConnectivityError, ResourceStateError
from component_health_checks.models.check_base_model import ComponentCheck
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig


def find_missing_topic(required: List[str], topics: Iterable[str]) -> Optional[str]:
    """Find the first required topic that the broker does not have.

    Args:
        required: The topic names in the order they should be reported.
        topics: The topics present on the broker.

    Returns:
        The first missing topic, or None if all are present.
    """
    present = set(topics)
    for topic in required:
        if topic not in present:
            return topic
    return None


def build_client_options(
    addresses: List[str], username: str, password: str, request_timeout: float
) -> dict:
    """Build KafkaAdminClient keyword arguments.

    SASL/PLAIN is enabled only when both username and password are set.
    The request bound also caps the broker version probe made during
    construction; the client's own bootstrap wait is not configurable.
    """
    options = {
        "bootstrap_servers": addresses,
        "client_id": "component-health-check",
        "request_timeout_ms": int(request_timeout * 1000),
        "api_version_auto_timeout_ms": int(request_timeout * 1000),
    }
    if username and password:
        options.update(
            security_protocol="SASL_PLAINTEXT",
            sasl_mechanism="PLAIN",
            sasl_plain_username=username,
            sasl_plain_password=password,
        )
    return options


class KafkaCheck(ComponentCheck):
    """Check that Kafka is reachable and the required topics exist."""

    def __init__(self) -> None:
        """Initialize the Kafka check."""
        super().__init__(
            name="kafka",
            check_name="KAFKA",
            kind=ComponentKind.MESSAGE_BROKER,
            description="Kafka must be reachable and contain the msgToMongo, msgToPush and latestMsgToRedis topics.",
        )

    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        kafka_cfg = config.kafka
        username = get_env("KAFKA_USERNAME", kafka_cfg.username)
        password = get_env("KAFKA_PASSWORD", kafka_cfg.password.get_secret_value())
        addresses = get_env_list("KAFKA_ADDRESS", kafka_cfg.addr)

        addr = "the addr is:" + ",".join(addresses)
        logger.debug(f"[KAFKA] Connecting to {','.join(addresses)}")

        options = build_client_options(
            addresses, username, password, config.checks.kafka_request
        )
        try:
            client = KafkaAdminClient(**options)
        except KafkaError as e:
            raise ConnectivityError(e, addr) from e

        try:
            try:
                topics = client.list_topics()
            except KafkaError as e:
                raise ConnectivityError(e, addr) from e

            # Topic names are structural, so they come from the config file only.
            missing = find_missing_topic(kafka_cfg.required_topics(), topics)
            if missing is not None:
                raise ResourceStateError(f"Kafka doesn't contain topic: {missing}", addr)
        finally:
            client.close()

        logger.debug(f"[KAFKA] Found {len(topics)} topic(s)")
        return addr


def create_check() -> KafkaCheck:
    """Create the Kafka check.

    Returns:
        KafkaCheck: The configured check.
    """
    return KafkaCheck()
