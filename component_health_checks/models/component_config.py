"""Backend configuration models.

Field aliases follow the keys of the service's own ``config.yaml`` so the same
file can be handed to the startup check unchanged.
"""

from typing import List

from pydantic import BaseModel, Field, SecretStr


class _FrozenModel(BaseModel):
    class Config:
        """Pydantic config."""

        extra = "ignore"
        frozen = True
        populate_by_name = True


class MongoConfig(_FrozenModel):
    """Document store connection settings."""

    address: List[str] = Field(default_factory=list, description="host:port entries")
    database: str = Field("", description="The database name")
    username: str = Field("", description="The login user")
    password: SecretStr = Field(SecretStr(""), description="The login password")
    max_pool_size: int = Field(100, alias="maxPoolSize", description="Driver pool size")


class MinioConfig(_FrozenModel):
    """S3-compatible object store settings."""

    endpoint: str = Field("", description="The internal endpoint URL")
    access_key_id: str = Field("", alias="accessKeyID")
    secret_access_key: SecretStr = Field(SecretStr(""), alias="secretAccessKey")
    sign_endpoint: str = Field("", alias="signEndpoint", description="URL used for presigned links")
    bucket: str = Field("", description="The bucket used by the service")


class ObjectConfig(_FrozenModel):
    """Object storage selection and settings."""

    enable: str = Field("minio", description="The storage backend in use")
    api_url: str = Field("", alias="apiURL", description="The externally advertised API URL")
    minio: MinioConfig = Field(default_factory=MinioConfig)


class RedisConfig(_FrozenModel):
    """Cache settings."""

    address: List[str] = Field(default_factory=list)
    username: str = ""
    password: SecretStr = SecretStr("")


class ZookeeperConfig(_FrozenModel):
    """Coordination service settings."""

    zk_addr: List[str] = Field(default_factory=list, alias="zkAddr")
    schema_: str = Field("digest", alias="schema", description="The auth scheme")
    username: str = ""
    password: SecretStr = SecretStr("")


class TopicConfig(_FrozenModel):
    topic: str = ""


class KafkaConfig(_FrozenModel):
    """Message broker settings, including the topics the service requires."""

    addr: List[str] = Field(default_factory=list)
    username: str = ""
    password: SecretStr = SecretStr("")
    msg_to_mongo: TopicConfig = Field(default_factory=TopicConfig, alias="msgToMongo")
    msg_to_push: TopicConfig = Field(default_factory=TopicConfig, alias="msgToPush")
    latest_msg_to_redis: TopicConfig = Field(
        default_factory=TopicConfig, alias="latestMsgToRedis"
    )

    def required_topics(self) -> List[str]:
        """Get the topics that must exist on the broker.

        Returns:
            List[str]: Topic names in a fixed order.
        """
        return [
            self.msg_to_mongo.topic,
            self.msg_to_push.topic,
            self.latest_msg_to_redis.topic,
        ]


class CheckTimeouts(_FrozenModel):
    """Upper bounds, in seconds, for the network operations of each check."""

    mongo_connect: float = 30.0
    mongo_ping: float = 30.0
    minio_health: float = 1.0
    zookeeper_connect: float = 5.0
    redis_socket: float = 5.0
    kafka_request: float = 10.0
