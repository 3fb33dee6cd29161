"""Health check configuration models."""

from pydantic import BaseModel, Field

from .component_config import (
    CheckTimeouts,
    KafkaConfig,
    MongoConfig,
    ObjectConfig,
    RedisConfig,
    ZookeeperConfig,
)


class ComponentConfig(BaseModel):
    """Top-level config model matching the service's config.yaml."""

    mongo: MongoConfig = Field(default_factory=MongoConfig)
    object: ObjectConfig = Field(default_factory=ObjectConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    zookeeper: ZookeeperConfig = Field(default_factory=ZookeeperConfig)
    kafka: KafkaConfig = Field(default_factory=KafkaConfig)
    checks: CheckTimeouts = Field(default_factory=CheckTimeouts)

    class Config:
        """Pydantic config."""

        extra = "ignore"
        frozen = True
