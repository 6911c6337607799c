"""Configuration management for mev-detect."""

import math
import os
from dataclasses import dataclass, field
from typing import Any

from mev_detect.exceptions import ConfigurationError

DEFAULT_ALERT_TOPIC = "mev-alerts"


@dataclass(frozen=True)
class DetectorConfig:
    """Thresholds of the sandwich verdict."""

    min_cluster_size: int = 3  # frontrun, victim, backrun
    max_window_seconds: int = 120  # approx. two blocks
    min_slippage_tolerance: float = 0.05

    def __post_init__(self) -> None:
        if self.min_cluster_size < 3:
            raise ConfigurationError(
                f"min_cluster_size must be at least 3, got {self.min_cluster_size}"
            )
        if self.max_window_seconds <= 0:
            raise ConfigurationError(
                f"max_window_seconds must be positive, got {self.max_window_seconds}"
            )
        if not math.isfinite(self.min_slippage_tolerance) or self.min_slippage_tolerance < 0:
            raise ConfigurationError(
                f"min_slippage_tolerance must be a finite fraction >= 0, "
                f"got {self.min_slippage_tolerance}"
            )


@dataclass
class KafkaConfig:
    """Kafka producer configuration for alerts."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    topic: str = DEFAULT_ALERT_TOPIC
    client_id: str = "mev-bot-detector"
    linger_ms: int = 5
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "client.id": self.client_id,
            "acks": self.acks,
            "linger.ms": self.linger_ms,
            "retries": self.retries,
        }


@dataclass
class RedisConfig:
    """Redis connection for alert deduplication."""

    url: str = "redis://localhost:6379"

    @classmethod
    def from_env(cls) -> "RedisConfig":
        """Read ``REDIS_URL``, or build it from REDIS_HOST/PORT/PASSWORD."""
        url = os.getenv("REDIS_URL")
        if not url:
            host = os.getenv("REDIS_HOST", "localhost")
            port = os.getenv("REDIS_PORT", "6379")
            password = os.getenv("REDIS_PASSWORD")
            if password:
                url = f"redis://:{password}@{host}:{port}"
            else:
                url = f"redis://{host}:{port}"
        return cls(url=url)


@dataclass
class AlertConfig:
    """Alert deduplication and pending pool settings."""

    dedup_ttl_seconds: float = 300.0
    pool_lifespan_seconds: float = 60.0


@dataclass
class MevDetectConfig:
    """Main configuration for mev-detect."""

    detector: DetectorConfig = field(default_factory=DetectorConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "MevDetectConfig":
        """Create config from environment variables."""
        try:
            detector = DetectorConfig(
                max_window_seconds=int(os.getenv("SANDWICH_WINDOW_SECONDS", "120")),
                min_slippage_tolerance=float(os.getenv("MIN_SLIPPAGE_TOLERANCE", "0.05")),
            )
            alerts = AlertConfig(
                dedup_ttl_seconds=float(os.getenv("ALERT_TTL_SECONDS", "300")),
                pool_lifespan_seconds=float(os.getenv("POOL_LIFESPAN_SECONDS", "60")),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting in environment: {e}") from e

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic=os.getenv("KAFKA_TOPIC", DEFAULT_ALERT_TOPIC),
        )

        return cls(
            detector=detector,
            kafka=kafka,
            alerts=alerts,
            redis=RedisConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
