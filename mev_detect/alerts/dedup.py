"""Attacker-level alert deduplication backed by Redis.

One key per attacker, ``mev:{attacker}:last_alert``, written with
``SET NX EX``: the write that creates the key wins the alert, and Redis
expires it after the TTL so the keyspace never grows past the attackers
seen in the last window.
"""

import logging
import math
import time

from redis import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


def alert_key(attacker: str) -> str:
    """Cache key marking a recent alert for ``attacker``."""
    return f"mev:{attacker}:last_alert"


class AlertDeduplicator:
    """Suppress repeat alerts for the same attacker within a TTL."""

    def __init__(self, client: Redis, ttl_seconds: float = 300.0) -> None:
        self.client = client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, ttl_seconds: float = 300.0) -> "AlertDeduplicator":
        """Create a deduplicator on a new Redis connection pool.

        No connection is opened until the first alert.
        """
        client = Redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(client, ttl_seconds=ttl_seconds)

    @property
    def ttl(self) -> int:
        """Key expiry in whole seconds, as Redis takes it."""
        return max(1, math.ceil(self.ttl_seconds))

    def is_new(self, attacker: str, now: float | None = None) -> bool:
        """Return True and start the TTL if no alert is active for ``attacker``.

        When Redis is unreachable the alert is treated as new: a repeated
        alert is preferable to a lost one.
        """
        if now is None:
            now = time.time()

        try:
            created = self.client.set(alert_key(attacker), int(now), nx=True, ex=self.ttl)
        except RedisError as e:
            logger.warning("Alert cache unavailable, publishing without dedup: %s", e)
            return True
        return bool(created)

    def close(self) -> None:
        """Release the Redis connection pool."""
        self.client.close()
