"""Detection-to-alert pipeline."""

import logging
import time
from typing import Any, Protocol, Sequence

from mev_detect.alerts.dedup import AlertDeduplicator
from mev_detect.cluster import TransactionPool
from mev_detect.config import DEFAULT_ALERT_TOPIC
from mev_detect.detection.sandwich import SandwichDetector
from mev_detect.models.alert import SandwichAlert, SandwichMatch
from mev_detect.models.transaction import Transaction

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    def write(self, topic: str, record: Any) -> None: ...


def build_alert(match: SandwichMatch, now: float | None = None) -> SandwichAlert:
    """Build the alert payload for a matched sandwich."""
    if now is None:
        now = time.time()
    return SandwichAlert(
        victim=match.victim.sender,
        attacker=match.attacker,
        victim_hash=match.victim.hash,
        frontrun_hash=match.frontrun.hash,
        backrun_hash=match.backrun.hash,
        pool=match.victim.to,
        block_number=match.victim.block_number,
        timestamp=int(now),
    )


class AlertPipeline:
    """Run the detector on clusters and publish deduplicated alerts.

    Transactions are either handed over as a ready cluster with
    :meth:`process`, or ingested one by one into the pending pool and
    evaluated periodically with :meth:`run_once`.
    """

    def __init__(
        self,
        sink: AlertSink,
        deduplicator: AlertDeduplicator,
        detector: SandwichDetector | None = None,
        pool: TransactionPool | None = None,
        topic: str = DEFAULT_ALERT_TOPIC,
    ) -> None:
        self.sink = sink
        self.deduplicator = deduplicator
        self.detector = detector or SandwichDetector()
        self.pool = pool if pool is not None else TransactionPool()
        self.topic = topic
        self.detected = 0
        self.published = 0

    def ingest(self, transaction: Transaction, ingested_at: float | None = None) -> None:
        """Add a pending transaction to the pool."""
        self.pool.add(transaction, ingested_at=ingested_at)

    def run_once(self, now: float | None = None) -> SandwichAlert | None:
        """Evaluate the transactions still alive in the pool at ``now``."""
        if now is None:
            now = time.time()
        return self.process(self.pool.cluster(now), now=now)

    def process(self, transactions: Sequence[Transaction], now: float | None = None) -> SandwichAlert | None:
        """Evaluate one cluster.

        Returns
        -------
        SandwichAlert | None
            The alert that was written, or None when nothing was detected
            or the attacker was alerted on within the TTL.
        """
        match = self.detector.analyze(transactions)
        if match is None or not match.is_attack:
            return None

        self.detected += 1
        logger.warning(
            "Potential sandwich attack: attacker=%s victim=%s",
            match.attacker,
            match.victim.hash,
        )

        if not self.deduplicator.is_new(match.attacker, now=now):
            logger.info("Duplicate alert for attacker %s. Skipping.", match.attacker)
            return None

        alert = build_alert(match, now=now)
        self.sink.write(self.topic, alert)
        self.published += 1
        return alert
