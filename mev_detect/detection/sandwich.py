"""Sandwich attack verdict for a transaction cluster."""

import logging
from typing import Sequence

from mev_detect.config import DetectorConfig
from mev_detect.detection.matcher import find_matching_transaction
from mev_detect.detection.victim import find_victim
from mev_detect.models.alert import SandwichMatch
from mev_detect.models.enums import Direction
from mev_detect.models.transaction import Transaction

logger = logging.getLogger(__name__)


class SandwichDetector:
    """Decide whether a cluster holds a frontrun/victim/backrun sandwich.

    The detector keeps no state between calls: each call is a pure
    function of the cluster it receives, so one instance can be shared
    across threads.

    Conditions checked on the matched triple:
    - Common attacker: frontrun and backrun have the same ``sender``
    - Temporal proximity: they are less than ``max_window_seconds`` apart
    - Exploitable victim: slippage tolerance above ``min_slippage_tolerance``
    """

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self.config = config or DetectorConfig()

    def analyze(self, transactions: Sequence[Transaction]) -> SandwichMatch | None:
        """Match the frontrun/victim/backrun triple and evaluate it.

        Parameters
        ----------
        transactions : Sequence[Transaction]
            Cluster in input order.

        Returns
        -------
        SandwichMatch | None
            The evaluated triple, or None when the cluster is too small,
            holds no swap, or either neighbour is missing.
        """
        if len(transactions) < self.config.min_cluster_size:
            logger.debug("Cluster too small: %d transactions", len(transactions))
            return None

        victim = find_victim(transactions)
        if victim is None:
            logger.debug("No swap transaction in cluster of %d", len(transactions))
            return None

        frontrun = find_matching_transaction(transactions, victim, Direction.BEFORE)
        backrun = find_matching_transaction(transactions, victim, Direction.AFTER)
        if frontrun is None or backrun is None:
            logger.debug(
                "Victim %s unmatched: frontrun=%s backrun=%s",
                victim.hash,
                frontrun.hash if frontrun else None,
                backrun.hash if backrun else None,
            )
            return None

        match = SandwichMatch(
            frontrun=frontrun,
            victim=victim,
            backrun=backrun,
            same_sender=frontrun.sender == backrun.sender,
            within_window=abs(backrun.timestamp - frontrun.timestamp) < self.config.max_window_seconds,
            exploitable_victim=(
                victim.slippage_tolerance is not None
                and victim.slippage_tolerance > self.config.min_slippage_tolerance
            ),
        )
        logger.debug(
            "Victim %s: same_sender=%s within_window=%s exploitable=%s",
            victim.hash,
            match.same_sender,
            match.within_window,
            match.exploitable_victim,
        )
        return match

    def evaluate(self, transactions: Sequence[Transaction]) -> bool:
        """Return True when the cluster is a sandwich attack."""
        match = self.analyze(transactions)
        return match is not None and match.is_attack


_default_detector = SandwichDetector()


def is_sandwich(transactions: Sequence[Transaction]) -> bool:
    """Evaluate a cluster with the default thresholds."""
    return _default_detector.evaluate(transactions)
