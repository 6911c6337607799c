"""In-memory pool of recently seen transactions."""

import time
from dataclasses import dataclass, field

from mev_detect.models.transaction import Transaction


@dataclass
class TransactionPool:
    """Recently observed transactions, keyed by hash.

    A cluster is the set of transactions ingested within the last
    ``lifespan_seconds``; older entries are evicted when a cluster is
    drawn.
    """

    lifespan_seconds: float = 60.0

    # hash -> (transaction, ingestion time); dicts keep insertion order
    _entries: dict[str, tuple[Transaction, float]] = field(default_factory=dict)

    def add(self, tx: Transaction, ingested_at: float | None = None) -> None:
        """Add a transaction, replacing any earlier record with its hash."""
        if ingested_at is None:
            ingested_at = time.time()
        self._entries.pop(tx.hash, None)
        self._entries[tx.hash] = (tx, ingested_at)

    def cluster(self, now: float | None = None) -> list[Transaction]:
        """Return fresh transactions in ingestion order and evict stale ones."""
        if now is None:
            now = time.time()

        fresh = []
        for tx_hash, (tx, ingested_at) in list(self._entries.items()):
            if now - ingested_at < self.lifespan_seconds:
                fresh.append(tx)
            else:
                del self._entries[tx_hash]
        return fresh

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, tx_hash: object) -> bool:
        return tx_hash in self._entries
