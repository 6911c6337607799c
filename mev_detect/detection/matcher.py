"""Nearest-neighbour matching around a reference transaction."""

from typing import Sequence

from mev_detect.models.enums import Direction
from mev_detect.models.transaction import Transaction


def is_related(candidate: Transaction, reference: Transaction) -> bool:
    """Same destination contract, different transaction."""
    return candidate.to == reference.to and candidate.hash != reference.hash


def time_distance(candidate: Transaction, reference: Transaction, direction: Direction) -> int | None:
    """Seconds from the reference to the candidate in ``direction``.

    Returns None when the candidate lies on the other side of the
    reference, so an out-of-order record can never produce a negative
    (or wrapped) distance.
    """
    if direction == Direction.BEFORE:
        distance = reference.timestamp - candidate.timestamp
    else:
        distance = candidate.timestamp - reference.timestamp
    return distance if distance >= 0 else None


def find_matching_transaction(
    transactions: Sequence[Transaction],
    reference: Transaction,
    direction: Direction,
) -> Transaction | None:
    """Find the closest related transaction before or after ``reference``.

    Parameters
    ----------
    transactions : Sequence[Transaction]
        Full cluster, in input order.
    reference : Transaction
        The victim the frontrun/backrun is searched around.
    direction : Direction
        ``BEFORE`` for the closest preceding transaction, ``AFTER`` for
        the closest following one. A candidate sharing the reference's
        timestamp qualifies for both.

    Returns
    -------
    Transaction | None
        Closest candidate; on equal distances the first one in input
        order wins. None when no candidate qualifies.
    """
    best: Transaction | None = None
    best_distance: int | None = None

    for tx in transactions:
        if not is_related(tx, reference):
            continue
        distance = time_distance(tx, reference, direction)
        if distance is None:
            continue
        # Strict comparison keeps the earliest candidate on ties
        if best_distance is None or distance < best_distance:
            best, best_distance = tx, distance

    return best
