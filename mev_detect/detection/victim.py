"""Victim selection within a transaction cluster."""

from typing import Sequence

from mev_detect.models.transaction import Transaction


def find_victim(transactions: Sequence[Transaction]) -> Transaction | None:
    """Return the first swap transaction in input order, or None.

    Input order is taken as the meaningful sequence (mempool arrival or
    block position). Clusters holding several swaps must be partitioned
    by the caller to test each of them.
    """
    return next((tx for tx in transactions if tx.is_swap), None)
