"""Sandwich attack detection for clusters of blockchain transactions."""

from mev_detect.api import detect, explain
from mev_detect.detection import SandwichDetector, find_matching_transaction, find_victim
from mev_detect.models import Direction, SandwichMatch, Transaction
from mev_detect.serialization import parse_transactions

__all__ = [
    "Direction",
    "SandwichDetector",
    "SandwichMatch",
    "Transaction",
    "detect",
    "explain",
    "find_matching_transaction",
    "find_victim",
    "parse_transactions",
]
