"""Sandwich detection: victim locator, directional matcher and verdict."""

from mev_detect.detection.matcher import find_matching_transaction
from mev_detect.detection.sandwich import SandwichDetector, is_sandwich
from mev_detect.detection.victim import find_victim

__all__ = [
    "SandwichDetector",
    "find_matching_transaction",
    "find_victim",
    "is_sandwich",
]
