"""Domain models for sandwich detection."""

from mev_detect.models.alert import SandwichAlert, SandwichMatch
from mev_detect.models.enums import Direction
from mev_detect.models.transaction import QUANTITY_FIELDS, Transaction

__all__ = [
    "Direction",
    "QUANTITY_FIELDS",
    "SandwichAlert",
    "SandwichMatch",
    "Transaction",
]
