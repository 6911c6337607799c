"""Transaction model for observed on-chain transactions."""

from dataclasses import dataclass
from decimal import Decimal

# Quantities carried as decimal strings to keep full precision
QUANTITY_FIELDS = ("value", "gas_price", "gas_limit", "amount_in", "amount_out_min")


@dataclass(frozen=True)
class Transaction:
    """One transaction observed by the caller.

    Large quantities (value, gas price/limit, token amounts) are kept as
    the decimal strings they arrived as, so a record serializes back to
    exactly the same document. Use :meth:`quantity` for arithmetic.
    """

    hash: str
    from_address: str  # "from" on the wire
    to: str  # router/pool contract, the matching key
    value: str
    gas_price: str
    gas_limit: str
    input: str
    timestamp: int  # unix seconds
    block_number: int  # 0 while pending
    sender: str  # attack attribution, usually equal to from_address
    is_swap: bool = False
    slippage_tolerance: float | None = None  # 0.01 == 1%

    # Swap-specific fields (optional)
    token_in: str | None = None
    token_out: str | None = None
    amount_in: str | None = None
    amount_out_min: str | None = None

    @property
    def is_pending(self) -> bool:
        """True while the transaction has not been included in a block."""
        return self.block_number == 0

    def quantity(self, name: str) -> Decimal | None:
        """Return a quantity field as an exact ``Decimal``.

        Parameters
        ----------
        name : str
            One of ``value``, ``gas_price``, ``gas_limit``, ``amount_in``
            or ``amount_out_min``.

        Returns
        -------
        Decimal | None
            The parsed amount, or None when an optional amount is absent.
        """
        if name not in QUANTITY_FIELDS:
            raise KeyError(f"{name} is not a quantity field")
        raw = getattr(self, name)
        return Decimal(raw) if raw is not None else None
