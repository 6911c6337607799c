"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable

import pytest

from mev_detect.models import Transaction

POOL = "0xpool"
ATTACKER = "0xattacker"


def make_tx(
    hash: str,
    to: str = POOL,
    sender: str = "0xuser",
    timestamp: int = 1000,
    is_swap: bool = False,
    slippage_tolerance: float | None = None,
    block_number: int = 0,
) -> Transaction:
    """Build a transaction with filler values for fields the detector ignores."""
    return Transaction(
        hash=hash,
        from_address=sender,
        to=to,
        value="0",
        gas_price="20000000000",
        gas_limit="21000",
        input="0x",
        timestamp=timestamp,
        block_number=block_number,
        sender=sender,
        is_swap=is_swap,
        slippage_tolerance=slippage_tolerance,
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def tx_factory() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults."""
    return make_tx


@pytest.fixture
def victim() -> Transaction:
    """Swap with 10% slippage at t=1000."""
    return make_tx("0xv", sender="0xvictim", timestamp=1000, is_swap=True, slippage_tolerance=0.10)


@pytest.fixture
def frontrun() -> Transaction:
    """Attacker transaction 5s before the victim."""
    return make_tx("0xf", sender=ATTACKER, timestamp=995)


@pytest.fixture
def backrun() -> Transaction:
    """Attacker transaction 10s after the victim."""
    return make_tx("0xb", sender=ATTACKER, timestamp=1010)


@pytest.fixture
def sandwich(frontrun: Transaction, victim: Transaction, backrun: Transaction) -> list[Transaction]:
    """Positive scenario: [F, V, B]."""
    return [frontrun, victim, backrun]


@pytest.fixture
def raw_transaction() -> dict[str, Any]:
    """One transaction in its document form."""
    return {
        "hash": "0xabc",
        "from": "0xsender",
        "to": "0x7a250d5630b4cf539739df2c5dacb4c659f2488d",
        "value": "123456789012345678901234567890",
        "gas_price": "30000000000",
        "gas_limit": "210000",
        "input": "0x38ed1739",
        "timestamp": 1700000000,
        "block_number": 18000000,
        "sender": "0xsender",
        "slippage_tolerance": 0.01,
        "is_uniswap_swap": True,
        "token_in": "0xtokenin",
        "token_out": "0xtokenout",
        "amount_in": "1000000000000000000",
        "amount_out_min": "990000000000000000",
    }


@pytest.fixture
def sandwich_document() -> str:
    """Positive scenario as a JSON document."""
    def entry(hash: str, sender: str, timestamp: int, swap: bool, slippage: float | None) -> dict:
        return {
            "hash": hash,
            "from": sender,
            "to": POOL,
            "value": "0",
            "gas_price": "20000000000",
            "gas_limit": "21000",
            "input": "0x",
            "timestamp": timestamp,
            "block_number": 0,
            "sender": sender,
            "slippage_tolerance": slippage,
            "is_uniswap_swap": swap,
        }

    return json.dumps([
        entry("0xf", ATTACKER, 995, False, None),
        entry("0xv", "0xvictim", 1000, True, 0.10),
        entry("0xb", ATTACKER, 1010, False, None),
    ])


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler changes made by setup_logging."""
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_level = logging.getLogger("mev_detect").level
    errors_level = logging.getLogger("mev_detect.errors").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("mev_detect").setLevel(package_level)
    logging.getLogger("mev_detect.errors").setLevel(errors_level)
