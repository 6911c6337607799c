"""Conversion between transaction documents and models.

The serialized form is a JSON array of transaction objects. Large
quantities travel as decimal strings, never as numeric literals, so
nothing is lost to float precision. Unknown keys are ignored; missing or
mistyped required keys raise :class:`TransactionParseError`.
"""

import json
import math
from dataclasses import fields, is_dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable

from mev_detect.exceptions import TransactionParseError
from mev_detect.models.alert import SandwichMatch
from mev_detect.models.transaction import QUANTITY_FIELDS, Transaction

# Attribute name -> wire key, where they differ
WIRE_NAMES = {
    "from_address": "from",
    "is_swap": "is_uniswap_swap",
}

REQUIRED_STRINGS = ("hash", "from_address", "to", "value", "gas_price", "gas_limit", "input", "sender")
REQUIRED_INTEGERS = ("timestamp", "block_number")
OPTIONAL_STRINGS = ("token_in", "token_out", "amount_in", "amount_out_min")


def wire_name(attr: str) -> str:
    """Return the document key for a Transaction attribute."""
    return WIRE_NAMES.get(attr, attr)


def parse_transactions(document: str | bytes) -> list[Transaction]:
    """Parse a JSON transaction document.

    Parameters
    ----------
    document : str | bytes
        JSON array of transaction objects, in cluster order.

    Returns
    -------
    list[Transaction]
        Parsed records, in document order.

    Raises
    ------
    TransactionParseError
        If the document is not valid JSON, not an array, or any entry
        does not match the transaction schema.
    """
    try:
        data = json.loads(document)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise TransactionParseError(f"Invalid JSON document: {e}") from e

    if not isinstance(data, list):
        raise TransactionParseError(
            f"Expected a JSON array of transactions, got {type(data).__name__}"
        )

    transactions = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        try:
            tx = transaction_from_dict(item)
        except TransactionParseError as e:
            raise TransactionParseError(f"transaction[{index}]: {e}") from e
        if tx.hash in seen:
            raise TransactionParseError(f"transaction[{index}]: duplicate hash {tx.hash}")
        seen.add(tx.hash)
        transactions.append(tx)
    return transactions


def transaction_from_dict(data: Any) -> Transaction:
    """Build a Transaction from one decoded document entry."""
    if not isinstance(data, dict):
        raise TransactionParseError(f"Expected an object, got {type(data).__name__}")

    values: dict[str, Any] = {}

    for attr in REQUIRED_STRINGS:
        values[attr] = _require_str(data, wire_name(attr))

    for attr in REQUIRED_INTEGERS:
        values[attr] = _require_uint(data, wire_name(attr))

    for attr in OPTIONAL_STRINGS:
        values[attr] = _optional_str(data, wire_name(attr))

    key = wire_name("is_swap")
    if key not in data:
        raise TransactionParseError(f"missing field '{key}'")
    if not isinstance(data[key], bool):
        raise TransactionParseError(f"field '{key}' must be a boolean")
    values["is_swap"] = data[key]

    values["slippage_tolerance"] = _optional_fraction(data, "slippage_tolerance")

    for attr in QUANTITY_FIELDS:
        if values[attr] is not None:
            _check_decimal(wire_name(attr), values[attr])

    return Transaction(**values)


def transaction_to_dict(tx: Transaction) -> dict[str, Any]:
    """Convert a Transaction to its document form.

    Every key is emitted, optional ones as ``None``, so parsing the
    result yields an equal record.
    """
    return {wire_name(f.name): getattr(tx, f.name) for f in fields(tx)}


def dumps_transactions(transactions: Iterable[Transaction], indent: int | None = None) -> str:
    """Serialize transactions to a JSON document."""
    return json.dumps([transaction_to_dict(tx) for tx in transactions], indent=indent)


def to_dict(obj: Any) -> dict:
    """Convert a model (or dict) to a JSON-ready dictionary."""
    if isinstance(obj, Transaction):
        return transaction_to_dict(obj)
    if is_dataclass(obj):
        result = {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
        if isinstance(obj, SandwichMatch):
            result["is_attack"] = obj.is_attack
            result["time_gap"] = obj.time_gap
        return result
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Transaction):
        return transaction_to_dict(value)
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def _require_str(data: dict, key: str) -> str:
    if key not in data:
        raise TransactionParseError(f"missing field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise TransactionParseError(
            f"field '{key}' must be a string, got {type(value).__name__}"
        )
    return value


def _require_uint(data: dict, key: str) -> int:
    if key not in data:
        raise TransactionParseError(f"missing field '{key}'")
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise TransactionParseError(
            f"field '{key}' must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise TransactionParseError(f"field '{key}' must be non-negative, got {value}")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TransactionParseError(
            f"field '{key}' must be a string or null, got {type(value).__name__}"
        )
    return value


def _optional_fraction(data: dict, key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TransactionParseError(
            f"field '{key}' must be a number or null, got {type(value).__name__}"
        )
    try:
        fraction = float(value)
    except OverflowError as e:
        raise TransactionParseError(f"field '{key}' is out of range for a fraction") from e
    if not math.isfinite(fraction) or fraction < 0:
        raise TransactionParseError(f"field '{key}' must be a finite fraction >= 0, got {fraction}")
    return fraction


def _check_decimal(key: str, raw: str) -> None:
    try:
        amount = Decimal(raw)
    except InvalidOperation as e:
        raise TransactionParseError(f"field '{key}' is not a decimal string: {raw!r}") from e
    if not amount.is_finite():
        raise TransactionParseError(f"field '{key}' must be finite, got {raw!r}")
