"""Tests for transaction document parsing and serialization."""

import json
from decimal import Decimal
from typing import Any

import pytest

from mev_detect.exceptions import MevDetectError, TransactionParseError
from mev_detect.models import Direction, SandwichAlert, SandwichMatch, Transaction
from mev_detect.serialization import (
    dumps_transactions,
    parse_transactions,
    serialize_value,
    to_dict,
    transaction_from_dict,
    transaction_to_dict,
    wire_name,
)


class TestTransactionFromDict:
    """Tests for transaction_from_dict."""

    def test_full_record(self, raw_transaction: dict[str, Any]) -> None:
        """All fields map onto the model."""
        tx = transaction_from_dict(raw_transaction)

        assert tx.hash == "0xabc"
        assert tx.from_address == "0xsender"
        assert tx.to == "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"
        assert tx.value == "123456789012345678901234567890"
        assert tx.timestamp == 1700000000
        assert tx.block_number == 18000000
        assert tx.is_swap is True
        assert tx.slippage_tolerance == 0.01
        assert tx.token_in == "0xtokenin"
        assert tx.amount_out_min == "990000000000000000"

    def test_optional_fields_absent(self, raw_transaction: dict[str, Any]) -> None:
        """Optional fields default to None when missing or null."""
        for key in ("token_in", "token_out", "amount_in", "slippage_tolerance"):
            del raw_transaction[key]
        raw_transaction["amount_out_min"] = None

        tx = transaction_from_dict(raw_transaction)

        assert tx.slippage_tolerance is None
        assert tx.token_in is None
        assert tx.token_out is None
        assert tx.amount_in is None
        assert tx.amount_out_min is None

    def test_unknown_fields_ignored(self, raw_transaction: dict[str, Any]) -> None:
        """Extra keys are tolerated."""
        raw_transaction["nonce"] = 7
        raw_transaction["ingestionTime"] = 1700000000123

        assert transaction_from_dict(raw_transaction).hash == "0xabc"

    @pytest.mark.parametrize(
        "missing",
        ["hash", "from", "to", "value", "gas_price", "gas_limit", "input",
         "timestamp", "block_number", "sender", "is_uniswap_swap"],
    )
    def test_missing_required_field(self, raw_transaction: dict[str, Any], missing: str) -> None:
        """Every required key is enforced."""
        del raw_transaction[missing]

        with pytest.raises(TransactionParseError, match=missing):
            transaction_from_dict(raw_transaction)

    @pytest.mark.parametrize(
        "key,value",
        [
            ("value", 1000),  # big quantities must be strings
            ("gas_price", 1.5),
            ("hash", None),
            ("timestamp", "1700000000"),
            ("timestamp", 1700000000.0),
            ("timestamp", -1),
            ("timestamp", True),
            ("block_number", -5),
            ("is_uniswap_swap", 1),
            ("is_uniswap_swap", "true"),
            ("slippage_tolerance", "0.1"),
            ("slippage_tolerance", -0.01),
            ("slippage_tolerance", float("inf")),
            ("slippage_tolerance", False),
            ("token_in", 5),
            ("value", "lots"),
            ("amount_in", "NaN"),
        ],
    )
    def test_mistyped_field(self, raw_transaction: dict[str, Any], key: str, value: Any) -> None:
        """Wrong types and out-of-domain values are rejected."""
        raw_transaction[key] = value

        with pytest.raises(TransactionParseError):
            transaction_from_dict(raw_transaction)

    def test_slippage_too_large_for_float(self, raw_transaction: dict[str, Any]) -> None:
        """Integers beyond float range are rejected, not overflowed."""
        raw_transaction["slippage_tolerance"] = 10**400

        with pytest.raises(TransactionParseError, match="out of range"):
            transaction_from_dict(raw_transaction)

    def test_integer_slippage_accepted(self, raw_transaction: dict[str, Any]) -> None:
        """A whole-number slippage becomes a float."""
        raw_transaction["slippage_tolerance"] = 0

        tx = transaction_from_dict(raw_transaction)

        assert tx.slippage_tolerance == 0.0
        assert isinstance(tx.slippage_tolerance, float)

    def test_not_an_object(self) -> None:
        """Entries must be objects."""
        with pytest.raises(TransactionParseError):
            transaction_from_dict(["0xabc"])


class TestParseTransactions:
    """Tests for parse_transactions."""

    def test_parse_document(self, sandwich_document: str) -> None:
        """Document order is preserved."""
        txs = parse_transactions(sandwich_document)

        assert [tx.hash for tx in txs] == ["0xf", "0xv", "0xb"]
        assert txs[1].is_swap is True

    def test_parse_bytes(self, sandwich_document: str) -> None:
        """Bytes input is accepted."""
        assert len(parse_transactions(sandwich_document.encode("utf-8"))) == 3

    def test_empty_array(self) -> None:
        """An empty cluster parses to an empty list."""
        assert parse_transactions("[]") == []

    @pytest.mark.parametrize("document", ["", "not json", "{", '{"hash": "0x1"}', "42", "null"])
    def test_invalid_document(self, document: str) -> None:
        """Non-JSON and non-array documents fail."""
        with pytest.raises(TransactionParseError):
            parse_transactions(document)

    def test_integer_over_digit_limit(self) -> None:
        """Integer literals past the interpreter's digit limit fail cleanly."""
        with pytest.raises(TransactionParseError):
            parse_transactions('[{"timestamp": ' + "9" * 5000 + "}]")

    def test_deeply_nested(self) -> None:
        """Nesting deeper than the recursion limit fails cleanly."""
        with pytest.raises(TransactionParseError):
            parse_transactions("[" * 100000 + "]" * 100000)

    def test_error_names_entry(self, raw_transaction: dict[str, Any]) -> None:
        """Failures point at the offending entry."""
        broken = dict(raw_transaction, hash="0xdef")
        del broken["sender"]

        with pytest.raises(TransactionParseError, match=r"transaction\[1\].*sender"):
            parse_transactions(json.dumps([raw_transaction, broken]))

    def test_duplicate_hash(self, raw_transaction: dict[str, Any]) -> None:
        """Hashes are unique within a cluster."""
        with pytest.raises(TransactionParseError, match="duplicate"):
            parse_transactions(json.dumps([raw_transaction, raw_transaction]))

    def test_parse_error_is_mev_detect_error(self) -> None:
        """Parse failures belong to the package hierarchy."""
        with pytest.raises(MevDetectError):
            parse_transactions("[1]")


class TestTransactionToDict:
    """Tests for serializing transactions back to documents."""

    def test_lossless_round_trip(self, raw_transaction: dict[str, Any]) -> None:
        """Wire names and exact quantity strings survive a round trip."""
        tx = transaction_from_dict(raw_transaction)

        assert transaction_to_dict(tx) == raw_transaction

    def test_emits_optional_keys(self, tx_factory) -> None:
        """Absent optional fields are written as null."""
        data = transaction_to_dict(tx_factory("0x1"))

        assert data["from"] == "0xuser"
        assert data["is_uniswap_swap"] is False
        assert data["token_in"] is None
        assert data["slippage_tolerance"] is None
        assert "from_address" not in data

    def test_dumps_transactions(self, sandwich_document: str) -> None:
        """Dumped documents parse back to equal records."""
        txs = parse_transactions(sandwich_document)

        assert parse_transactions(dumps_transactions(txs)) == txs

    def test_wire_name(self) -> None:
        """Only renamed attributes differ on the wire."""
        assert wire_name("from_address") == "from"
        assert wire_name("is_swap") == "is_uniswap_swap"
        assert wire_name("timestamp") == "timestamp"


class TestSerializeValue:
    """Tests for serialize_value and to_dict."""

    def test_decimal_as_string(self) -> None:
        """Decimals keep full precision."""
        assert serialize_value(Decimal("123456789012345678901234567890.5")) == (
            "123456789012345678901234567890.5"
        )

    def test_enum_and_nested(self) -> None:
        """Enums, dicts and lists are handled recursively."""
        value = {"dir": Direction.BEFORE, "amounts": [Decimal("1.5")]}

        assert serialize_value(value) == {"dir": "BEFORE", "amounts": ["1.5"]}

    def test_match_to_dict(self, sandwich: list[Transaction]) -> None:
        """Matches serialize with nested transactions and derived flags."""
        frontrun, victim, backrun = sandwich
        match = SandwichMatch(
            frontrun=frontrun,
            victim=victim,
            backrun=backrun,
            same_sender=True,
            within_window=True,
            exploitable_victim=True,
        )

        data = to_dict(match)

        assert data["victim"]["hash"] == "0xv"
        assert data["frontrun"]["from"] == frontrun.sender
        assert data["is_attack"] is True
        assert data["time_gap"] == 15
        json.dumps(data)

    def test_alert_has_no_match_flags(self) -> None:
        """Only matches carry is_attack and time_gap."""
        alert = SandwichAlert(
            victim="0xvictim",
            attacker="0xattacker",
            victim_hash="0xv",
            frontrun_hash="0xf",
            backrun_hash="0xb",
            pool="0xpool",
            block_number=0,
            timestamp=1700000000,
        )

        data = to_dict(alert)

        assert data["attacker"] == "0xattacker"
        assert "is_attack" not in data
        assert "time_gap" not in data

    def test_to_dict_passthrough(self) -> None:
        """Dicts pass through; other objects are wrapped."""
        assert to_dict({"a": 1}) == {"a": 1}
        assert to_dict(5) == {"value": "5"}
