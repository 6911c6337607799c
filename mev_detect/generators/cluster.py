"""Synthetic transaction clusters for load tests and demos."""

from __future__ import annotations

import random
import time

from faker import Faker

from mev_detect.models.transaction import Transaction

# Uniswap V2 Router 02 on mainnet
UNISWAP_V2_ROUTER = "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"

GWEI = 10**9
WEI_PER_ETH = 10**18


class ClusterGenerator:
    """Generate transactions and planted sandwich clusters.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    router : str
        Destination contract used for swaps and attacker transactions.
    base_timestamp : int | None
        Unix time the generated clusters are centred on (default: now).
    """

    def __init__(
        self,
        seed: int | None = None,
        router: str = UNISWAP_V2_ROUTER,
        base_timestamp: int | None = None,
    ) -> None:
        self.fake = Faker()
        self.router = router
        self.base_timestamp = base_timestamp if base_timestamp is not None else int(time.time())
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def address(self) -> str:
        return "0x" + self.fake.hexify("^" * 40)

    def tx_hash(self) -> str:
        return "0x" + self.fake.hexify("^" * 64)

    def transaction(
        self,
        is_swap: bool = False,
        sender: str | None = None,
        to: str | None = None,
        timestamp: int | None = None,
        slippage_tolerance: float | None = None,
    ) -> Transaction:
        """Generate one transaction.

        Swaps go to the router and get a 2-10% slippage tolerance unless
        one is given; other transactions go to a random address.
        """
        sender = sender or self.address()
        if to is None:
            to = self.router if is_swap else self.address()
        if timestamp is None:
            timestamp = self.base_timestamp
        if is_swap and slippage_tolerance is None:
            slippage_tolerance = round(random.uniform(0.02, 0.10), 4)

        amount_in = random.randint(1, 1000) * WEI_PER_ETH // 100 if is_swap else None
        return Transaction(
            hash=self.tx_hash(),
            from_address=sender,
            to=to,
            value=str(random.randint(0, WEI_PER_ETH)),
            gas_price=str(random.randint(20, 120) * GWEI),
            gas_limit=str(random.randint(21_000, 121_000)),
            input="0x" + "0" * 200 if is_swap else "0x",
            timestamp=timestamp,
            block_number=0,
            sender=sender,
            is_swap=is_swap,
            slippage_tolerance=slippage_tolerance,
            token_in=self.address() if is_swap else None,
            token_out=self.address() if is_swap else None,
            amount_in=str(amount_in) if amount_in is not None else None,
            amount_out_min=str(amount_in * 9 // 10) if amount_in is not None else None,
        )

    def sandwich(
        self,
        attacker: str | None = None,
        victim_slippage: float = 0.10,
        timestamp: int | None = None,
        gap_seconds: int = 5,
    ) -> list[Transaction]:
        """Generate ``[frontrun, victim, backrun]`` around one swap.

        The attacker's transactions hit the router ``gap_seconds`` before
        and after the victim.
        """
        attacker = attacker or self.address()
        if timestamp is None:
            timestamp = self.base_timestamp

        frontrun = self.transaction(sender=attacker, to=self.router, timestamp=timestamp - gap_seconds)
        victim = self.transaction(
            is_swap=True, timestamp=timestamp, slippage_tolerance=victim_slippage
        )
        backrun = self.transaction(sender=attacker, to=self.router, timestamp=timestamp + gap_seconds)
        return [frontrun, victim, backrun]

    def batch(
        self,
        size: int = 100,
        attack_rate: float = 0.1,
        swap_rate: float = 0.05,
        attacker: str | None = None,
        jitter_seconds: int = 30,
    ) -> list[Transaction]:
        """Generate a shuffled batch, sometimes holding a planted sandwich.

        Parameters
        ----------
        size : int
            Number of transactions in the batch.
        attack_rate : float
            Probability that the batch holds a sandwich.
        swap_rate : float
            Probability that a filler transaction is a swap.
        attacker : str | None
            Attacker address for the planted sandwich.
        jitter_seconds : int
            Filler timestamps fall within this many seconds of the base.
        """
        batch: list[Transaction] = []
        if size >= 3 and random.random() < attack_rate:
            batch.extend(self.sandwich(attacker=attacker))

        while len(batch) < size:
            offset = random.randint(-jitter_seconds, jitter_seconds)
            batch.append(
                self.transaction(
                    is_swap=random.random() < swap_rate,
                    timestamp=max(0, self.base_timestamp + offset),
                )
            )

        random.shuffle(batch)
        return batch
