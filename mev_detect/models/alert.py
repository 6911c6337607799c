"""Detection result and alert models."""

from dataclasses import dataclass

from mev_detect.models.transaction import Transaction


@dataclass(frozen=True)
class SandwichMatch:
    """Frontrun/victim/backrun triple with the outcome of each condition."""

    frontrun: Transaction
    victim: Transaction
    backrun: Transaction
    same_sender: bool
    within_window: bool
    exploitable_victim: bool

    @property
    def is_attack(self) -> bool:
        """All three conditions hold."""
        return self.same_sender and self.within_window and self.exploitable_victim

    @property
    def attacker(self) -> str:
        return self.frontrun.sender

    @property
    def time_gap(self) -> int:
        """Seconds between frontrun and backrun, independent of their order."""
        return abs(self.backrun.timestamp - self.frontrun.timestamp)


@dataclass
class SandwichAlert:
    """Alert payload published for a detected sandwich."""

    victim: str
    attacker: str
    victim_hash: str
    frontrun_hash: str
    backrun_hash: str
    pool: str
    block_number: int
    timestamp: int  # alert creation time, unix seconds
