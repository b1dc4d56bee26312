"""
Allowlist round (phase) records.

A round is one Merkle root plus its sale window and limits. This module only
builds the payload; storing it is left to whatever document store the app
uses, keyed by ``name``.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from eth_utils import decode_hex, encode_hex

from help_allowlist.leaf import normalize_address
from help_allowlist.service import compute_root_from_addresses
from help_allowlist.tree import ZERO_ROOT


@dataclass
class AllowlistRound:
    name: str
    root: bytes
    size: int
    addresses: List[str] = field(default_factory=list)
    price_wei: int = 0
    starts_at: Optional[int] = None   # unix seconds
    ends_at: Optional[int] = None
    max_per_wallet: Optional[int] = None
    max_per_tx: Optional[int] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Round name is required")
        if len(self.root) != 32:
            raise ValueError(f"Root must be 32 bytes, got {len(self.root)}")
        if self.price_wei < 0:
            raise ValueError("price_wei must be non-negative")
        if self.starts_at is not None and self.ends_at is not None and self.ends_at <= self.starts_at:
            raise ValueError("ends_at must be after starts_at")
        for label in ("max_per_wallet", "max_per_tx"):
            value = getattr(self, label)
            if value is not None and value <= 0:
                raise ValueError(f"{label} must be positive")

    @property
    def is_active(self) -> bool:
        return self.root != ZERO_ROOT

    def is_open(self, now: int) -> bool:
        """Whether ``now`` falls inside the round's time window."""
        if self.starts_at is not None and now < self.starts_at:
            return False
        if self.ends_at is not None and now >= self.ends_at:
            return False
        return True

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "root": encode_hex(self.root),
            "size": self.size,
            "addresses": list(self.addresses),
            "priceWei": str(self.price_wei),
            "startsAt": self.starts_at,
            "endsAt": self.ends_at,
            "maxPerWallet": self.max_per_wallet,
            "maxPerTx": self.max_per_tx,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "AllowlistRound":
        addresses = list(doc.get("addresses") or [])
        size = doc.get("size")
        return cls(
            name=doc["name"],
            root=decode_hex(doc["root"]),
            size=int(size) if size is not None else len(addresses),
            addresses=addresses,
            price_wei=int(doc.get("priceWei") or 0),
            starts_at=doc.get("startsAt"),
            ends_at=doc.get("endsAt"),
            max_per_wallet=doc.get("maxPerWallet"),
            max_per_tx=doc.get("maxPerTx"),
        )


def build_round(
    name: str,
    addresses: Sequence[str],
    price_wei: int = 0,
    starts_at: Optional[int] = None,
    ends_at: Optional[int] = None,
    max_per_wallet: Optional[int] = None,
    max_per_tx: Optional[int] = None,
) -> AllowlistRound:
    result = compute_root_from_addresses(addresses)
    return AllowlistRound(
        name=name,
        root=result.root,
        size=result.size,
        addresses=[normalize_address(a) for a in addresses],
        price_wei=price_wei,
        starts_at=starts_at,
        ends_at=ends_at,
        max_per_wallet=max_per_wallet,
        max_per_tx=max_per_tx,
    )
