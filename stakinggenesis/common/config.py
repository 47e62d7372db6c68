"""
Genesis account handling and predeploy configuration.

A GenesisAlloc is one entry of a genesis "alloc" section: balance, nonce,
code and raw storage words for a single address.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from stakinggenesis.common.types import (
    MAX_SAFE_JS_INT,
    UINT256_MAX,
    to_address,
)
from stakinggenesis.staking.errors import PredeployConfigError


# ---------------------------------------------------------------------------
# Predeploy defaults
# ---------------------------------------------------------------------------

STAKING_CONTRACT_ADDRESS = bytes.fromhex("0000000000000000000000000000000000001001")

DEFAULT_STAKED_BALANCE = 0x8AC7230489E80000  # 10 ETH

DEFAULT_MIN_VALIDATOR_COUNT = 1
DEFAULT_MAX_VALIDATOR_COUNT = MAX_SAFE_JS_INT


@dataclass(frozen=True)
class PredeployParams:
    min_validator_count: int = DEFAULT_MIN_VALIDATOR_COUNT
    max_validator_count: int = DEFAULT_MAX_VALIDATOR_COUNT
    staked_amount: int = DEFAULT_STAKED_BALANCE  # per validator, in wei

    def validate(self) -> None:
        if self.min_validator_count < 0:
            raise PredeployConfigError(
                f"min validator count must not be negative, got {self.min_validator_count}"
            )
        if self.max_validator_count < self.min_validator_count:
            raise PredeployConfigError(
                f"max validator count {self.max_validator_count} is below "
                f"min validator count {self.min_validator_count}"
            )
        if self.max_validator_count > UINT256_MAX:
            raise PredeployConfigError(
                f"max validator count {self.max_validator_count} does not fit in uint256"
            )
        if self.staked_amount < 0:
            raise PredeployConfigError(
                f"staked amount must not be negative, got {self.staked_amount}"
            )
        if self.staked_amount > UINT256_MAX:
            raise PredeployConfigError(
                f"staked amount {self.staked_amount} does not fit in uint256"
            )


# ---------------------------------------------------------------------------
# Genesis accounts
# ---------------------------------------------------------------------------

def _parse_hex_int(val: str | int, default: int = 0) -> int:
    if isinstance(val, int):
        return val
    if isinstance(val, str):
        return int(val, 0) if val else default
    return default


@dataclass
class GenesisAlloc:
    address: bytes  # 20 bytes
    balance: int = 0
    nonce: int = 0
    code: bytes = b""
    storage: dict[bytes, bytes] = field(default_factory=dict)

    def to_json(self) -> dict:
        """Encode as a geth-style alloc entry."""
        entry: dict = {"balance": hex(self.balance)}
        if self.nonce:
            entry["nonce"] = hex(self.nonce)
        if self.code:
            entry["code"] = "0x" + self.code.hex()
        if self.storage:
            entry["storage"] = {
                "0x" + key.hex(): "0x" + value.hex()
                for key, value in sorted(self.storage.items())
            }
        return entry

    @classmethod
    def from_json(cls, address: str, data: dict) -> GenesisAlloc:
        code_hex = data.get("code", "0x")
        storage = {}
        for k, v in data.get("storage", {}).items():
            storage_key = bytes.fromhex(k.removeprefix("0x").zfill(64))
            storage_val = bytes.fromhex(v.removeprefix("0x").zfill(64))
            storage[storage_key] = storage_val
        return cls(
            address=to_address(address.removeprefix("0x").zfill(40)),
            balance=_parse_hex_int(data.get("balance", "0")),
            nonce=_parse_hex_int(data.get("nonce", "0")),
            code=bytes.fromhex(code_hex.removeprefix("0x")) if code_hex else b"",
            storage=storage,
        )


def alloc_to_json(allocs: Iterable[GenesisAlloc]) -> dict[str, dict]:
    """Encode allocs as a genesis "alloc" section keyed by 0x address."""
    return {"0x" + alloc.address.hex(): alloc.to_json() for alloc in allocs}


def merge_genesis_alloc(genesis: dict, allocs: Iterable[GenesisAlloc]) -> dict:
    """Return a copy of a genesis JSON document with allocs added.

    Existing entries for the same address are replaced.

    Raises:
        ValueError: genesis or its "alloc" section is not a JSON object
    """
    if not isinstance(genesis, dict):
        raise ValueError(
            f"genesis must be a JSON object, got {type(genesis).__name__}"
        )
    existing = genesis.get("alloc", {})
    if not isinstance(existing, dict):
        raise ValueError(
            f"genesis alloc must be a JSON object, got {type(existing).__name__}"
        )
    merged = dict(genesis)
    section = {}
    for addr_hex, entry in existing.items():
        section["0x" + addr_hex.lower().removeprefix("0x").zfill(40)] = entry
    section.update(alloc_to_json(allocs))
    merged["alloc"] = section
    return merged
