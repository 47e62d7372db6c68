"""Tests for genesis alloc encoding."""

import pytest

from stakinggenesis.common.config import (
    GenesisAlloc,
    STAKING_CONTRACT_ADDRESS,
    alloc_to_json,
    merge_genesis_alloc,
)
from stakinggenesis.common.types import int_to_hash

from tests.fixtures.addresses import VALIDATOR_1, VALIDATOR_2


class TestGenesisAllocJSON:
    def test_to_json(self):
        alloc = GenesisAlloc(
            address=VALIDATOR_1,
            balance=20 * 10**18,
            code=b"\x60\x00",
            storage={int_to_hash(0): int_to_hash(2)},
        )
        entry = alloc.to_json()
        assert entry["balance"] == hex(20 * 10**18)
        assert entry["code"] == "0x6000"
        assert entry["storage"] == {"0x" + "00" * 32: "0x" + "00" * 31 + "02"}
        assert "nonce" not in entry

    def test_empty_fields_omitted(self):
        assert GenesisAlloc(address=VALIDATOR_1).to_json() == {"balance": "0x0"}

    def test_storage_sorted(self):
        alloc = GenesisAlloc(
            address=VALIDATOR_1,
            storage={int_to_hash(6): int_to_hash(1), int_to_hash(5): int_to_hash(1)},
        )
        assert list(alloc.to_json()["storage"]) == [
            "0x" + int_to_hash(5).hex(),
            "0x" + int_to_hash(6).hex(),
        ]

    def test_from_json(self):
        alloc = GenesisAlloc.from_json(
            "0x" + VALIDATOR_1.hex(),
            {
                "balance": "0x10",
                "nonce": "0x1",
                "code": "0x6000",
                "storage": {"0x05": "0x01"},
            },
        )
        assert alloc.address == VALIDATOR_1
        assert alloc.balance == 16
        assert alloc.nonce == 1
        assert alloc.code == b"\x60\x00"
        assert alloc.storage == {int_to_hash(5): int_to_hash(1)}

    def test_json_round_trip(self, staking_alloc):
        entry = staking_alloc.to_json()
        decoded = GenesisAlloc.from_json("0x" + staking_alloc.address.hex(), entry)
        assert decoded == staking_alloc

    def test_alloc_to_json(self, staking_alloc):
        section = alloc_to_json([staking_alloc])
        assert list(section) == ["0x" + STAKING_CONTRACT_ADDRESS.hex()]


class TestMergeGenesis:
    def test_adds_entry(self, staking_alloc):
        genesis = {
            "config": {"chainId": 100},
            "alloc": {VALIDATOR_2.hex(): {"balance": "0x1"}},
        }
        merged = merge_genesis_alloc(genesis, [staking_alloc])
        assert merged["config"] == {"chainId": 100}
        assert merged["alloc"]["0x" + VALIDATOR_2.hex()] == {"balance": "0x1"}
        assert "0x" + STAKING_CONTRACT_ADDRESS.hex() in merged["alloc"]
        # Input document is left untouched
        assert list(genesis["alloc"]) == [VALIDATOR_2.hex()]

    def test_replaces_existing(self, staking_alloc):
        key = "0x" + STAKING_CONTRACT_ADDRESS.hex().upper()
        genesis = {"alloc": {key: {"balance": "0x0"}}}
        merged = merge_genesis_alloc(genesis, [staking_alloc])
        assert len(merged["alloc"]) == 1
        assert merged["alloc"]["0x" + STAKING_CONTRACT_ADDRESS.hex()] == staking_alloc.to_json()

    def test_missing_alloc_section(self, staking_alloc):
        merged = merge_genesis_alloc({"gasLimit": "0x1c9c380"}, [staking_alloc])
        assert merged["gasLimit"] == "0x1c9c380"
        assert len(merged["alloc"]) == 1

    @pytest.mark.parametrize("genesis", [[], "genesis", 7])
    def test_rejects_non_object(self, staking_alloc, genesis):
        with pytest.raises(ValueError, match="genesis must be a JSON object"):
            merge_genesis_alloc(genesis, [staking_alloc])

    @pytest.mark.parametrize("section", [[], "0x00", None])
    def test_rejects_non_object_alloc(self, staking_alloc, section):
        with pytest.raises(ValueError, match="alloc must be a JSON object"):
            merge_genesis_alloc({"alloc": section}, [staking_alloc])
