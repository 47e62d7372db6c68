"""
Storage layout of the staking contract.

Solidity assigns every state variable a slot in declaration order. The
value behind a slot is found the same way the EVM finds it at runtime:

    scalar:          key = pad32(slot)
    mapping(a => v): key = keccak256(pad32(a) ++ pad32(slot))
    T[] (dynamic):   length at pad32(slot), element i at keccak256(pad32(slot)) + i

Reference: https://docs.soliditylang.org/en/latest/internals/layout_in_storage.html
"""

from __future__ import annotations

from dataclasses import dataclass

from stakinggenesis.common.crypto import keccak256
from stakinggenesis.common.types import (
    HASH_LENGTH,
    bytes_to_hash,
    int_to_bytes,
    pad_left_or_trim,
)


@dataclass(frozen=True)
class ContractLayout:
    """Slot numbers of the state variables touched at genesis."""
    validators_slot: int = 0            # address[] _validators
    is_validator_slot: int = 1          # mapping(address => bool)
    staked_amount_slot: int = 2         # mapping(address => uint256)
    validator_index_slot: int = 3       # mapping(address => uint256)
    total_staked_slot: int = 4          # uint256 _stakedAmount
    min_validators_slot: int = 5        # uint256 _minimumNumValidators
    max_validators_slot: int = 6        # uint256 _maximumNumValidators

    def scalar_key(self, slot: int) -> bytes:
        """Unhashed storage key of a value-type variable."""
        return bytes_to_hash(int_to_bytes(slot))


STAKING_LAYOUT = ContractLayout()


# ---------------------------------------------------------------------------
# Key derivation
# ---------------------------------------------------------------------------

def get_address_mapping(address: bytes, slot: int) -> bytes:
    """Storage key of mapping(address => ...)[address] declared at slot."""
    preimage = (
        pad_left_or_trim(address, HASH_LENGTH)
        + pad_left_or_trim(int_to_bytes(slot), HASH_LENGTH)
    )
    return keccak256(preimage)


def get_index_with_offset(keccak_hash: bytes, offset: int) -> bytes:
    """Add offset to a hash read as a big unsigned integer.

    Returns the minimal big-endian encoding of the sum; callers normalise it
    to a storage word with bytes_to_hash.
    """
    return int_to_bytes(int.from_bytes(keccak_hash, "big") + offset)


def get_array_element_key(slot: int, index: int) -> bytes:
    """Storage key of element index of a dynamic array declared at slot."""
    base = keccak256(pad_left_or_trim(int_to_bytes(slot), HASH_LENGTH))
    return get_index_with_offset(base, index)


@dataclass
class StorageIndexes:
    """Storage keys written for one validator."""
    validators_index: bytes                  # address[] element
    validators_array_size_index: bytes       # address[] length
    address_to_is_validator_index: bytes     # mapping(address => bool)
    address_to_staked_amount_index: bytes    # mapping(address => uint256)
    address_to_validator_index_index: bytes  # mapping(address => uint256)
    staked_amount_index: bytes               # uint256


def get_storage_indexes(
    address: bytes,
    index: int,
    layout: ContractLayout = STAKING_LAYOUT,
) -> StorageIndexes:
    """Resolve every key touched when address is staked at array position index."""
    return StorageIndexes(
        validators_index=get_array_element_key(layout.validators_slot, index),
        validators_array_size_index=layout.scalar_key(layout.validators_slot),
        address_to_is_validator_index=get_address_mapping(
            address, layout.is_validator_slot
        ),
        address_to_staked_amount_index=get_address_mapping(
            address, layout.staked_amount_slot
        ),
        address_to_validator_index_index=get_address_mapping(
            address, layout.validator_index_slot
        ),
        staked_amount_index=layout.scalar_key(layout.total_staked_slot),
    )
