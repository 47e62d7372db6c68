"""
Staking contract predeploy.

Builds the genesis account of the staking contract with a validator set
already staked, by writing the storage words the contract itself would
have written had every validator called stake() in order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from stakinggenesis.common.config import (
    GenesisAlloc,
    PredeployParams,
    STAKING_CONTRACT_ADDRESS,
)
from stakinggenesis.common.types import (
    UINT256_MAX,
    bytes_to_hash,
    int_to_hash,
    to_address,
)
from stakinggenesis.staking.bytecode import STAKING_CONTRACT_BYTECODE
from stakinggenesis.staking.errors import (
    DuplicateValidatorError,
    PredeployConfigError,
    ValidatorCountError,
)
from stakinggenesis.staking.layout import (
    ContractLayout,
    STAKING_LAYOUT,
    get_storage_indexes,
)

logger = logging.getLogger(__name__)

TRUE_WORD = int_to_hash(1)


def normalize_validators(validators: Sequence[bytes | str]) -> list[bytes]:
    """Canonicalise validator addresses and reject duplicates."""
    seen: dict[bytes, int] = {}
    result: list[bytes] = []
    for position, value in enumerate(validators):
        address = to_address(value)
        if address in seen:
            raise DuplicateValidatorError(address, seen[address], position)
        seen[address] = position
        result.append(address)
    return result


def predeploy_staking_contract(
    validators: Sequence[bytes | str],
    params: PredeployParams = PredeployParams(),
    layout: ContractLayout = STAKING_LAYOUT,
    code: bytes = STAKING_CONTRACT_BYTECODE,
    address: bytes = STAKING_CONTRACT_ADDRESS,
) -> GenesisAlloc:
    """Build the staking contract genesis account for validators.

    Validators are staked in the given order; position i becomes array
    index i. Every validator deposits params.staked_amount and the account
    balance is the sum of all deposits.

    Raises:
        PredeployConfigError: params are inconsistent or the total stake
            overflows uint256
        ValidatorCountError: len(validators) is outside [min, max]
        DuplicateValidatorError: an address appears twice
        ValueError: a validator is not a valid address
    """
    params.validate()
    addresses = normalize_validators(validators)
    if not (
        params.min_validator_count
        <= len(addresses)
        <= params.max_validator_count
    ):
        raise ValidatorCountError(
            len(addresses), params.min_validator_count, params.max_validator_count
        )
    if len(addresses) * params.staked_amount > UINT256_MAX:
        raise PredeployConfigError(
            f"total stake of {len(addresses)} validators at {params.staked_amount} wei "
            f"each does not fit in uint256"
        )

    storage: dict[bytes, bytes] = {}
    staked_word = int_to_hash(params.staked_amount)
    total_staked = 0

    # Array length is zero until the first validator is pushed
    storage[layout.scalar_key(layout.validators_slot)] = int_to_hash(0)

    for index, validator in enumerate(addresses):
        total_staked += params.staked_amount
        indexes = get_storage_indexes(validator, index, layout)

        storage[bytes_to_hash(indexes.validators_index)] = bytes_to_hash(validator)
        storage[bytes_to_hash(indexes.address_to_is_validator_index)] = TRUE_WORD
        storage[bytes_to_hash(indexes.address_to_staked_amount_index)] = staked_word
        storage[bytes_to_hash(indexes.address_to_validator_index_index)] = int_to_hash(index)
        # Aggregates are rewritten each iteration and end on the last value
        storage[bytes_to_hash(indexes.staked_amount_index)] = int_to_hash(total_staked)
        storage[bytes_to_hash(indexes.validators_array_size_index)] = int_to_hash(index + 1)

    storage[layout.scalar_key(layout.min_validators_slot)] = int_to_hash(
        params.min_validator_count
    )
    storage[layout.scalar_key(layout.max_validators_slot)] = int_to_hash(
        params.max_validator_count
    )

    logger.debug(
        "Staking predeploy: %d validators, total staked %d wei",
        len(addresses), total_staked,
    )

    return GenesisAlloc(
        address=address,
        balance=total_staked,
        code=code,
        storage=storage,
    )
