"""Test fixtures for staking genesis tests."""

from .addresses import (
    ALICE_ADDRESS,
    BOB_ADDRESS,
    CHARLIE_ADDRESS,
    OUTSIDER,
    TEST_ADDRESSES,
    VALIDATOR_1,
    VALIDATOR_2,
)
from .keys import (
    ALICE_PRIVATE_KEY,
    BOB_PRIVATE_KEY,
    CHARLIE_PRIVATE_KEY,
    TEST_PRIVATE_KEYS,
    get_keypair,
)
from .artifacts import (
    CREATION_CODE,
    RUNTIME_CODE,
    STAKING_ARTIFACT,
    NO_CONSTRUCTOR_ARTIFACT,
    TUPLE_CONSTRUCTOR_ARTIFACT,
)

__all__ = [
    # Addresses
    "ALICE_ADDRESS",
    "BOB_ADDRESS",
    "CHARLIE_ADDRESS",
    "OUTSIDER",
    "TEST_ADDRESSES",
    "VALIDATOR_1",
    "VALIDATOR_2",
    # Keys
    "ALICE_PRIVATE_KEY",
    "BOB_PRIVATE_KEY",
    "CHARLIE_PRIVATE_KEY",
    "TEST_PRIVATE_KEYS",
    "get_keypair",
    # Artifacts
    "CREATION_CODE",
    "RUNTIME_CODE",
    "STAKING_ARTIFACT",
    "NO_CONSTRUCTOR_ARTIFACT",
    "TUPLE_CONSTRUCTOR_ARTIFACT",
]
