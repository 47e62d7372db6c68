"""Validator addresses used across tests.

All addresses are 20 bytes (canonical form, not checksummed).
"""

from .keys import (
    ALICE_PRIVATE_KEY,
    BOB_PRIVATE_KEY,
    CHARLIE_PRIVATE_KEY,
    derive_address,
)

# Repeated-byte addresses
VALIDATOR_1 = bytes.fromhex("11" * 20)
VALIDATOR_2 = bytes.fromhex("22" * 20)
OUTSIDER = bytes.fromhex("33" * 20)

# Addresses derived from private keys
ALICE_ADDRESS = derive_address(ALICE_PRIVATE_KEY)
BOB_ADDRESS = derive_address(BOB_PRIVATE_KEY)
CHARLIE_ADDRESS = derive_address(CHARLIE_PRIVATE_KEY)

TEST_ADDRESSES = [
    VALIDATOR_1,
    VALIDATOR_2,
    ALICE_ADDRESS,
    BOB_ADDRESS,
    CHARLIE_ADDRESS,
]
