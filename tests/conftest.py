"""Pytest configuration and shared fixtures for all tests."""

import json

import pytest
from eth_utils import to_wei

from stakinggenesis.common.config import PredeployParams
from stakinggenesis.staking.predeploy import predeploy_staking_contract

from tests.fixtures.addresses import (
    ALICE_ADDRESS,
    BOB_ADDRESS,
    CHARLIE_ADDRESS,
    OUTSIDER,
    VALIDATOR_1,
    VALIDATOR_2,
)
from tests.fixtures.artifacts import STAKING_ARTIFACT


# =============================================================================
# Validator Fixtures
# =============================================================================

@pytest.fixture
def two_validators():
    """The 0x11..11 / 0x22..22 pair."""
    return [VALIDATOR_1, VALIDATOR_2]


@pytest.fixture
def key_validators():
    """Validators derived from the Alice/Bob/Charlie private keys."""
    return [ALICE_ADDRESS, BOB_ADDRESS, CHARLIE_ADDRESS]


@pytest.fixture
def outsider():
    """An address that is never staked."""
    return OUTSIDER


# =============================================================================
# Predeploy Fixtures
# =============================================================================

@pytest.fixture
def params():
    """Default bounds with a 10 ETH stake."""
    return PredeployParams(
        min_validator_count=1,
        max_validator_count=100,
        staked_amount=to_wei(10, "ether"),
    )


@pytest.fixture
def staking_alloc(two_validators, params):
    """Staking account for the two-validator set."""
    return predeploy_staking_contract(two_validators, params)


# =============================================================================
# Artifact Fixtures
# =============================================================================

@pytest.fixture
def artifact_file(tmp_path):
    """Staking artifact written to disk."""
    path = tmp_path / "Staking.json"
    path.write_text(json.dumps(STAKING_ARTIFACT))
    return path
