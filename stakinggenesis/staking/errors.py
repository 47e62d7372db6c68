"""Errors raised while building the staking contract predeploy."""

from __future__ import annotations


class StakingError(Exception):
    """Base class for predeploy configuration errors."""


class PredeployConfigError(StakingError):
    """Predeploy parameters are inconsistent."""


class ValidatorCountError(StakingError):
    """The validator set does not fit the configured min/max bounds."""

    def __init__(self, count: int, min_count: int, max_count: int) -> None:
        super().__init__(
            f"validator set has {count} entries, expected between "
            f"{min_count} and {max_count}"
        )
        self.count = count
        self.min_count = min_count
        self.max_count = max_count


class DuplicateValidatorError(StakingError):
    """The same validator address appears more than once."""

    def __init__(self, address: bytes, first: int, second: int) -> None:
        super().__init__(
            f"duplicate validator 0x{address.hex()} at positions {first} and {second}"
        )
        self.address = address
        self.first = first
        self.second = second
