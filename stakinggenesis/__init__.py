"""py-staking-genesis: precomputed genesis state for the staking contract."""
