"""Staking contract predeploy."""
