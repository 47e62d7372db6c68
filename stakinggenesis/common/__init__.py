"""Shared hashing, storage word and genesis helpers."""
