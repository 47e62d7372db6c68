"""
Compiled contract artifacts.

An artifact is a JSON file with the contract ABI, the creation bytecode and
the deployed (runtime) bytecode:

    {
        "contractABI": [...],
        "bytecode": "0x...",
        "deployedBytecode": "0x..."
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eth_abi import encode as abi_encode
from eth_abi.exceptions import (
    ABITypeError,
    EncodingError,
    ParseError,
    PredicateMappingError,
)

logger = logging.getLogger(__name__)


class ArtifactError(Exception):
    """Base class for artifact loading and encoding errors."""


class ArtifactNotFoundError(ArtifactError):
    """The artifact file could not be read."""


class ArtifactFormatError(ArtifactError):
    """The artifact is not valid JSON or holds malformed data."""


class ArtifactFieldError(ArtifactError):
    """A required field is missing or has the wrong type."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"artifact field {field_name!r}: {reason}")
        self.field_name = field_name


class ConstructorEncodingError(ArtifactError):
    """Constructor arguments do not match the constructor signature."""


def _decode_hex_field(data: dict, name: str) -> bytes:
    if name not in data:
        raise ArtifactFieldError(name, "missing")
    raw = data[name]
    if not isinstance(raw, str):
        raise ArtifactFieldError(name, f"expected hex string, got {type(raw).__name__}")
    try:
        return bytes.fromhex(raw.removeprefix("0x"))
    except ValueError as exc:
        raise ArtifactFormatError(f"artifact field {name!r} is not valid hex: {exc}") from exc


def _abi_type(param: dict) -> str:
    """Canonical type string of an ABI input, expanding tuples."""
    try:
        type_str = param["type"]
    except (KeyError, TypeError):
        raise ArtifactFormatError(f"ABI input without a type: {param!r}") from None
    if type_str.startswith("tuple"):
        inner = ",".join(_abi_type(c) for c in param.get("components", []))
        return f"({inner}){type_str[len('tuple'):]}"
    return type_str


@dataclass
class ContractArtifact:
    abi: list = field(default_factory=list)
    bytecode: bytes = b""
    deployed_bytecode: bytes = b""

    @classmethod
    def from_json(cls, data: Any) -> ContractArtifact:
        if not isinstance(data, dict):
            raise ArtifactFormatError(
                f"artifact must be a JSON object, got {type(data).__name__}"
            )
        if "contractABI" not in data:
            raise ArtifactFieldError("contractABI", "missing")
        abi = data["contractABI"]
        if not isinstance(abi, list):
            raise ArtifactFieldError("contractABI", f"expected list, got {type(abi).__name__}")
        return cls(
            abi=abi,
            bytecode=_decode_hex_field(data, "bytecode"),
            deployed_bytecode=_decode_hex_field(data, "deployedBytecode"),
        )

    def constructor_types(self) -> list[str]:
        """Input types of the constructor; empty if the ABI declares none."""
        for entry in self.abi:
            if not isinstance(entry, dict):
                raise ArtifactFormatError(f"ABI entry is not an object: {entry!r}")
            if entry.get("type") == "constructor":
                return [_abi_type(p) for p in entry.get("inputs", [])]
        return []

    def encode_constructor(self, *args: Any) -> bytes:
        """Creation bytecode with ABI-encoded constructor arguments appended."""
        types = self.constructor_types()
        if len(args) != len(types):
            raise ConstructorEncodingError(
                f"constructor takes {len(types)} arguments, got {len(args)}"
            )
        if not types:
            return self.bytecode
        try:
            encoded = abi_encode(types, list(args))
        except (ABITypeError, ParseError, PredicateMappingError) as exc:
            raise ArtifactFormatError(f"invalid constructor ABI: {exc}") from exc
        except EncodingError as exc:
            raise ConstructorEncodingError(str(exc)) from exc
        return self.bytecode + encoded


def load_artifact(path: str | Path) -> ContractArtifact:
    """Load a contract artifact from a JSON file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise ArtifactNotFoundError(f"cannot read artifact {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ArtifactFormatError(f"artifact {path} is not valid JSON: {exc}") from exc
    artifact = ContractArtifact.from_json(data)
    logger.debug(
        "Loaded artifact %s: %d ABI entries, %d bytes of bytecode",
        path, len(artifact.abi), len(artifact.bytecode),
    )
    return artifact
