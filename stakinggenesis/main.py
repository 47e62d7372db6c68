"""
py-staking-genesis: generate the staking contract genesis account.

  1. Parse CLI arguments
  2. Collect the validator set
  3. Build the predeployed staking account
  4. Emit it as a genesis alloc entry, or merged into a genesis file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from stakinggenesis.common.config import (
    DEFAULT_MAX_VALIDATOR_COUNT,
    DEFAULT_MIN_VALIDATOR_COUNT,
    DEFAULT_STAKED_BALANCE,
    PredeployParams,
    STAKING_CONTRACT_ADDRESS,
    alloc_to_json,
    merge_genesis_alloc,
)
from stakinggenesis.common.types import (
    InvalidUintLiteral,
    parse_uint256_or_hex,
    to_address,
)
from stakinggenesis.staking.artifact import ArtifactError, load_artifact
from stakinggenesis.staking.bytecode import STAKING_CONTRACT_BYTECODE
from stakinggenesis.staking.errors import StakingError
from stakinggenesis.staking.predeploy import predeploy_staking_contract


logger = logging.getLogger("stakinggenesis")


def read_validators_file(path: Path) -> list[str]:
    """One address per line; blank lines and # comments are skipped."""
    validators = []
    for line in path.read_text().splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            validators.append(line)
    return validators


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stakinggenesis",
        description="Generate the genesis account of the staking contract",
    )
    parser.add_argument(
        "--validators",
        type=str,
        default=None,
        help="Comma-separated validator addresses, in staking order",
    )
    parser.add_argument(
        "--validators-file",
        type=str,
        default=None,
        help="File with one validator address per line (appended after --validators)",
    )
    parser.add_argument(
        "--min-validators",
        type=int,
        default=DEFAULT_MIN_VALIDATOR_COUNT,
        help=f"Minimum number of validators (default: {DEFAULT_MIN_VALIDATOR_COUNT})",
    )
    parser.add_argument(
        "--max-validators",
        type=int,
        default=DEFAULT_MAX_VALIDATOR_COUNT,
        help=f"Maximum number of validators (default: {DEFAULT_MAX_VALIDATOR_COUNT})",
    )
    parser.add_argument(
        "--staked-amount",
        type=str,
        default=hex(DEFAULT_STAKED_BALANCE),
        help="Stake per validator in wei, decimal or 0x hex (default: 10 ETH)",
    )
    parser.add_argument(
        "--address",
        type=str,
        default="0x" + STAKING_CONTRACT_ADDRESS.hex(),
        help="Address of the predeployed contract",
    )
    parser.add_argument(
        "--artifact",
        type=str,
        default=None,
        help="Contract artifact JSON whose deployedBytecode replaces the built-in code",
    )
    parser.add_argument(
        "--genesis",
        type=str,
        default=None,
        help="Existing genesis JSON to merge the account into",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def run(args: argparse.Namespace) -> dict:
    """Build the output document for parsed arguments."""
    validators: list[str] = []
    if args.validators:
        validators.extend(v.strip() for v in args.validators.split(",") if v.strip())
    if args.validators_file:
        validators.extend(read_validators_file(Path(args.validators_file)))

    params = PredeployParams(
        min_validator_count=args.min_validators,
        max_validator_count=args.max_validators,
        staked_amount=parse_uint256_or_hex(args.staked_amount),
    )

    code = STAKING_CONTRACT_BYTECODE
    if args.artifact:
        code = load_artifact(args.artifact).deployed_bytecode

    alloc = predeploy_staking_contract(
        validators,
        params,
        code=code,
        address=to_address(args.address),
    )
    logger.info(
        "Staked %d validators at 0x%s, balance %d wei",
        len(validators), alloc.address.hex(), alloc.balance,
    )

    if args.genesis:
        genesis = json.loads(Path(args.genesis).read_text())
        return merge_genesis_alloc(genesis, [alloc])
    return alloc_to_json([alloc])


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        document = run(args)
    except (StakingError, ArtifactError, InvalidUintLiteral) as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        sys.exit(1)
    except OSError as exc:
        logger.error("I/O error: %s", exc)
        sys.exit(1)

    text = json.dumps(document, indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n")
        logger.info("Wrote %s", args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
