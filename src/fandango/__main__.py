"""
Command line access to a node.

Usage::

    python -m fandango tip
    python -m fandango --url http://localhost:8332 --user bitcoin --password secret header <hash>
    python -m fandango block <hash>

Options:
    --url          Base URL of the node (default: $BSV_NODE_URL or http://localhost:18332)
    --user         RPC username (default: $BSV_NODE_USER)
    --password     RPC password (default: $BSV_NODE_PASSWORD)
    -v, --verbose  Enable debug logging

Exits with status 1 when the node call fails.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from fandango.bitcoin import BlockHash, BlockHeader
from fandango.config import NodeConfig
from fandango.errors import FandangoError
from fandango.node import NodeClient, SvNodeClient

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def header_summary(header: BlockHeader) -> dict[str, Any]:
    """Render a header as a JSON-friendly mapping using display-form hashes."""
    return {
        "hash": str(header.hash()),
        "version": header.version,
        "previousblockhash": str(header.prev_block_hash),
        "merkleroot": str(header.merkle_root),
        "time": header.timestamp,
        "bits": f"{header.bits:08x}",
        "nonce": header.nonce,
        "difficulty": header.difficulty(),
    }


def parse_block_hash(value: str) -> BlockHash:
    """Argparse type for display-form block hashes."""
    try:
        return BlockHash.from_hex(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid block hash {value!r}: {exc}") from exc


async def run_command(client: NodeClient, command: str, block_hash: BlockHash | None) -> Any:
    """Execute one command against `client` and return its printable result."""
    if command == "tip":
        return str(await client.get_best_block_hash())

    assert block_hash is not None
    if command == "header":
        return header_summary(await client.get_block_header(block_hash))

    block = await client.get_block(block_hash)
    return {
        "hash": str(block.hash()),
        "tx_count": block.num_tx,
        "header": header_summary(block.header),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fandango",
        description="Query a Bitcoin SV node over JSON-RPC and REST",
    )
    parser.add_argument("--url", default=None, help="Base URL of the node")
    parser.add_argument("--user", default=None, help="RPC username")
    parser.add_argument("--password", default=None, help="RPC password")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("tip", help="Print the best block hash")
    for name, text in (("header", "Print a block header"), ("block", "Print a block summary")):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("block_hash", type=parse_block_hash, help="Block hash (display hex)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = NodeConfig.resolve(args.url, args.user, args.password)
        client = SvNodeClient.from_url(config.url, config.username, config.password)
        result = asyncio.run(run_command(client, args.command, getattr(args, "block_hash", None)))
    except FandangoError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result if isinstance(result, str) else json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
