"""
Command line entry point.

Usage:
    python -m help_allowlist root allowlist.txt [--json]
    python -m help_allowlist proof allowlist.txt 0xabc... [--solidity] [--json]
    python -m help_allowlist manifest allowlist.csv [--out proofs.json]
    python -m help_allowlist verify 0xabc... <root> <proof>...
"""
import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from eth_utils import decode_hex, encode_hex

from help_allowlist.config import AllowlistConfig, load_config
from help_allowlist.errors import AllowlistError
from help_allowlist.export import build_proof_manifest, proof_to_hex, render_solidity_proof
from help_allowlist.leaf import hash_leaf, is_valid_address, normalize_address
from help_allowlist.parsing import dedupe_addresses, load_addresses
from help_allowlist.service import compute_root_from_addresses
from help_allowlist.tree import verify_proof

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_NOT_ELIGIBLE = 2


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _read(path: str, config: AllowlistConfig) -> List[str]:
    addresses = load_addresses(path)
    if config.dedupe:
        before = len(addresses)
        addresses = dedupe_addresses(addresses)
        logger.info("Dropped %d duplicate address(es)", before - len(addresses))
    logger.info("Loaded %d address(es) from %s", len(addresses), path)
    return addresses


def cmd_root(args, config: AllowlistConfig) -> int:
    addresses = _read(args.file, config)
    result = compute_root_from_addresses(addresses, limit=config.max_addresses)
    if args.json:
        print(json.dumps({"merkleRoot": result.root_hex, "size": result.size}))
    else:
        print(f"Merkle Root: {result.root_hex}")
        print(f"Addresses: {result.size}")
    return EXIT_SUCCESS


def cmd_proof(args, config: AllowlistConfig) -> int:
    addresses = _read(args.file, config)
    result = compute_root_from_addresses(addresses, limit=config.max_addresses)
    index = result.index_of(hash_leaf(args.address)) if is_valid_address(args.address) else -1
    if index == -1:
        print(f"Address {args.address} is NOT on the allowlist.")
        return EXIT_NOT_ELIGIBLE
    proof = result.proof_for_index(index)
    if args.json:
        print(json.dumps({
            "address": normalize_address(args.address),
            "index": index,
            "merkleRoot": result.root_hex,
            "proof": proof_to_hex(proof),
        }))
    elif args.solidity:
        print(render_solidity_proof(args.address, proof))
    else:
        print(f"Merkle Root: {result.root_hex}")
        print("Proof:", "[" + ", ".join(proof_to_hex(proof)) + "]")
    return EXIT_SUCCESS


def cmd_manifest(args, config: AllowlistConfig) -> int:
    addresses = _read(args.file, config)
    result = compute_root_from_addresses(addresses, limit=config.max_addresses)
    manifest = build_proof_manifest(result, addresses)
    text = json.dumps(manifest, indent=2)
    if args.out:
        with open(args.out, "w") as f:
            f.write(text + "\n")
        logger.info("Saved: %s", args.out)
    else:
        print(text)
    return EXIT_SUCCESS


def cmd_verify(args, config: AllowlistConfig) -> int:
    if is_valid_address(args.leaf):
        leaf = hash_leaf(args.leaf)
    else:
        leaf = decode_hex(args.leaf)
    ok = verify_proof(leaf, [decode_hex(p) for p in args.proof], decode_hex(args.root))
    print(f"Leaf {encode_hex(leaf)} is whitelisted: {ok}")
    return EXIT_SUCCESS if ok else EXIT_NOT_ELIGIBLE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="help-allowlist", description="Merkle allowlist roots and proofs")
    parser.add_argument("--log-level", default=None, help="Override HELP_ALLOWLIST_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("root", help="Compute the Merkle root of an address file")
    p.add_argument("file")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_root)

    p = sub.add_parser("proof", help="Print the proof for one address")
    p.add_argument("file")
    p.add_argument("address")
    p.add_argument("--json", action="store_true")
    p.add_argument("--solidity", action="store_true", help="Emit a bytes32[] snippet")
    p.set_defaults(func=cmd_proof)

    p = sub.add_parser("manifest", help="Write root and every proof as JSON")
    p.add_argument("file")
    p.add_argument("--out", default=None)
    p.set_defaults(func=cmd_manifest)

    p = sub.add_parser("verify", help="Check a proof against a root")
    p.add_argument("leaf", help="Address or 32-byte leaf hash")
    p.add_argument("root")
    p.add_argument("proof", nargs="*")
    p.set_defaults(func=cmd_verify)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(args.log_level or config.log_level)
    try:
        return args.func(args, config)
    except (AllowlistError, ValueError, OSError) as e:
        logger.error("%s", e)
        return EXIT_ERROR
