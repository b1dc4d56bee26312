"""
Merkle allowlists for ERC-721A mint rounds.

    from help_allowlist import compute_root_from_addresses, compute_proof_for_address

    result = compute_root_from_addresses(addresses)
    result.root_hex                     # pass to updateMerkleRoot(bytes32)
    compute_proof_for_address(addresses, wallet)   # pass to mintAllowlist(qty, proof)
"""
from help_allowlist.errors import AllowlistError, AllowlistTooLarge, IndexOutOfRange, InvalidAddress
from help_allowlist.leaf import address_bytes, hash_leaf, is_valid_address, normalize_address
from help_allowlist.rounds import AllowlistRound, build_round
from help_allowlist.service import (
    AllowlistResult,
    compute_proof_for_address,
    compute_root_from_addresses,
    is_allowlist_active,
)
from help_allowlist.tree import (
    ZERO_ROOT,
    ZERO_ROOT_HEX,
    build_tree,
    get_proof,
    get_root,
    hash_pair,
    process_proof,
    tree_depth,
    verify_proof,
)

__version__ = "0.1.0"

__all__ = [
    "AllowlistError",
    "AllowlistResult",
    "AllowlistRound",
    "AllowlistTooLarge",
    "IndexOutOfRange",
    "InvalidAddress",
    "ZERO_ROOT",
    "ZERO_ROOT_HEX",
    "address_bytes",
    "build_round",
    "build_tree",
    "compute_proof_for_address",
    "compute_root_from_addresses",
    "get_proof",
    "get_root",
    "hash_leaf",
    "hash_pair",
    "is_allowlist_active",
    "is_valid_address",
    "normalize_address",
    "process_proof",
    "tree_depth",
    "verify_proof",
]
