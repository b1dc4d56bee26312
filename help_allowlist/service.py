import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from eth_utils import decode_hex, encode_hex

from help_allowlist.errors import AllowlistTooLarge, InvalidAddress
from help_allowlist.leaf import hash_leaf
from help_allowlist.tree import ZERO_ROOT, Tree, build_tree, get_proof, get_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllowlistResult:
    root: bytes
    tree: Tree
    leaves: Tuple[bytes, ...]

    @property
    def size(self) -> int:
        return len(self.leaves)

    @property
    def root_hex(self) -> str:
        return encode_hex(self.root)

    @property
    def is_active(self) -> bool:
        return self.root != ZERO_ROOT

    def proof_for_index(self, index: int) -> List[bytes]:
        return get_proof(self.tree, index)

    def index_of(self, leaf: bytes) -> int:
        """First position of ``leaf``, or -1."""
        try:
            return self.leaves.index(leaf)
        except ValueError:
            return -1


def hash_leaves(addresses: Sequence[str]) -> List[bytes]:
    """Hash every address in order; reject the batch if any entry is invalid."""
    leaves: List[bytes] = []
    invalid = []
    for i, addr in enumerate(addresses):
        try:
            leaves.append(hash_leaf(addr))
        except InvalidAddress:
            invalid.append((i, addr))
    if invalid:
        logger.debug("Rejected allowlist: %d of %d entries invalid", len(invalid), len(addresses))
        raise InvalidAddress(invalid)
    return leaves


def compute_root_from_addresses(addresses: Sequence[str], limit: Optional[int] = None) -> AllowlistResult:
    if limit is not None and len(addresses) > limit:
        raise AllowlistTooLarge(len(addresses), limit)
    leaves = hash_leaves(addresses)
    tree = build_tree(leaves)
    root = get_root(tree)
    logger.debug("Allowlist root %s over %d addresses", encode_hex(root), len(leaves))
    return AllowlistResult(root=root, tree=tree, leaves=tuple(leaves))


def compute_proof_for_address(addresses: Sequence[str], target: str) -> List[bytes]:
    """Proof for ``target`` against ``addresses``; empty when not eligible.

    The tree is rebuilt on every call. Duplicate entries resolve to the first
    matching position. An unparseable target is treated as not eligible,
    while an invalid entry in ``addresses`` still raises ``InvalidAddress``.
    """
    result = compute_root_from_addresses(addresses)
    try:
        leaf = hash_leaf(target)
    except InvalidAddress:
        logger.debug("Target %r is not a valid address", target)
        return []
    index = result.index_of(leaf)
    if index == -1:
        logger.debug("Target %s not on allowlist of %d", target, result.size)
        return []
    return result.proof_for_index(index)


def is_allowlist_active(root: Union[bytes, str, None]) -> bool:
    """False for a missing root or the all-zero sentinel."""
    if root is None:
        return False
    if isinstance(root, str):
        root = decode_hex(root)
    return len(root) > 0 and root != ZERO_ROOT
