"""
Sorted-pair keccak Merkle tree.

Matches OpenZeppelin's MerkleProof.verify: every pair is ordered by byte
value before hashing, so a proof carries only sibling hashes and no
left/right flags. An odd layer pairs its last node with itself.

    layer 0:  [a, b, c]
    layer 1:  [H(a,b), H(c,c)]
    layer 2:  [H(H(a,b), H(c,c))]
"""
import logging
from typing import List, Sequence, Tuple

from eth_utils import keccak

from help_allowlist.errors import IndexOutOfRange

logger = logging.getLogger(__name__)

ZERO_ROOT = b"\x00" * 32
ZERO_ROOT_HEX = "0x" + "0" * 64

Layer = Tuple[bytes, ...]
Tree = Tuple[Layer, ...]


def hash_pair(a: bytes, b: bytes) -> bytes:
    if a < b:
        return keccak(a + b)
    return keccak(b + a)


def build_tree(leaves: Sequence[bytes]) -> Tree:
    if not leaves:
        return ()
    layers: List[Layer] = [tuple(leaves)]
    while len(layers[-1]) > 1:
        cur = layers[-1]
        nxt = []
        for i in range(0, len(cur), 2):
            left = cur[i]
            right = cur[i + 1] if i + 1 < len(cur) else left
            nxt.append(hash_pair(left, right))
        layers.append(tuple(nxt))
    logger.debug("Built tree: %d leaves, %d layers", len(leaves), len(layers))
    return tuple(layers)


def get_root(tree: Tree) -> bytes:
    return tree[-1][0] if tree else ZERO_ROOT


def get_proof(tree: Tree, index: int) -> List[bytes]:
    size = len(tree[0]) if tree else 0
    if not 0 <= index < size:
        raise IndexOutOfRange(index, size)
    proof = []
    for layer in tree[:-1]:
        sib = index ^ 1
        if sib < len(layer):
            proof.append(layer[sib])
        else:
            # trailing odd node, paired with itself
            proof.append(layer[index])
        index //= 2
    return proof


def process_proof(leaf: bytes, proof: Sequence[bytes]) -> bytes:
    h = leaf
    for p in proof:
        h = hash_pair(h, p)
    return h


def verify_proof(leaf: bytes, proof: Sequence[bytes], root: bytes) -> bool:
    return process_proof(leaf, proof) == root


def tree_depth(num_leaves: int) -> int:
    """Number of layers, leaves and root included, for ``num_leaves`` leaves."""
    if num_leaves <= 0:
        return 0
    return (num_leaves - 1).bit_length() + 1
