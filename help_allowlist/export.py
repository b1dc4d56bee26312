from typing import Any, Dict, List, Sequence

from eth_utils import encode_hex

from help_allowlist.errors import AllowlistError
from help_allowlist.leaf import normalize_address
from help_allowlist.service import AllowlistResult
from help_allowlist.tree import verify_proof


def proof_to_hex(proof: Sequence[bytes]) -> List[str]:
    return [encode_hex(p) for p in proof]


def render_solidity_proof(address: str, proof: Sequence[bytes]) -> str:
    """``bytes32[]`` literal for a Foundry test or script."""
    name = normalize_address(address).replace("0x", "").upper()
    lines = [f"bytes32[] memory PROOF_{name} = new bytes32[]({len(proof)});"]
    for i, p in enumerate(proof_to_hex(proof)):
        lines.append(f"PROOF_{name}[{i}] = {p};")
    return "\n".join(lines)


def build_proof_manifest(result: AllowlistResult, addresses: Sequence[str]) -> Dict[str, Any]:
    if len(addresses) != result.size:
        raise ValueError(f"{len(addresses)} addresses for {result.size} leaves")
    entries = []
    for i, addr in enumerate(addresses):
        leaf = result.leaves[i]
        proof = result.proof_for_index(i)
        if not verify_proof(leaf, proof, result.root):
            raise AllowlistError(f"Proof for index {i} does not reproduce the root")
        entries.append({
            "index": i,
            "address": normalize_address(addr),
            "leaf": encode_hex(leaf),
            "proof": proof_to_hex(proof),
        })
    return {
        "merkleRoot": result.root_hex,
        "size": result.size,
        "entries": entries,
    }
