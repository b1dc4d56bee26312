from eth_utils import is_hex_address, keccak, to_canonical_address, to_checksum_address

from help_allowlist.errors import InvalidAddress


def _clean(address) -> str:
    if not isinstance(address, str):
        raise InvalidAddress([(None, address)])
    addr = address.strip()
    if not addr.startswith(("0x", "0X")):
        addr = "0x" + addr
    # canonical lower-case prefix
    addr = "0x" + addr[2:]
    if not is_hex_address(addr):
        raise InvalidAddress([(None, address)])
    return addr


def is_valid_address(address) -> bool:
    try:
        _clean(address)
    except InvalidAddress:
        return False
    return True


def normalize_address(address: str) -> str:
    """Return the EIP-55 checksummed form of ``address``."""
    return to_checksum_address(_clean(address))


def address_bytes(address: str) -> bytes:
    return to_canonical_address(_clean(address))


def hash_leaf(address: str) -> bytes:
    """keccak256 over the raw 20 address bytes (no 32-byte padding).

    Letter case never affects the result: checksummed, lower and upper case
    spellings of one account hash to the same leaf.
    """
    return keccak(address_bytes(address))
