import json
import re
from typing import Iterable, List

_ADDRESS_RE = re.compile(r"^(0[xX])?[0-9a-fA-F]{40}$")
_CELL_SPLIT = re.compile(r"[,;\t]")
_HEADER_WORDS = {"address", "addresses", "wallet", "wallets", "wallet address", "wallet_address", "account"}


def _looks_like_address(cell: str) -> bool:
    return bool(_ADDRESS_RE.match(cell))


def _from_json(text: str) -> List[str]:
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get("addresses", [])
    if not isinstance(data, list):
        raise ValueError("JSON allowlist must be a list or an object with 'addresses'")
    out = []
    for item in data:
        if isinstance(item, dict):
            item = item.get("address")
        if item is None:
            raise ValueError("JSON allowlist entry has no address")
        out.append(str(item).strip())
    return out


def _is_header(cells: List[str]) -> bool:
    return any(c.lower() in _HEADER_WORDS for c in cells)


def _from_rows(text: str) -> List[str]:
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            rows.append(line)
    out = []
    for n, line in enumerate(rows):
        cells = [c.strip().strip('"').strip("'") for c in _CELL_SPLIT.split(line)]
        hits = [c for c in cells if _looks_like_address(c)]
        if hits:
            out.extend(hits)
        elif n == 0 and len(rows) > 1 and _is_header(cells):
            continue
        else:
            # kept whole so validation rejects the file
            out.append(line)
    return out


def parse_addresses(text: str) -> List[str]:
    """Split an uploaded allowlist into raw address strings.

    Accepts a JSON array (of strings or ``{"address": ...}`` objects), CSV
    rows (every address cell on a row), or one address per line. A first
    row naming an address column is skipped as a header. Order is
    preserved and nothing is validated or deduplicated here.
    """
    stripped = text.lstrip("\ufeff").strip()
    if not stripped:
        return []
    if stripped[0] in "[{":
        return _from_json(stripped)
    return _from_rows(stripped)


def load_addresses(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_addresses(f.read())


def dedupe_addresses(addresses: Iterable[str]) -> List[str]:
    """Drop repeats case-insensitively, keeping the first spelling."""
    seen = set()
    out = []
    for addr in addresses:
        key = addr.strip().lower()
        if key.startswith("0x"):
            key = key[2:]
        if key in seen:
            continue
        seen.add(key)
        out.append(addr)
    return out
