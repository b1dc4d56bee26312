"""Shared fixtures for allowlist tests."""
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

ADDR1 = "0x1111111111111111111111111111111111111111"
ADDR2 = "0x2222222222222222222222222222222222222222"

# Hardhat default accounts, checksummed
HARDHAT = [
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
    "0x90F79bf6EB2c4f870365E785982E1f101E93b906",
    "0x15d34AAf54267DB7D7c367839AAf71A00a2C6A65",
]

OUTSIDER = "0xBD26367c4B23A6D3713A1e1a50B2D67E8748cB98"


def make_addresses(n):
    """``n`` distinct addresses 0x..01, 0x..02, ..."""
    return ["0x" + format(i + 1, "040x") for i in range(n)]


@pytest.fixture
def hardhat_addresses():
    return list(HARDHAT)


@pytest.fixture
def outsider():
    return OUTSIDER
