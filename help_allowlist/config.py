"""
Runtime configuration, read from the environment (and a ``.env`` file).

    HELP_ALLOWLIST_LOG_LEVEL      default INFO
    HELP_ALLOWLIST_MAX_ADDRESSES  default unlimited
    HELP_ALLOWLIST_DEDUPE         default false
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PREFIX = "HELP_ALLOWLIST_"

_TRUE = ("1", "true", "yes", "on")


@dataclass
class AllowlistConfig:
    log_level: str = "INFO"
    max_addresses: Optional[int] = None
    dedupe: bool = False

    def __post_init__(self):
        if self.max_addresses is not None and self.max_addresses <= 0:
            raise ValueError("max_addresses must be positive")


def load_config(environ: Optional[Mapping[str, str]] = None) -> AllowlistConfig:
    if environ is None:
        load_dotenv()
        environ = os.environ

    def get(key: str) -> Optional[str]:
        value = environ.get(ENV_PREFIX + key)
        return value.strip() if value and value.strip() else None

    max_addresses = get("MAX_ADDRESSES")
    dedupe = get("DEDUPE")
    return AllowlistConfig(
        log_level=(get("LOG_LEVEL") or "INFO").upper(),
        max_addresses=int(max_addresses) if max_addresses else None,
        dedupe=dedupe.lower() in _TRUE if dedupe else False,
    )
