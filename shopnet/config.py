"""
Shopnet Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Dict

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# Names of integer variables whose value could not be parsed; reported by Config.validate().
_INVALID_INTS: Dict[str, str] = {}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        _INVALID_INTS[name] = raw
        return default


class Config:
    """Application configuration loaded from environment variables."""

    # Header limits (inclusive)
    MIN_SHOPS: int = _env_int("SHOPNET_MIN_SHOPS", 2)
    MAX_SHOPS: int = _env_int("SHOPNET_MAX_SHOPS", 1000)
    MIN_ROADS: int = _env_int("SHOPNET_MIN_ROADS", 1)
    MAX_ROADS: int = _env_int("SHOPNET_MAX_ROADS", 1000)

    # Accepted shop identifiers; roads touching anything else are skipped
    MIN_SHOP_ID: int = _env_int("SHOPNET_MIN_SHOP_ID", 1)
    MAX_SHOP_ID: int = _env_int("SHOPNET_MAX_SHOP_ID", 1000)

    # Diagnostics
    DEBUG: bool = _env_flag("SHOPNET_DEBUG")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors on bad or inverted values."""
        if _INVALID_INTS:
            details = ", ".join(f"{name}={raw!r}" for name, raw in _INVALID_INTS.items())
            raise ValueError(f"expected integers: {details}")
        ranges = {
            "SHOPNET_MIN_SHOPS/SHOPNET_MAX_SHOPS": (cls.MIN_SHOPS, cls.MAX_SHOPS),
            "SHOPNET_MIN_ROADS/SHOPNET_MAX_ROADS": (cls.MIN_ROADS, cls.MAX_ROADS),
            "SHOPNET_MIN_SHOP_ID/SHOPNET_MAX_SHOP_ID": (cls.MIN_SHOP_ID, cls.MAX_SHOP_ID),
        }
        for names, (low, high) in ranges.items():
            if low < 0:
                raise ValueError(f"{names}: lower bound must not be negative (got {low})")
            if low > high:
                raise ValueError(f"{names}: lower bound {low} exceeds upper bound {high}")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Shopnet Configuration:",
            f"  Shops: {cls.MIN_SHOPS}..{cls.MAX_SHOPS}",
            f"  Roads: {cls.MIN_ROADS}..{cls.MAX_ROADS}",
            f"  Shop IDs: {cls.MIN_SHOP_ID}..{cls.MAX_SHOP_ID}",
            f"  Debug: {cls.DEBUG}",
        ]
        return "\n".join(lines)
