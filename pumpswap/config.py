"""SDK configuration.

Values come from environment variables via ClientConfig.from_env():
- RPC_ENDPOINT: HTTP RPC URL (required)
- COMMITMENT_LEVEL: processed | confirmed | finalized (default: confirmed)
- LOG_LEVEL: debug | info | warning | error (default: info)
- DEFAULT_SLIPPAGE_BPS: Slippage tolerance when a trade omits it (default: 500)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pumpswap.constants import (
    BPS_DENOMINATOR,
    DEFAULT_COMPUTE_UNIT_PRICE,
    DEFAULT_COMPUTE_UNITS,
    DEFAULT_DECIMALS,
    DEFAULT_SLIPPAGE_BPS,
)
from pumpswap.errors import ConfigError

VALID_COMMITMENTS = {"processed", "confirmed", "finalized"}
VALID_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


@dataclass(frozen=True)
class ClientConfig:
    """Centralized configuration for RPC access and trade defaults.

    Attributes:
        rpc_endpoint: HTTP JSON-RPC URL
        commitment: Commitment level for reads and preflight
        log_level: structlog filtering level
        default_slippage_bps: Tolerance used when a trade does not set one
        compute_units: Compute unit limit per swap transaction
        compute_unit_price: Priority fee in micro-lamports per compute unit
        default_decimals: Token decimals assumed when a mint is unreadable
        request_timeout: HTTP timeout in seconds
    """

    rpc_endpoint: str
    commitment: str = "confirmed"
    log_level: str = "info"
    default_slippage_bps: int = DEFAULT_SLIPPAGE_BPS
    compute_units: int = DEFAULT_COMPUTE_UNITS
    compute_unit_price: int = DEFAULT_COMPUTE_UNIT_PRICE
    default_decimals: int = DEFAULT_DECIMALS
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.rpc_endpoint:
            raise ConfigError("rpc_endpoint must not be empty")
        if self.commitment not in VALID_COMMITMENTS:
            raise ConfigError(
                f"Invalid commitment {self.commitment!r}, "
                f"expected one of {sorted(VALID_COMMITMENTS)}"
            )
        if self.log_level.lower() not in VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log level {self.log_level!r}")
        if not 0 <= self.default_slippage_bps <= BPS_DENOMINATOR:
            raise ConfigError(
                f"default_slippage_bps must be 0-{BPS_DENOMINATOR}, got {self.default_slippage_bps}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Raises:
            ConfigError: If RPC_ENDPOINT is missing or a value is malformed
        """
        env = os.environ if environ is None else environ

        rpc_endpoint = env.get("RPC_ENDPOINT")
        if not rpc_endpoint:
            raise ConfigError("Environment variable RPC_ENDPOINT is not set")

        return cls(
            rpc_endpoint=rpc_endpoint,
            commitment=env.get("COMMITMENT_LEVEL", "confirmed").lower(),
            log_level=env.get("LOG_LEVEL", "info").lower(),
            default_slippage_bps=_int_env(env, "DEFAULT_SLIPPAGE_BPS", DEFAULT_SLIPPAGE_BPS),
        )


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ConfigError(f"Environment variable {name} must be an integer, got {raw!r}") from err
