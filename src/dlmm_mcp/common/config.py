# src/dlmm_mcp/common/config.py
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from dlmm_mcp.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RPC_TIMEOUT_MS,
    DEFAULT_RPC_URL,
    DLMM_SDK_URL,
    METEORA_API_URL,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _to_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _to_int(value: Any, default: int, minimum: Optional[int] = None) -> int:
    if value is None or value == "":
        return default
    try:
        result = int(value)
    except (TypeError, ValueError):
        return default
    if minimum is not None and result < minimum:
        return default
    return result


@dataclass(frozen=True)
class ServerConfig:
    rpc_url: str = DEFAULT_RPC_URL
    wallet_private_key: Optional[str] = None
    debug: bool = False
    max_retries: int = DEFAULT_MAX_RETRIES
    rpc_timeout: int = DEFAULT_RPC_TIMEOUT_MS  # milliseconds
    api_url: str = METEORA_API_URL
    sdk_url: str = DLMM_SDK_URL

    @property
    def timeout_seconds(self) -> float:
        # requests rejects a zero or negative timeout
        timeout = self.rpc_timeout if self.rpc_timeout > 0 else DEFAULT_RPC_TIMEOUT_MS
        return timeout / 1000.0

    @property
    def sdk_enabled(self) -> bool:
        return bool(self.sdk_url)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ServerConfig":
        """Build a config from a caller-supplied object.

        Accepts both the camelCase keys used by MCP client configuration
        (``rpcUrl``, ``walletPrivateKey``...) and the field names.
        """
        def pick(camel: str, snake: str) -> Any:
            if camel in values:
                return values[camel]
            return values.get(snake)

        # an explicit empty string disables the SDK bridge
        sdk_url = pick("sdkUrl", "sdk_url")
        if sdk_url is None:
            sdk_url = DLMM_SDK_URL

        return cls(
            rpc_url=pick("rpcUrl", "rpc_url") or DEFAULT_RPC_URL,
            wallet_private_key=pick("walletPrivateKey", "wallet_private_key") or None,
            debug=_to_bool(pick("debug", "debug")),
            max_retries=_to_int(pick("maxRetries", "max_retries"), DEFAULT_MAX_RETRIES, minimum=0),
            rpc_timeout=_to_int(pick("rpcTimeout", "rpc_timeout"), DEFAULT_RPC_TIMEOUT_MS, minimum=1),
            api_url=(pick("apiUrl", "api_url") or METEORA_API_URL).rstrip("/"),
            sdk_url=str(sdk_url).rstrip("/"),
        )

    def redacted(self) -> dict:
        """Config as a dict with the signing key masked, safe to log."""
        return {
            "rpcUrl": self.rpc_url,
            "walletPrivateKey": "***" if self.wallet_private_key else None,
            "debug": self.debug,
            "maxRetries": self.max_retries,
            "rpcTimeout": self.rpc_timeout,
            "apiUrl": self.api_url,
            "sdkUrl": self.sdk_url,
        }


def load_config(overrides: Optional[Mapping[str, Any]] = None) -> ServerConfig:
    """Read the server configuration from the environment (and .env).

    Keys in ``overrides`` win over environment variables.
    """
    load_dotenv()
    values = {
        "rpcUrl": os.getenv("RPC_URL"),
        "walletPrivateKey": os.getenv("WALLET_PRIVATE_KEY"),
        "debug": os.getenv("DEBUG", "false"),
        "maxRetries": os.getenv("MAX_RETRIES"),
        "rpcTimeout": os.getenv("RPC_TIMEOUT"),
        "apiUrl": os.getenv("METEORA_API_URL"),
        "sdkUrl": os.getenv("DLMM_SDK_URL"),
    }
    if overrides:
        values.update(overrides)
    return ServerConfig.from_mapping(values)
