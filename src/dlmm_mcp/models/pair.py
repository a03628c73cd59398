from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


def _number(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class PoolSummary:
    address: str
    name: str
    token_x: str
    token_y: str
    liquidity: str
    volume_24h: float
    fees_24h: float

    @property
    def liquidity_value(self) -> float:
        return _number(self.liquidity)

    @classmethod
    def from_api(cls, pair: Dict[str, Any]) -> "PoolSummary":
        return cls(
            address=pair.get("address", ""),
            name=pair.get("name", ""),
            token_x=pair.get("mint_x", ""),
            token_y=pair.get("mint_y", ""),
            liquidity=pair.get("liquidity") or "0",
            volume_24h=pair.get("volume_24h") or pair.get("trade_volume_24h") or 0,
            fees_24h=pair.get("fees_24h") or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "tokenX": self.token_x,
            "tokenY": self.token_y,
            "liquidity": self.liquidity,
            "volume24h": self.volume_24h,
            "fees24h": self.fees_24h,
        }


@dataclass
class PoolInfo:
    pool_address: str
    name: Optional[str]
    token_x: Optional[str]
    token_y: Optional[str]
    active_bin_id: Optional[int]
    fees_24h: float
    volume_24h: float
    liquidity: str
    current_price: Optional[float]
    bin_step: Optional[int]
    base_fee_percentage: Optional[str] = None
    apr: Optional[float] = None

    @classmethod
    def from_api(cls, pool_address: str, pair: Dict[str, Any]) -> "PoolInfo":
        """Map a ``/pair/{address}`` payload onto the tool output shape."""
        return cls(
            pool_address=pool_address,
            name=pair.get("name"),
            token_x=pair.get("mint_x"),
            token_y=pair.get("mint_y"),
            active_bin_id=pair.get("active_bin_id"),
            fees_24h=pair.get("fees_24h") or 0,
            volume_24h=pair.get("volume_24h") or pair.get("trade_volume_24h") or 0,
            liquidity=pair.get("liquidity") or "0",
            current_price=pair.get("current_price"),
            bin_step=pair.get("bin_step"),
            base_fee_percentage=pair.get("base_fee_percentage"),
            apr=pair.get("apr"),
        )

    def to_dict(self) -> Dict[str, Any]:
        raw = asdict(self)
        return {
            "poolAddress": raw["pool_address"],
            "name": raw["name"],
            "tokenX": raw["token_x"],
            "tokenY": raw["token_y"],
            "activeBinId": raw["active_bin_id"],
            "fees24h": raw["fees_24h"],
            "volume24h": raw["volume_24h"],
            "liquidity": raw["liquidity"],
            "currentPrice": raw["current_price"],
            "binStep": raw["bin_step"],
            "baseFeePercentage": raw["base_fee_percentage"],
            "apr": raw["apr"],
        }
