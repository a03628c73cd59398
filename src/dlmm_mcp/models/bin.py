# src/dlmm_mcp/models/bin.py
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ActiveBin:
    pool_address: str
    bin_id: int
    price: Optional[str]
    price_per_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "poolAddress": self.pool_address,
            "binId": self.bin_id,
            "price": self.price,
            "pricePerToken": self.price_per_token,
        }
