from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Position:
    address: str
    pool_address: str
    token_x: Optional[str] = None
    token_y: Optional[str] = None
    lower_bin_id: Optional[int] = None
    upper_bin_id: Optional[int] = None
    total_x_amount: Optional[str] = None
    total_y_amount: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positionAddress": self.address,
            "poolAddress": self.pool_address,
            "tokenX": self.token_x,
            "tokenY": self.token_y,
            "lowerBinId": self.lower_bin_id,
            "upperBinId": self.upper_bin_id,
            "totalXAmount": self.total_x_amount,
            "totalYAmount": self.total_y_amount,
        }


@dataclass
class ClaimableFees:
    position_address: str
    pool_address: str
    pool_name: Optional[str]
    token_x: Optional[str]
    token_y: Optional[str]
    fee_x: str  # raw token units
    fee_y: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positionAddress": self.position_address,
            "poolAddress": self.pool_address,
            "poolName": self.pool_name,
            "tokenX": self.token_x,
            "tokenY": self.token_y,
            "feeX": self.fee_x,
            "feeY": self.fee_y,
        }
