# src/dlmm_mcp/clients/solana/dlmm_sdk.py
import logging
from typing import Any, Dict, List, Optional

import requests

from dlmm_mcp.clients.base_client import BaseDLMMClient
from dlmm_mcp.clients.errors import DlmmSdkError
from dlmm_mcp.constants import DLMM_SDK_URL, SDK_ROUTES
from dlmm_mcp.models.bin import ActiveBin
from dlmm_mcp.models.position import Position

logger = logging.getLogger(__name__)


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class DlmmSdkClient(BaseDLMMClient):
    """
    Client for the DLMM SDK bridge.

    The Meteora DLMM SDK only exists in TypeScript; the ``ts-client`` server
    exposes it over HTTP. Every request carries the RPC endpoint in the
    ``rpc`` header and pool scoped calls add a ``pool`` header.
    """

    def __init__(self, rpc: str, sdk_url: str = DLMM_SDK_URL, timeout: float = 30.0, max_retries: int = 3,
                 session: Optional[requests.Session] = None):
        """
        Args:
            rpc (str): The Solana RPC endpoint the bridge should use.
            sdk_url (str, optional): Base URL of the SDK bridge server.
        """
        super().__init__(sdk_url, timeout=timeout, max_retries=max_retries, session=session)
        self.rpc = rpc
        self.session.headers.update({'rpc': rpc})

    def _pool_post(self, route: str, pool_address: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        return self._post(SDK_ROUTES[route], payload, headers={'pool': pool_address})

    def get_all_positions_for_user(self, user_pubkey: str) -> List[Position]:
        """
        Retrieves all open positions for a user across all DLMM pools.

        Args:
            user_pubkey (str): The wallet public key as a base58 string.
        Returns:
            List[Position]: One entry per position, in bridge order.
        """
        logger.debug("Fetching all positions for user %s... via SDK", user_pubkey[:8])
        result = self._post(SDK_ROUTES["positions_by_user"], {"user": user_pubkey})
        if not isinstance(result, dict):
            raise DlmmSdkError(f"Unexpected positions payload: {type(result).__name__}")

        positions = []
        for pool_address, pos_info in result.items():
            token_x = (pos_info.get("tokenX") or {}).get("mint") or pos_info.get("tokenXMint")
            token_y = (pos_info.get("tokenY") or {}).get("mint") or pos_info.get("tokenYMint")
            for pos in pos_info.get("userPositions", []):
                data = pos.get("positionData") or pos
                positions.append(
                    Position(
                        address=pos.get("publicKey") or pos.get("position", ""),
                        pool_address=pos_info.get("lbPair") or pool_address,
                        token_x=token_x,
                        token_y=token_y,
                        lower_bin_id=data.get("lowerBinId"),
                        upper_bin_id=data.get("upperBinId"),
                        total_x_amount=_text(data.get("totalXAmount")),
                        total_y_amount=_text(data.get("totalYAmount")),
                    )
                )
        logger.debug("Retrieved %d positions over %d pools", len(positions), len(result))
        return positions

    def get_position(self, pool_address: str, position_address: str) -> Dict[str, Any]:
        """Raw ``positionData`` for one position, including accrued ``feeX``/``feeY``."""
        result = self._pool_post("position", pool_address, {"position": position_address})
        if not isinstance(result, dict):
            raise DlmmSdkError(f"Unexpected position payload: {type(result).__name__}")
        data = result.get("positionData") or result
        if "feeX" not in data or "feeY" not in data:
            raise DlmmSdkError(f"Position {position_address} has no fee data")
        return data

    def get_active_bin(self, pool_address: str) -> ActiveBin:
        result = self._pool_post("active_bin", pool_address)
        if not isinstance(result, dict) or "binId" not in result:
            raise DlmmSdkError(f"Unexpected active bin payload: {result!r}")
        return ActiveBin(
            pool_address=pool_address,
            bin_id=int(result["binId"]),
            price=_text(result.get("price")),
            price_per_token=_text(result.get("pricePerToken")),
        )

    def claim_swap_fee(self, pool_address: str, owner: str, position_address: str) -> str:
        """Build an unsigned claim-swap-fee transaction.

        Returns:
            str: The serialized transaction, base64 encoded.
        """
        result = self._pool_post("claim_swap_fee", pool_address, {
            "owner": owner,
            "position": position_address,
        })
        tx_b64 = result.get("transaction") if isinstance(result, dict) else None
        if not tx_b64:
            raise DlmmSdkError("SDK bridge returned no transaction")
        return tx_b64
