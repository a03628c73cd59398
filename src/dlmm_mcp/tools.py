# src/dlmm_mcp/tools.py
"""Tool handlers.

Every handler returns a one-item ``TextContent`` list, on success and on
failure alike. Exceptions stop here and become text.
"""
import json
import logging
from typing import Any, List, Optional

from mcp.types import TextContent
from solders.keypair import Keypair

from dlmm_mcp.clients.solana.dlmm_sdk import DlmmSdkClient
from dlmm_mcp.clients.solana.meteora import MeteoraApiClient
from dlmm_mcp.clients.solana.wallet import TransactionSender, load_keypair, sign_transaction
from dlmm_mcp.common.config import ServerConfig
from dlmm_mcp.constants import (
    DEFAULT_POOL_LIMIT,
    FEE_CALCULATION_NOTE,
    FEE_CALCULATION_SUGGESTION,
    NO_POSITIONS_MESSAGE,
    SOLSCAN_TX_URL,
    UNRESTRICTED_RPC_NOTE,
    WALLET_NOT_CONFIGURED_MESSAGE,
)
from dlmm_mcp.models.position import ClaimableFees
from dlmm_mcp.position_management.monitoring import PositionMonitor
from dlmm_mcp.utils.analyzer import PoolAnalyzer

logger = logging.getLogger(__name__)


def text_response(text: str) -> List[TextContent]:
    return [TextContent(type="text", text=text)]


def json_response(payload: Any) -> List[TextContent]:
    return text_response(json.dumps(payload, indent=2))


class DlmmTools:
    def __init__(
        self,
        config: ServerConfig,
        api_client: Optional[MeteoraApiClient] = None,
        sdk_client: Optional[DlmmSdkClient] = None,
        sender: Optional[TransactionSender] = None,
        wallet: Optional[Keypair] = None,
    ):
        self.config = config
        self.api_client = api_client or MeteoraApiClient(
            config.api_url, timeout=config.timeout_seconds, max_retries=config.max_retries
        )
        if sdk_client is None and config.sdk_enabled:
            sdk_client = DlmmSdkClient(
                config.rpc_url, config.sdk_url, timeout=config.timeout_seconds, max_retries=config.max_retries
            )
        self.sdk_client = sdk_client
        self.wallet = wallet if wallet is not None else load_keypair(config.wallet_private_key)
        self._sender = sender
        self.monitor = PositionMonitor(self.api_client, self.sdk_client)

    def close(self) -> None:
        """Close the HTTP sessions of the REST and SDK clients."""
        self.api_client.close()
        if self.sdk_client is not None:
            self.sdk_client.close()

    @property
    def sender(self) -> TransactionSender:
        # created on first use so read-only servers never open an RPC client
        if self._sender is None:
            self._sender = TransactionSender(
                self.config.rpc_url, timeout=self.config.timeout_seconds, max_retries=self.config.max_retries
            )
        return self._sender

    def get_pool_info(self, pool_address: str) -> List[TextContent]:
        try:
            pool = self.api_client.get_pool_info(pool_address)
            return json_response(pool.to_dict())
        except Exception as e:
            logger.warning("get_pool_info(%s) failed: %s", pool_address, e)
            return text_response(f"Error fetching pool info: {e}")

    def get_user_positions(self, user_wallet: str) -> List[TextContent]:
        try:
            positions = self.monitor.get_open_positions(user_wallet)
            if not positions:
                return text_response(NO_POSITIONS_MESSAGE)
            return json_response(positions)
        except Exception as e:
            logger.warning("get_user_positions(%s) failed: %s", user_wallet, e)
            return text_response(f"Error fetching positions: {e}")

    def get_popular_pools(self, limit: Optional[int] = DEFAULT_POOL_LIMIT) -> List[TextContent]:
        try:
            pools = self.api_client.fetch_liquidity_pools()
            top = PoolAnalyzer.rank_by_liquidity(pools, limit)
            return json_response([pool.to_dict() for pool in top])
        except Exception as e:
            logger.warning("get_popular_pools(%s) failed: %s", limit, e)
            return text_response(f"Error fetching pools: {e}")

    def _fee_note(self, pool_address: str, position_address: str, pair: dict) -> List[TextContent]:
        return json_response({
            "positionAddress": position_address,
            "poolAddress": pool_address,
            "poolName": pair.get("name"),
            "note": FEE_CALCULATION_NOTE,
            "suggestion": FEE_CALCULATION_SUGGESTION,
        })

    def get_claimable_fees(self, pool_address: str, position_address: str) -> List[TextContent]:
        try:
            pair = self.api_client.fetch_pair(pool_address)
        except Exception as e:
            logger.warning("get_claimable_fees(%s, %s) failed: %s", pool_address, position_address, e)
            return text_response(f"Error getting claimable fees: {e}")

        if self.sdk_client is None:
            return self._fee_note(pool_address, position_address, pair)

        # an unreachable bridge degrades to the note, not an error
        try:
            data = self.sdk_client.get_position(pool_address, position_address)
        except Exception as e:
            logger.debug("SDK fee lookup for %s failed, returning note: %s", position_address, e)
            return self._fee_note(pool_address, position_address, pair)

        fees = ClaimableFees(
            position_address=position_address,
            pool_address=pool_address,
            pool_name=pair.get("name"),
            token_x=pair.get("mint_x"),
            token_y=pair.get("mint_y"),
            fee_x=str(data["feeX"]),
            fee_y=str(data["feeY"]),
        )
        return json_response(fees.to_dict())

    def claim_fees(self, pool_address: str, position_address: str) -> List[TextContent]:
        if self.wallet is None:
            return text_response(WALLET_NOT_CONFIGURED_MESSAGE)

        try:
            if self.sdk_client is None:
                raise RuntimeError("DLMM SDK bridge is not configured")
            tx_b64 = self.sdk_client.claim_swap_fee(pool_address, str(self.wallet.pubkey()), position_address)
            signature = self.sender.send_and_confirm(sign_transaction(tx_b64, self.wallet))
            return text_response(
                "Fees claimed successfully!\n\n"
                f"Transaction: {signature}\n\n"
                f"View on Solscan: {SOLSCAN_TX_URL.format(signature=signature)}"
            )
        except Exception as e:
            logger.warning("claim_fees(%s, %s) failed: %s", pool_address, position_address, e)
            return text_response(f"Error claiming fees: {e}\n\n{UNRESTRICTED_RPC_NOTE}")

    def get_active_bin(self, pool_address: str) -> List[TextContent]:
        try:
            if self.sdk_client is None:
                raise RuntimeError("DLMM SDK bridge is not configured")
            return json_response(self.sdk_client.get_active_bin(pool_address).to_dict())
        except Exception as e:
            logger.warning("get_active_bin(%s) failed: %s", pool_address, e)
            return text_response(f"Error fetching active bin: {e}")
