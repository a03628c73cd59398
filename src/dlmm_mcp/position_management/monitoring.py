import logging
from typing import Any, Dict, List, Optional

from dlmm_mcp.clients.errors import DlmmSdkError
from dlmm_mcp.clients.solana.dlmm_sdk import DlmmSdkClient
from dlmm_mcp.clients.solana.meteora import MeteoraApiClient

logger = logging.getLogger(__name__)


class PositionMonitor:
    """Resolves the positions held by a wallet.

    The REST API is asked first. The SDK bridge is used only when REST
    returns nothing or fails.
    """

    def __init__(self, api_client: MeteoraApiClient, sdk_client: Optional[DlmmSdkClient] = None):
        self.api_client = api_client
        self.sdk_client = sdk_client

    def get_open_positions(self, wallet_address: str) -> List[Dict[str, Any]]:
        """Retrieve all open positions for a wallet address.

        REST results are returned as-is; SDK results are mapped through
        ``Position.to_dict``. An empty list means neither source found any.
        """
        try:
            positions = self.api_client.get_user_positions(wallet_address)
            if positions:
                logger.debug("Retrieved %d positions for %s... via API", len(positions), wallet_address[:8])
                return positions
        except Exception as e:
            logger.debug("API user endpoint not available, using SDK fallback: %s", e)

        if self.sdk_client is None:
            raise DlmmSdkError("No positions from the API and the DLMM SDK bridge is not configured")

        sdk_positions = self.sdk_client.get_all_positions_for_user(wallet_address)
        logger.debug("Retrieved %d positions for %s... via SDK", len(sdk_positions), wallet_address[:8])
        return [position.to_dict() for position in sdk_positions]

