# src/dlmm_mcp/clients/solana/meteora.py
import logging
from typing import Any, Dict, List, Optional

import requests

from dlmm_mcp.clients.base_client import BaseDLMMClient
from dlmm_mcp.constants import METEORA_API_URL
from dlmm_mcp.models.pair import PoolInfo, PoolSummary

logger = logging.getLogger(__name__)


class MeteoraApiClient(BaseDLMMClient):
    """Read-only client for the public Meteora DLMM REST API."""

    def __init__(self, api_url: str = METEORA_API_URL, timeout: float = 30.0, max_retries: int = 3,
                 session: Optional[requests.Session] = None):
        super().__init__(api_url, timeout=timeout, max_retries=max_retries, session=session)

    def fetch_all_pairs(self) -> List[Dict[str, Any]]:
        """Fetch every DLMM pair as returned by ``/pair/all``."""
        logger.debug("Fetching pools from %s/pair/all", self.base_url)
        data = self._get("/pair/all")
        if not isinstance(data, list):
            raise ValueError(f"Unexpected /pair/all response: {type(data).__name__}")
        logger.debug("Total pools in response: %d", len(data))
        return data

    def fetch_liquidity_pools(self) -> List[PoolSummary]:
        pools = []
        for pair in self.fetch_all_pairs():
            if not isinstance(pair, dict):
                logger.debug("Skipping malformed pair: %r", pair)
                continue
            pools.append(PoolSummary.from_api(pair))
        return pools

    def fetch_pair(self, pool_address: str) -> Dict[str, Any]:
        data = self._get(f"/pair/{pool_address}")
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected /pair/{pool_address} response: {type(data).__name__}")
        return data

    def get_pool_info(self, pool_address: str) -> PoolInfo:
        return PoolInfo.from_api(pool_address, self.fetch_pair(pool_address))

    def get_user_positions(self, wallet: str) -> List[Dict[str, Any]]:
        """Positions for ``wallet`` from ``/user/{wallet}``.

        Anything other than a JSON list is treated as "no positions", so the
        caller can fall back to the SDK.
        """
        data = self._get(f"/user/{wallet}")
        if not isinstance(data, list):
            logger.debug("Unexpected /user response for %s...: %r", wallet[:8], data)
            return []
        return data
