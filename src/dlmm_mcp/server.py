# src/dlmm_mcp/server.py
"""
MCP server exposing Meteora DLMM pools, positions and fee claiming as tools.

Reads go to the Meteora DLMM REST API; positions fall back to the DLMM SDK
bridge, and fee claiming builds its transaction there.

Usage:
    meteora-dlmm-mcp            # stdio
    MCP_TRANSPORT=sse meteora-dlmm-mcp
"""
import logging
import os
from typing import Annotated, Any, Mapping, Optional, Union

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from dlmm_mcp import __version__
from dlmm_mcp.common.config import ServerConfig, load_config
from dlmm_mcp.common.logging import configure_logging
from dlmm_mcp.constants import DEFAULT_POOL_LIMIT
from dlmm_mcp.tools import DlmmTools

logger = logging.getLogger(__name__)

SERVER_NAME = "Meteora DLMM MCP Server (Hybrid)"

PoolAddress = Annotated[str, Field(description="DLMM pool address")]
PositionAddress = Annotated[str, Field(description="Position address")]


def build_server(config: Union[ServerConfig, Mapping[str, Any], None] = None,
                 tools: Optional[DlmmTools] = None) -> FastMCP:
    if config is None:
        config = load_config()
    elif not isinstance(config, ServerConfig):
        config = ServerConfig.from_mapping(config)
    tools = tools or DlmmTools(config)
    logger.debug("Building %s %s with %s", SERVER_NAME, __version__, config.redacted())

    # handlers are synchronous: FastMCP runs each one on the event loop,
    # so tool calls are served one at a time
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="get_pool_info", description="Get detailed information about a Meteora DLMM pool")
    def get_pool_info(poolAddress: PoolAddress):
        return tools.get_pool_info(poolAddress)

    @mcp.tool(name="get_user_positions", description="Get all user positions for a wallet address")
    def get_user_positions(userWallet: Annotated[str, Field(description="User wallet address")]):
        return tools.get_user_positions(userWallet)

    @mcp.tool(name="get_popular_pools", description="Get list of popular Meteora DLMM pools")
    def get_popular_pools(
        limit: Annotated[int, Field(description="Number of pools to return")] = DEFAULT_POOL_LIMIT,
    ):
        return tools.get_popular_pools(limit)

    @mcp.tool(name="get_claimable_fees", description="Get claimable fees for a specific position")
    def get_claimable_fees(poolAddress: PoolAddress, positionAddress: PositionAddress):
        return tools.get_claimable_fees(poolAddress, positionAddress)

    @mcp.tool(
        name="claim_fees",
        description="Claim accumulated fees from a position (requires wallet configuration)",
    )
    def claim_fees(poolAddress: PoolAddress, positionAddress: PositionAddress):
        return tools.claim_fees(poolAddress, positionAddress)

    @mcp.tool(name="get_active_bin", description="Get the active bin (current price bin) of a DLMM pool")
    def get_active_bin(poolAddress: PoolAddress):
        return tools.get_active_bin(poolAddress)

    return mcp


def main() -> None:
    config = load_config()
    configure_logging(config.debug)
    tools = DlmmTools(config)
    server = build_server(config, tools=tools)
    transport = os.getenv("MCP_TRANSPORT", "stdio")
    logger.info("Starting %s on %s", SERVER_NAME, transport)
    try:
        server.run(transport=transport)
    finally:
        tools.close()


if __name__ == "__main__":
    main()
