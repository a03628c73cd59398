from unittest.mock import Mock

import pytest
import requests

from dlmm_mcp.common.config import ServerConfig

POOL = "5rCf1DM8LjKTw4YqhnoLcngyZYeNnQqztScTogYHAS6"
POSITION = "9CrySbmg2tLs7DZNHkPyrBtXsFe5cXJXGD6ndcEdqf6k"
WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
MINT_X = "So11111111111111111111111111111111111111112"
MINT_Y = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def make_response(payload=None, status_code=200, text=None):
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else str(payload)
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def config():
    return ServerConfig(sdk_url="")


@pytest.fixture
def sdk_config():
    return ServerConfig(sdk_url="http://localhost:3000")


@pytest.fixture
def pair_payload():
    return {
        "address": POOL,
        "name": "SOL-USDC",
        "mint_x": MINT_X,
        "mint_y": MINT_Y,
        "active_bin_id": -4213,
        "bin_step": 10,
        "liquidity": "1523345.12",
        "current_price": 142.51,
        "fees_24h": 3120.5,
        "trade_volume_24h": 2400000.0,
        "base_fee_percentage": "0.1",
        "apr": 12.4,
    }
