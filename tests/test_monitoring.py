from unittest.mock import Mock

import pytest

from dlmm_mcp.clients.errors import DlmmHttpError, DlmmSdkError
from dlmm_mcp.clients.solana.dlmm_sdk import DlmmSdkClient
from dlmm_mcp.clients.solana.meteora import MeteoraApiClient
from dlmm_mcp.models.position import Position
from dlmm_mcp.position_management.monitoring import PositionMonitor
from tests.conftest import POOL, POSITION, WALLET


@pytest.fixture
def api_client():
    return Mock(spec=MeteoraApiClient)


@pytest.fixture
def sdk_client():
    client = Mock(spec=DlmmSdkClient)
    client.get_all_positions_for_user.return_value = [Position(address=POSITION, pool_address=POOL)]
    return client


def test_rest_result_is_used_without_sdk(api_client, sdk_client):
    rest_positions = [{"address": POSITION, "pair_address": POOL}]
    api_client.get_user_positions.return_value = rest_positions

    result = PositionMonitor(api_client, sdk_client).get_open_positions(WALLET)

    assert result == rest_positions
    sdk_client.get_all_positions_for_user.assert_not_called()


def test_empty_rest_result_falls_back_to_sdk(api_client, sdk_client):
    api_client.get_user_positions.return_value = []

    result = PositionMonitor(api_client, sdk_client).get_open_positions(WALLET)

    sdk_client.get_all_positions_for_user.assert_called_once_with(WALLET)
    assert result[0]["positionAddress"] == POSITION
    assert result[0]["poolAddress"] == POOL


def test_rest_error_falls_back_to_sdk(api_client, sdk_client):
    api_client.get_user_positions.side_effect = DlmmHttpError("HTTP 404", status_code=404)

    result = PositionMonitor(api_client, sdk_client).get_open_positions(WALLET)

    assert len(result) == 1
    sdk_client.get_all_positions_for_user.assert_called_once_with(WALLET)


def test_sdk_error_propagates(api_client, sdk_client):
    api_client.get_user_positions.return_value = []
    sdk_client.get_all_positions_for_user.side_effect = DlmmHttpError("connection refused")

    with pytest.raises(DlmmHttpError):
        PositionMonitor(api_client, sdk_client).get_open_positions(WALLET)


def test_no_sdk_configured(api_client):
    api_client.get_user_positions.return_value = []

    with pytest.raises(DlmmSdkError, match="not configured"):
        PositionMonitor(api_client, None).get_open_positions(WALLET)
