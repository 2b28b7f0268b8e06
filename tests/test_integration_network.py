"""Integration tests against public Sepolia RPC endpoints.

These tests hit real endpoints and are skipped when none is reachable.
"""

from decimal import Decimal

import pytest

from sepolia_wallet.client import EthereumClient
from sepolia_wallet.config import DEFAULT_CONFIG, SEPOLIA_CHAIN_ID
from sepolia_wallet.features.connection import EndpointSelector
from sepolia_wallet.shared.errors import NoEndpointReachableError
from tests.fakes import KNOWN_ADDRESS


@pytest.fixture
async def live_client():
    selector = EndpointSelector()
    try:
        return await selector.connect()
    except NoEndpointReachableError:
        pytest.skip("No Sepolia RPC endpoint reachable")


@pytest.mark.integration
class TestLiveEndpoints:
    async def test_selected_endpoint_is_configured(self, live_client):
        assert live_client.node_url in DEFAULT_CONFIG.rpc_urls
        assert live_client.get_block_height() > 0

    async def test_chain_id_is_sepolia(self, live_client):
        assert isinstance(live_client, EthereumClient)
        chain_id = live_client._network_client.call("eth_chainId")
        assert int(chain_id, 16) == SEPOLIA_CHAIN_ID

    async def test_balance_and_fee_queries(self, live_client):
        balance = live_client.get_balance(KNOWN_ADDRESS)
        assert balance >= 0
        assert live_client.to_display_unit(balance) >= Decimal("0")
        assert live_client.get_fee_rate() > 0
        assert live_client.get_nonce(KNOWN_ADDRESS) >= 0
