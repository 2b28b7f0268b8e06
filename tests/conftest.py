import asyncio

import pytest

from sepolia_wallet.config import WalletConfig
from sepolia_wallet.features.account import SessionManager
from sepolia_wallet.features.balance import BalanceMonitor
from sepolia_wallet.features.connection import EndpointSelector
from sepolia_wallet.features.transfer import TransactionSubmitter
from sepolia_wallet.shared.models import Account
from tests.fakes import (
    KNOWN_ADDRESS,
    KNOWN_PRIVATE_KEY,
    FakeClient,
    RecordingNotifier,
    StaticConfirmer,
)


@pytest.fixture
def fast_config():
    """Config with intervals short enough for tests"""
    return WalletConfig(
        rpc_urls=("https://rpc-a.test", "https://rpc-b.test"),
        poll_interval_seconds=3600.0,
        post_send_refresh_delay_seconds=0.01,
        receipt_timeout_seconds=1.0,
        receipt_poll_interval_seconds=0.0,
    )


@pytest.fixture
def known_account():
    return Account(address=KNOWN_ADDRESS, private_key=KNOWN_PRIVATE_KEY)


@pytest.fixture
def fake_client():
    return FakeClient(node_url="https://rpc-a.test")


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def selector(fast_config, fake_client):
    return EndpointSelector(config=fast_config, client_factory=lambda url: fake_client)


@pytest.fixture
async def monitor(notifier, fast_config):
    monitor = BalanceMonitor(notifier, config=fast_config)
    yield monitor
    monitor.stop()
    await asyncio.sleep(0)


@pytest.fixture
def confirmer():
    return StaticConfirmer(True)


@pytest.fixture
async def session_manager(selector, monitor, notifier, confirmer):
    manager = SessionManager(selector, monitor, notifier, confirmer)
    yield manager
    manager.shutdown()


@pytest.fixture
def submitter(notifier, monitor, fast_config):
    return TransactionSubmitter(notifier, monitor, fast_config)
