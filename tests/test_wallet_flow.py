"""End-to-end session flow against an in-memory ledger."""

import asyncio
import threading
from decimal import Decimal

import pytest

from sepolia_wallet.features.transfer import TransactionSubmitter
from sepolia_wallet.shared.errors import NotAuthenticatedError
from sepolia_wallet.shared.models import PendingTransfer
from sepolia_wallet.shared.protocols import Severity
from tests.fakes import KNOWN_PRIVATE_KEY, RECIPIENT, TX_HASH, eventually

ONE_ETHER = 10**18


@pytest.mark.unit
async def test_create_fund_send_logout(
    session_manager, monitor, notifier, fake_client, fast_config
):
    submitter = TransactionSubmitter(notifier, monitor, fast_config)

    account = await session_manager.create_account()
    await eventually(lambda: not monitor.sample.is_first_sample)
    assert monitor.displayed_balance == Decimal("0")

    # Faucet drip arrives.
    fake_client.balances = [10**16]
    await monitor.refresh_once(fake_client, account)
    assert notifier.events[-1] == (
        "💰 ETH Received!",
        "You received 0.010000 ETH",
        Severity.SUCCESS,
        7000,
    )

    pending = session_manager.session.pending_transfer
    pending.recipient = RECIPIENT
    pending.amount = "0.005"
    client, active = session_manager.require_active()
    fake_client.balances = [4 * 10**15]

    tx_hash = await submitter.send(client, active, pending)

    assert tx_hash == TX_HASH
    assert notifier.events[-1][1] == "Sent 0.005 ETH to 0x0000...dEaD"
    assert pending.recipient == "" and pending.amount == ""
    await eventually(lambda: monitor.displayed_balance == Decimal("0.004"))
    # A lower balance after sending is not announced.
    assert not any(
        event[0] == "💰 ETH Received!" for event in notifier.events[-3:]
    )

    assert await session_manager.logout()
    assert monitor.displayed_balance == Decimal("0")
    with pytest.raises(NotAuthenticatedError):
        session_manager.require_active()


@pytest.mark.unit
async def test_in_flight_refresh_is_dropped_on_logout(
    session_manager, monitor, notifier, fake_client
):
    first = await session_manager.create_account()
    await eventually(lambda: not monitor.sample.is_first_sample)

    gate = threading.Event()
    fake_client.balance_gate = gate
    fake_client.balances = [5 * ONE_ETHER]
    calls_before = fake_client.calls.count("get_balance")
    in_flight = asyncio.create_task(monitor.refresh_once(fake_client, first))
    await eventually(lambda: fake_client.calls.count("get_balance") > calls_before)

    await session_manager.logout()
    notifier.clear()
    gate.set()
    await in_flight

    assert monitor.displayed_balance == Decimal("0")
    assert monitor.sample.is_first_sample
    assert notifier.events == []

    second = await session_manager.create_account()
    await eventually(lambda: not monitor.sample.is_first_sample)

    assert second.address != first.address
    assert monitor.displayed_balance == Decimal("5")
    assert not any("received" in m for m in notifier.messages)


@pytest.mark.unit
async def test_send_completing_after_logout_leaves_new_session_alone(
    session_manager, monitor, notifier, fake_client, fast_config
):
    submitter = TransactionSubmitter(notifier, monitor, fast_config)
    await session_manager.create_account()
    await eventually(lambda: not monitor.sample.is_first_sample)

    gate = threading.Event()
    fake_client.broadcast_gate = gate
    client, active = session_manager.require_active()
    sending = asyncio.create_task(
        submitter.send(client, active, PendingTransfer(recipient=RECIPIENT, amount="0.01"))
    )
    await eventually(lambda: "broadcast" in fake_client.calls)

    assert await session_manager.logout()
    await session_manager.import_account(KNOWN_PRIVATE_KEY)
    await eventually(lambda: not monitor.sample.is_first_sample)
    notifier.clear()

    # The old account's balance would look like an incoming transfer here.
    fake_client.balances = [7 * ONE_ETHER]
    gate.set()
    assert await sending == TX_HASH
    await asyncio.sleep(0.05)

    assert monitor.displayed_balance == Decimal("0")
    assert not any("received" in message for message in notifier.messages)
