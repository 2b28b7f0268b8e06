"""Session lifecycle for the single in-memory account of Sepolia Quick Wallet."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Callable

from sepolia_wallet.config import NETWORK_NAME
from sepolia_wallet.features.balance.service import BalanceMonitor
from sepolia_wallet.features.connection.service import EndpointSelector
from sepolia_wallet.shared.connection_state import ConnectionState
from sepolia_wallet.shared.errors import (
    AlreadyAuthenticatedError,
    InvalidKeyFormatError,
    NoEndpointReachableError,
    NotAuthenticatedError,
    SigningError,
)
from sepolia_wallet.shared.logging import get_logger
from sepolia_wallet.shared.models import Account, PendingTransfer
from sepolia_wallet.shared.protocols import Confirmer, Notifier, Severity, SigningClient

logger = get_logger(__name__)

LOGOUT_PROMPT = (
    "Are you sure you want to logout? Make sure you have saved your private key!"
)


def normalize_private_key(raw_key: str) -> str:
    key = raw_key.strip()
    if key[:2].lower() == "0x":
        return key
    return f"0x{key}"


@dataclass
class WalletSession:
    account: Account | None = None
    pending_transfer: PendingTransfer = field(default_factory=PendingTransfer)

    @property
    def is_authenticated(self) -> bool:
        return self.account is not None


class SessionManager:
    """Owns the current session; its methods are the only place it changes."""

    def __init__(
        self,
        selector: EndpointSelector,
        monitor: BalanceMonitor,
        notifier: Notifier,
        confirmer: Confirmer,
    ):
        self.selector = selector
        self.monitor = monitor
        self.notifier = notifier
        self.confirmer = confirmer
        self.session = WalletSession()
        self._opening = False

    @property
    def connection(self) -> ConnectionState:
        return self.selector.state

    def require_active(self) -> tuple[SigningClient, Account]:
        client = self.connection.client
        if self.session.account is None or client is None:
            raise NotAuthenticatedError("No wallet is loaded")
        return client, self.session.account

    async def create_account(self) -> Account:
        return await self._open_session(
            lambda client: client.generate_account(),
            success_message="Wallet created successfully!",
            failure_prefix="Failed to create wallet",
        )

    async def import_account(self, raw_key: str) -> Account:
        self._ensure_unauthenticated()
        if not raw_key or not raw_key.strip():
            self.notifier.notify(
                "Error", "Please enter a private key", Severity.ERROR, 5000
            )
            raise InvalidKeyFormatError("Private key is empty")

        key = normalize_private_key(raw_key)
        return await self._open_session(
            lambda client: client.import_from_key(key),
            success_message="Wallet imported successfully!",
            failure_prefix="Failed to import wallet",
        )

    async def logout(self) -> bool:
        answer = self.confirmer.confirm(LOGOUT_PROMPT)
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug("Logout cancelled")
            return False

        self.monitor.stop()
        self.monitor.reset()
        address = self.session.account.address if self.session.account else None
        self.session = WalletSession()
        self.selector.reset()
        logger.with_context(address=address).info("Logged out")
        self.notifier.notify("Success", "Logged out successfully", Severity.SUCCESS, 5000)
        return True

    def shutdown(self) -> None:
        self.monitor.stop()

    def _ensure_unauthenticated(self) -> None:
        if self._opening:
            message = "A wallet is already being opened. Please wait."
            self.notifier.notify("Error", message, Severity.ERROR, 5000)
            raise AlreadyAuthenticatedError(message)
        if self.session.is_authenticated:
            message = "A wallet is already loaded. Logout first."
            self.notifier.notify("Error", message, Severity.ERROR, 5000)
            raise AlreadyAuthenticatedError(message)

    async def _open_session(
        self,
        load_account: Callable[[SigningClient], Account],
        success_message: str,
        failure_prefix: str,
    ) -> Account:
        self._ensure_unauthenticated()
        self._opening = True
        try:
            return await self._connect_and_load(
                load_account, success_message, failure_prefix
            )
        finally:
            self._opening = False

    async def _connect_and_load(
        self,
        load_account: Callable[[SigningClient], Account],
        success_message: str,
        failure_prefix: str,
    ) -> Account:
        self.notifier.notify(
            "Info", f"Connecting to {NETWORK_NAME} network...", Severity.INFO, 3000
        )

        try:
            client = await self.selector.connect()
        except NoEndpointReachableError as e:
            logger.error("%s: %s", failure_prefix, e)
            self.notifier.notify("Error", e.message, Severity.ERROR, 10000)
            raise

        try:
            account = load_account(client)
        except InvalidKeyFormatError as e:
            self.selector.reset()
            logger.warning("%s: %s", failure_prefix, e)
            self.notifier.notify(
                "Error", f"{failure_prefix}: {e}", Severity.ERROR, 5000
            )
            raise
        except Exception as e:
            self.selector.reset()
            logger.error("%s: %s", failure_prefix, e)
            self.notifier.notify(
                "Error", f"{failure_prefix}: {e}", Severity.ERROR, 5000
            )
            raise SigningError(f"{failure_prefix}: {e}") from e

        self.session.account = account
        logger.with_context(address=account.address).info(
            "Session opened on %s", self.connection.endpoint_url
        )
        self.notifier.notify("Success", success_message, Severity.SUCCESS, 5000)
        self.monitor.reset()
        self.monitor.start(client, account)
        return account
