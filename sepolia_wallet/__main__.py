"""Sepolia Quick Wallet - a TUI wallet for one throwaway Sepolia account."""

from __future__ import annotations

from decimal import Decimal

from textual import work
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Static

from sepolia_wallet.config import (
    CURRENCY_SYMBOL,
    DEFAULT_CONFIG,
    FAUCET_LINKS,
    NETWORK_NAME,
    WalletConfig,
)
from sepolia_wallet.features.account import SessionManager
from sepolia_wallet.features.balance import BalanceMonitor, format_amount
from sepolia_wallet.features.connection import EndpointSelector
from sepolia_wallet.features.transfer import TransactionSubmitter
from sepolia_wallet.screens import ConfirmScreen
from sepolia_wallet.shared.clipboard import copy_text
from sepolia_wallet.shared.connection_state import (
    ConnectionState,
    ConnectionStatus,
    get_connection_state_message,
)
from sepolia_wallet.shared.errors import WalletError
from sepolia_wallet.shared.logging import format_error_for_user, get_logger, setup_logging
from sepolia_wallet.shared.protocols import Severity
from sepolia_wallet.styles import CSS

logger = get_logger(__name__)

SECURITY_WARNING = (
    "⚠️ This wallet lives only in memory. Closing the app or logging out "
    "discards the key, so copy your private key before you fund the address. "
    "Use testnet ETH only."
)

STATUS_MARKUP = {
    ConnectionStatus.UNINITIALIZED: "[dim]● {title}[/dim]",
    ConnectionStatus.CONNECTING: "[yellow]● {title}[/yellow]",
    ConnectionStatus.CONNECTED: "[green]● {title}[/green]",
    ConnectionStatus.FAILED: "[red]● {title}[/red]",
}


class TextualNotifier:
    """Routes wallet notifications to Textual toasts."""

    SEVERITY_MAP = {
        Severity.SUCCESS: "information",
        Severity.INFO: "information",
        Severity.ERROR: "error",
    }

    def __init__(self, app: App):
        self.app = app

    def notify(
        self, title: str, message: str, severity: Severity, duration_ms: int
    ) -> None:
        self.app.notify(
            message,
            title=title,
            severity=self.SEVERITY_MAP.get(severity, "information"),
            timeout=duration_ms / 1000,
        )


class TextualConfirmer:
    """Asks a yes/no question with a modal; must be awaited inside a worker."""

    def __init__(self, app: App):
        self.app = app

    async def confirm(self, message: str) -> bool:
        answer = await self.app.push_screen_wait(ConfirmScreen(message))
        return bool(answer)


class WalletApp(App):
    CSS = CSS
    TITLE = "Sepolia Quick Wallet"
    SUB_TITLE = f"{NETWORK_NAME} testnet"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "refresh_balance", "Refresh"),
        ("k", "toggle_private_key", "Show/Hide Key"),
    ]

    def __init__(self, config: WalletConfig | None = None):
        super().__init__()
        self.wallet_config = config or DEFAULT_CONFIG
        self.wallet_notifier = TextualNotifier(self)
        self.selector = EndpointSelector(
            config=self.wallet_config, on_state_change=self._handle_connection_state_change
        )
        self.monitor = BalanceMonitor(
            self.wallet_notifier, config=self.wallet_config, on_balance=self._on_balance
        )
        self.submitter = TransactionSubmitter(
            self.wallet_notifier, self.monitor, self.wallet_config
        )
        self.session_manager = SessionManager(
            self.selector, self.monitor, self.wallet_notifier, TextualConfirmer(self)
        )
        self.private_key_revealed = False
        self._busy = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="connection-status")
        yield Static(SECURITY_WARNING, id="security-warning")

        with Container(id="setup-section"):
            yield Label("🔑 Get Started", id="setup-title")
            yield Button("🆕 Generate New Wallet", id="create-button", variant="primary")
            yield Label("Import Private Key")
            yield Input(
                placeholder="64 hex characters, 0x prefix optional",
                password=True,
                id="import-key-input",
            )
            yield Button("📥 Import Wallet", id="import-button")

        with VerticalScroll(id="wallet-section", classes="hidden"):
            yield Label("👛 Your Wallet", id="wallet-title")
            yield Label("Address")
            yield Static(id="address-value")
            yield Button("📋 Copy Address", id="copy-address-button")
            yield Label("Private Key (keep it secret!)")
            yield Static(id="private-key-value")
            yield Horizontal(
                Button("👁 Show", id="toggle-key-button"),
                Button("📋 Copy Key", id="copy-key-button"),
            )
            poll_seconds = self.wallet_config.poll_interval_seconds
            yield Label(f"Balance (auto-refresh every {poll_seconds:g}s)")
            yield Static(id="balance-value")
            yield Button("🔄 Refresh", id="refresh-button")

            yield Label(f"📤 Send {CURRENCY_SYMBOL}", id="send-title")
            yield Label("Recipient Address")
            yield Input(placeholder="0x...", id="recipient-input")
            yield Label(f"Amount ({CURRENCY_SYMBOL})")
            yield Input(placeholder="0.01", id="amount-input")
            yield Button(f"📤 Send {CURRENCY_SYMBOL}", id="send-button", variant="primary")

            yield Static(self._faucet_text(), id="faucet-links")
            yield Button("🚪 Logout", id="logout-button", variant="error")

        yield Footer()

    def on_mount(self) -> None:
        self._update_connection_status_display(self.selector.state)
        self._on_balance(self.monitor.displayed_balance)
        self.update_view()

    def on_unmount(self) -> None:
        self.session_manager.shutdown()

    def _faucet_text(self) -> str:
        lines = [f"Need test {CURRENCY_SYMBOL}? Try a faucet:"]
        for name, url in FAUCET_LINKS:
            lines.append(f"  • [link={url}]{name}[/link]  {url}")
        return "\n".join(lines)

    def update_view(self) -> None:
        session = self.session_manager.session
        setup = self.query_one("#setup-section")
        wallet = self.query_one("#wallet-section")
        setup.set_class(session.is_authenticated, "hidden")
        wallet.set_class(not session.is_authenticated, "hidden")

        account = session.account
        self.query_one("#address-value", Static).update(
            account.address if account else ""
        )
        if account is None:
            key_text = ""
        elif self.private_key_revealed:
            key_text = account.private_key
        else:
            key_text = "•" * 32
        self.query_one("#private-key-value", Static).update(key_text)
        self.query_one("#toggle-key-button", Button).label = (
            "🙈 Hide" if self.private_key_revealed else "👁 Show"
        )

        pending = session.pending_transfer
        recipient_input = self.query_one("#recipient-input", Input)
        amount_input = self.query_one("#amount-input", Input)
        if recipient_input.value != pending.recipient:
            recipient_input.value = pending.recipient
        if amount_input.value != pending.amount:
            amount_input.value = pending.amount

    def _on_balance(self, value: Decimal) -> None:
        precision = self.wallet_config.balance_precision
        text = f"{format_amount(value, precision)} {CURRENCY_SYMBOL}"
        self.query_one("#balance-value", Static).update(text)

    def _handle_connection_state_change(
        self,
        old_status: ConnectionStatus,
        new_status: ConnectionStatus,
        state: ConnectionState,
    ) -> None:
        logger.info(
            "Connection state changed: %s -> %s", old_status.value, new_status.value
        )
        self._update_connection_status_display(state)

    def _update_connection_status_display(self, state: ConnectionState) -> None:
        title, _ = get_connection_state_message(state.status)
        text = STATUS_MARKUP[state.status].format(title=title)
        if state.status == ConnectionStatus.CONNECTED and state.endpoint_url:
            text += f" [dim]({state.endpoint_url})[/dim]"
        self.query_one("#connection-status", Static).update(text)

    def on_input_changed(self, event: Input.Changed) -> None:
        pending = self.session_manager.session.pending_transfer
        if event.input.id == "recipient-input":
            pending.recipient = event.value
        elif event.input.id == "amount-input":
            pending.amount = event.value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "create-button":
            self.create_wallet()
        elif button_id == "import-button":
            self.import_wallet(self.query_one("#import-key-input", Input).value)
        elif button_id == "send-button":
            self.send_transaction()
        elif button_id == "logout-button":
            self.logout()
        elif button_id == "refresh-button":
            self.action_refresh_balance()
        elif button_id == "toggle-key-button":
            self.action_toggle_private_key()
        elif button_id == "copy-address-button":
            account = self.session_manager.session.account
            self._copy("Address", account.address if account else "")
        elif button_id == "copy-key-button":
            account = self.session_manager.session.account
            self._copy("Private key", account.private_key if account else "")

    def action_toggle_private_key(self) -> None:
        if not self.session_manager.session.is_authenticated:
            return
        self.private_key_revealed = not self.private_key_revealed
        self.update_view()

    def action_refresh_balance(self) -> None:
        if self.session_manager.session.is_authenticated:
            self.refresh_balance()

    def _copy(self, label: str, text: str) -> None:
        if not text:
            self.notify("No wallet loaded", severity="warning")
            return
        method = copy_text(text)
        if method:
            logger.debug("%s copied via %s", label, method)
            self.notify(f"{label} copied to clipboard!", severity="information")
        else:
            self.notify(
                "Clipboard unavailable. Select the text and copy it manually.",
                severity="warning",
            )

    def _report_unexpected(self, action: str, error: Exception) -> None:
        logger.exception("Unexpected error during %s", action)
        self.notify(format_error_for_user(error), title="Error", severity="error")

    @work(group="wallet", exit_on_error=False)
    async def create_wallet(self) -> None:
        if self._busy:
            return
        self._busy = True
        try:
            await self.session_manager.create_account()
        except WalletError as e:
            logger.debug("Wallet creation aborted: %s", e)
        except Exception as e:
            self._report_unexpected("wallet creation", e)
        finally:
            self._busy = False
            self.private_key_revealed = False
            self.update_view()

    @work(group="wallet", exit_on_error=False)
    async def import_wallet(self, raw_key: str) -> None:
        if self._busy:
            return
        self._busy = True
        try:
            await self.session_manager.import_account(raw_key)
            self.query_one("#import-key-input", Input).value = ""
        except WalletError as e:
            logger.debug("Wallet import aborted: %s", e)
        except Exception as e:
            self._report_unexpected("wallet import", e)
        finally:
            self._busy = False
            self.private_key_revealed = False
            self.update_view()

    @work(group="wallet", exit_on_error=False)
    async def send_transaction(self) -> None:
        if self._busy:
            return
        self._busy = True
        try:
            client, account = self.session_manager.require_active()
            await self.submitter.send(
                client, account, self.session_manager.session.pending_transfer
            )
        except WalletError as e:
            logger.debug("Send aborted: %s", e)
        except Exception as e:
            self._report_unexpected("send", e)
        finally:
            self._busy = False
            self.update_view()

    @work(group="wallet", exit_on_error=False)
    async def logout(self) -> None:
        if self._busy:
            return
        self._busy = True
        try:
            if await self.session_manager.logout():
                self.private_key_revealed = False
        except Exception as e:
            self._report_unexpected("logout", e)
        finally:
            self._busy = False
            self.update_view()

    @work(group="balance", exit_on_error=False)
    async def refresh_balance(self) -> None:
        try:
            client, account = self.session_manager.require_active()
            await self.monitor.refresh_once(client, account)
        except WalletError as e:
            logger.debug("Manual refresh failed: %s", e)


def main():
    """Entry point for the application."""
    setup_logging()
    logger.info("Starting Sepolia Quick Wallet")
    app = WalletApp()
    app.run()


if __name__ == "__main__":
    main()
