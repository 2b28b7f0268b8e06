"""Balance polling and incoming-funds detection for Sepolia Quick Wallet."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from sepolia_wallet.config import CURRENCY_SYMBOL, DEFAULT_CONFIG, WalletConfig
from sepolia_wallet.shared.errors import BalanceQueryError
from sepolia_wallet.shared.logging import get_logger
from sepolia_wallet.shared.models import Account
from sepolia_wallet.shared.protocols import Notifier, Severity, SigningClient

logger = get_logger(__name__)

RECEIVED_DURATION_MS = 7000
ERROR_DURATION_MS = 5000


@dataclass(frozen=True)
class BalanceSample:
    value: Decimal = Decimal("0")
    is_first_sample: bool = True


def format_amount(value: Decimal, precision: int) -> str:
    return format(value.quantize(Decimal(1).scaleb(-precision)), "f")


class BalanceMonitor:
    """Polls the account balance and announces increases.

    The first sample after ``start()`` only sets the baseline. A refresh whose
    result arrives after ``stop()`` or a newer ``start()`` is dropped.
    """

    def __init__(
        self,
        notifier: Notifier,
        config: WalletConfig | None = None,
        on_balance: Callable[[Decimal], None] | None = None,
    ):
        self.notifier = notifier
        self.config = config or DEFAULT_CONFIG
        self.on_balance = on_balance
        self.sample = BalanceSample()
        self.displayed_balance = Decimal("0")
        self._quantum = Decimal(1).scaleb(-self.config.balance_precision)
        self._generation = 0
        self._poll_task: asyncio.Task | None = None
        self._delayed_tasks: set[asyncio.Task] = set()

    @property
    def generation(self) -> int:
        """Bumped by every ``stop()``; identifies the current polling session."""
        return self._generation

    @property
    def is_running(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def start(self, client: SigningClient, account: Account) -> None:
        self.stop()
        self.sample = BalanceSample(value=self.sample.value, is_first_sample=True)
        self._poll_task = asyncio.get_running_loop().create_task(
            self._poll(client, account), name="balance-poll"
        )
        logger.with_context(address=account.address).info(
            "Balance polling started every %.1fs", self.config.poll_interval_seconds
        )

    def stop(self) -> None:
        self._generation += 1
        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None
            logger.info("Balance polling stopped")
        for task in list(self._delayed_tasks):
            task.cancel()
        self._delayed_tasks.clear()

    def reset(self) -> None:
        self.sample = BalanceSample()
        self._set_displayed(Decimal("0"))

    def refresh_later(
        self,
        client: SigningClient,
        account: Account,
        delay_seconds: float,
        generation: int | None = None,
    ) -> None:
        """Schedule one refresh after ``delay_seconds``.

        ``generation`` is the value of ``self.generation`` when the caller's
        work began; if the monitor has been stopped since, nothing is scheduled.
        """
        if generation is None:
            generation = self._generation
        if generation != self._generation:
            logger.debug("Skipping delayed refresh for a stopped poll")
            return
        task = asyncio.get_running_loop().create_task(
            self._delayed_refresh(client, account, delay_seconds, generation),
            name="balance-refresh",
        )
        self._delayed_tasks.add(task)
        task.add_done_callback(self._delayed_tasks.discard)

    async def refresh_once(self, client: SigningClient, account: Account) -> Decimal:
        generation = self._generation
        log = logger.with_context(address=account.address)

        try:
            base_units = await asyncio.to_thread(client.get_balance, account.address)
            value = client.to_display_unit(base_units).quantize(
                self._quantum, rounding=ROUND_HALF_UP
            )
        except Exception as e:
            if generation != self._generation:
                log.debug("Ignoring balance error from a stopped poll: %s", e)
                raise BalanceQueryError(f"Failed to fetch balance: {e}") from e
            log.error("Balance query failed: %s", e)
            self.notifier.notify(
                "Error", f"Failed to fetch balance: {e}", Severity.ERROR, ERROR_DURATION_MS
            )
            raise BalanceQueryError(f"Failed to fetch balance: {e}") from e

        if generation != self._generation:
            log.debug("Discarding balance result from a stopped poll")
            return value

        self._apply(value, log)
        return value

    def _apply(self, value: Decimal, log) -> None:
        previous = self.sample
        if previous.is_first_sample:
            log.info("Baseline balance %s %s", format(value, "f"), CURRENCY_SYMBOL)
        elif value > previous.value:
            delta = format_amount(value - previous.value, self.config.balance_precision)
            log.info("Received %s %s", delta, CURRENCY_SYMBOL)
            self.notifier.notify(
                f"💰 {CURRENCY_SYMBOL} Received!",
                f"You received {delta} {CURRENCY_SYMBOL}",
                Severity.SUCCESS,
                RECEIVED_DURATION_MS,
            )

        self.sample = BalanceSample(value=value, is_first_sample=False)
        self._set_displayed(value)

    def _set_displayed(self, value: Decimal) -> None:
        self.displayed_balance = value
        if self.on_balance:
            try:
                self.on_balance(value)
            except Exception as e:
                logger.error("Error in balance callback: %s", e)

    async def _poll(self, client: SigningClient, account: Account) -> None:
        while True:
            try:
                await self.refresh_once(client, account)
            except BalanceQueryError:
                # Reported by refresh_once; the next tick retries.
                pass
            await asyncio.sleep(self.config.poll_interval_seconds)

    async def _delayed_refresh(
        self,
        client: SigningClient,
        account: Account,
        delay_seconds: float,
        generation: int,
    ) -> None:
        await asyncio.sleep(delay_seconds)
        if generation != self._generation:
            return
        try:
            await self.refresh_once(client, account)
        except BalanceQueryError:
            pass
