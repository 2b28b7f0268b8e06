"""Static configuration for Sepolia Quick Wallet."""

from __future__ import annotations

from dataclasses import dataclass, field

from sepolia_wallet.shared.network import TimeoutConfig

NETWORK_NAME = "Sepolia"
CURRENCY_SYMBOL = "ETH"
SEPOLIA_CHAIN_ID = 11155111

# Public endpoints, tried in order on every connect.
RPC_URLS: tuple[str, ...] = (
    "https://eth-sepolia.public.blastapi.io",
    "https://rpc2.sepolia.org",
    "https://ethereum-sepolia.publicnode.com",
    "https://sepolia.gateway.tenderly.co",
)

POLL_INTERVAL_SECONDS = 10.0
POST_SEND_REFRESH_DELAY_SECONDS = 2.0
TRANSFER_GAS_LIMIT = 21000
BALANCE_PRECISION = 6

EXPLORER_TX_URL = "https://sepolia.etherscan.io/tx/{tx_hash}"

FAUCET_LINKS: tuple[tuple[str, str], ...] = (
    ("Alchemy Sepolia Faucet", "https://www.alchemy.com/faucets/ethereum-sepolia"),
    ("Sepolia Faucet", "https://sepoliafaucet.com/"),
    ("Infura Sepolia Faucet", "https://www.infura.io/faucet/sepolia"),
    ("QuickNode Faucet", "https://faucet.quicknode.com/ethereum/sepolia"),
)


@dataclass(frozen=True)
class WalletConfig:
    rpc_urls: tuple[str, ...] = RPC_URLS
    chain_id: int = SEPOLIA_CHAIN_ID
    poll_interval_seconds: float = POLL_INTERVAL_SECONDS
    post_send_refresh_delay_seconds: float = POST_SEND_REFRESH_DELAY_SECONDS
    transfer_gas_limit: int = TRANSFER_GAS_LIMIT
    balance_precision: int = BALANCE_PRECISION
    receipt_timeout_seconds: float = 120.0
    receipt_poll_interval_seconds: float = 2.0
    explorer_tx_url: str = EXPLORER_TX_URL
    timeout_config: TimeoutConfig = field(default_factory=TimeoutConfig)

    def explorer_url(self, tx_hash: str) -> str:
        return self.explorer_tx_url.format(tx_hash=tx_hash)


DEFAULT_CONFIG = WalletConfig()
