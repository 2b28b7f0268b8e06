"""Error types raised by the wallet core."""


class WalletError(Exception):
    """Base class for every failure the core reports to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NoEndpointReachableError(WalletError):
    pass


class InvalidKeyFormatError(WalletError):
    pass


class SigningError(WalletError):
    pass


class AlreadyAuthenticatedError(WalletError):
    pass


class NotAuthenticatedError(WalletError):
    pass


class BalanceQueryError(WalletError):
    pass


class ValidationError(WalletError):
    pass


class TransferError(WalletError):
    pass


class InsufficientFundsError(TransferError):
    pass


class BroadcastError(TransferError):
    pass


class TransactionPendingError(BroadcastError):
    """Broadcast succeeded but no receipt arrived in time."""

    def __init__(self, message: str, tx_hash: str):
        super().__init__(message)
        self.tx_hash = tx_hash
