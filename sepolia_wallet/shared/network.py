"""JSON-RPC transport for Sepolia Quick Wallet with timeout handling and error classification."""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

logger = logging.getLogger(__name__)


class NetworkErrorType(Enum):
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_ERROR = "http_error"
    RPC_ERROR = "rpc_error"
    UNKNOWN = "unknown"


@dataclass
class NetworkError(Exception):
    error_type: NetworkErrorType
    message: str
    original_error: Exception | None = None
    status_code: int | None = None
    response_text: str | None = None
    rpc_code: int | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class TimeoutConfig:
    connect_timeout: float = 5.0
    read_timeout: float = 15.0

    @property
    def request_timeout(self) -> tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


DEFAULT_TIMEOUT_CONFIG = TimeoutConfig()


class RpcError(Exception):
    """Error object returned inside a JSON-RPC response."""

    def __init__(self, code: int | None, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def classify_error(error: Exception) -> NetworkErrorType:
    if isinstance(error, RpcError):
        return NetworkErrorType.RPC_ERROR
    elif isinstance(error, Timeout):
        return NetworkErrorType.TIMEOUT
    elif isinstance(error, ConnectionError):
        return NetworkErrorType.CONNECTION_ERROR
    elif isinstance(error, HTTPError):
        return NetworkErrorType.HTTP_ERROR
    return NetworkErrorType.UNKNOWN


def create_network_error(
    error: Exception, node_url: str, context: str = ""
) -> NetworkError:
    error_type = classify_error(error)
    context_prefix = f"{context}: " if context else ""

    if error_type == NetworkErrorType.RPC_ERROR:
        # Node-side rejections keep the node's own wording; callers classify on it.
        rpc_error = error if isinstance(error, RpcError) else None
        return NetworkError(
            error_type=error_type,
            message=f"{context_prefix}{error}",
            original_error=error,
            rpc_code=rpc_error.code if rpc_error else None,
        )
    elif error_type == NetworkErrorType.TIMEOUT:
        message = (
            f"{context_prefix}Connection timeout. Node may be unavailable: {node_url}"
        )
    elif error_type == NetworkErrorType.CONNECTION_ERROR:
        message = (
            f"{context_prefix}Cannot connect to node: {node_url}. "
            "Check your network connection."
        )
    elif error_type == NetworkErrorType.HTTP_ERROR:
        response = getattr(error, "response", None)
        status_code = getattr(response, "status_code", None)
        response_text = getattr(response, "text", None)
        message = f"{context_prefix}HTTP error {status_code}: {response_text or 'Unknown error'}"
        return NetworkError(
            error_type=error_type,
            message=message,
            original_error=error,
            status_code=status_code,
            response_text=response_text,
        )
    else:
        message = f"{context_prefix}Network error: {str(error)}"

    return NetworkError(
        error_type=error_type,
        message=message,
        original_error=error,
    )


class NetworkClient:
    """Blocking JSON-RPC 2.0 client bound to a single node URL.

    Every failure is raised as a ``NetworkError``; there is no retry loop.
    """

    _ids = itertools.count(1)

    def __init__(
        self,
        node_url: str,
        timeout_config: TimeoutConfig | None = None,
        session: requests.Session | None = None,
    ):
        self.node_url = node_url.rstrip("/")
        self.timeout_config = timeout_config or DEFAULT_TIMEOUT_CONFIG
        self._session = session or requests.Session()

    def call(self, method: str, params: list[Any] | None = None, context: str = "") -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }

        try:
            response = self._session.post(
                self.node_url,
                json=payload,
                timeout=self.timeout_config.request_timeout,
            )
            response.raise_for_status()
            body = response.json()
            if "error" in body and body["error"] is not None:
                error = body["error"]
                if isinstance(error, dict):
                    raise RpcError(error.get("code"), error.get("message", str(error)))
                raise RpcError(None, str(error))
        except Exception as e:
            logger.debug("RPC %s failed on %s: %s", method, self.node_url, e)
            raise create_network_error(e, self.node_url, context) from e

        return body.get("result")

    def close(self) -> None:
        self._session.close()
