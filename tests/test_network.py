"""Unit tests for the JSON-RPC transport and error classification."""

from unittest.mock import Mock

import pytest
from requests.exceptions import ConnectionError, HTTPError, Timeout

from sepolia_wallet.shared.network import (
    DEFAULT_TIMEOUT_CONFIG,
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    RpcError,
    TimeoutConfig,
    classify_error,
    create_network_error,
)

NODE_URL = "https://rpc.example.com"


def make_client(response=None, side_effect=None, **kwargs):
    session = Mock()
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    return NetworkClient(NODE_URL, session=session, **kwargs), session


def json_response(body, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestTimeoutConfig:
    def test_default_values(self):
        config = TimeoutConfig()
        assert config.connect_timeout == 5.0
        assert config.read_timeout == 15.0

    def test_request_timeout_tuple(self):
        config = TimeoutConfig(connect_timeout=3.0, read_timeout=10.0)
        assert config.request_timeout == (3.0, 10.0)


class TestClassifyError:
    def test_timeout(self):
        assert classify_error(Timeout("timed out")) == NetworkErrorType.TIMEOUT

    def test_connection_error(self):
        assert classify_error(ConnectionError("refused")) == NetworkErrorType.CONNECTION_ERROR

    def test_http_error(self):
        assert classify_error(HTTPError("500")) == NetworkErrorType.HTTP_ERROR

    def test_rpc_error(self):
        assert classify_error(RpcError(-32000, "nonce too low")) == NetworkErrorType.RPC_ERROR

    def test_unknown(self):
        assert classify_error(ValueError("odd")) == NetworkErrorType.UNKNOWN


class TestCreateNetworkError:
    def test_timeout_message_names_node(self):
        error = create_network_error(Timeout("t"), NODE_URL, "Fetch balance")
        assert error.error_type == NetworkErrorType.TIMEOUT
        assert error.message.startswith("Fetch balance: Connection timeout")
        assert NODE_URL in error.message

    def test_http_error_keeps_status(self):
        response = Mock(status_code=503, text="Service Unavailable")
        error = create_network_error(HTTPError(response=response), NODE_URL)
        assert error.status_code == 503
        assert error.response_text == "Service Unavailable"
        assert "HTTP error 503" in error.message

    def test_rpc_error_keeps_node_wording(self):
        original = RpcError(-32000, "insufficient funds for gas * price + value")
        error = create_network_error(original, NODE_URL, "Broadcast transaction")
        assert error.rpc_code == -32000
        assert error.original_error is original
        assert str(error) == (
            "Broadcast transaction: insufficient funds for gas * price + value"
        )


@pytest.mark.unit
class TestNetworkClient:
    def test_defaults(self):
        client = NetworkClient(f"{NODE_URL}/")
        assert client.node_url == NODE_URL
        assert client.timeout_config is DEFAULT_TIMEOUT_CONFIG

    def test_call_returns_result(self):
        client, session = make_client(
            json_response({"jsonrpc": "2.0", "id": 1, "result": "0x10"})
        )

        assert client.call("eth_blockNumber") == "0x10"

        args, kwargs = session.post.call_args
        assert args == (NODE_URL,)
        assert kwargs["json"]["jsonrpc"] == "2.0"
        assert kwargs["json"]["method"] == "eth_blockNumber"
        assert kwargs["json"]["params"] == []
        assert kwargs["timeout"] == (5.0, 15.0)

    def test_call_passes_params(self):
        client, session = make_client(json_response({"result": "0x0"}))

        client.call("eth_getBalance", ["0xabc", "latest"])

        assert session.post.call_args.kwargs["json"]["params"] == ["0xabc", "latest"]

    def test_request_ids_increase(self):
        client, session = make_client(json_response({"result": None}))

        client.call("eth_gasPrice")
        client.call("eth_gasPrice")

        first, second = (c.kwargs["json"]["id"] for c in session.post.call_args_list)
        assert second > first

    def test_rpc_error_object(self):
        client, _ = make_client(
            json_response(
                {"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "nonce too low"}}
            )
        )

        with pytest.raises(NetworkError) as exc_info:
            client.call("eth_sendRawTransaction", ["0x00"], context="Broadcast")

        assert exc_info.value.error_type == NetworkErrorType.RPC_ERROR
        assert exc_info.value.rpc_code == -32000
        assert str(exc_info.value) == "Broadcast: nonce too low"

    def test_timeout(self):
        client, _ = make_client(side_effect=Timeout("read timed out"))

        with pytest.raises(NetworkError) as exc_info:
            client.call("eth_blockNumber")

        assert exc_info.value.error_type == NetworkErrorType.TIMEOUT
        assert isinstance(exc_info.value.__cause__, Timeout)

    def test_connection_error_is_not_retried(self):
        client, session = make_client(side_effect=ConnectionError("refused"))

        with pytest.raises(NetworkError) as exc_info:
            client.call("eth_blockNumber")

        assert exc_info.value.error_type == NetworkErrorType.CONNECTION_ERROR
        assert session.post.call_count == 1

    def test_http_status_error(self):
        response = json_response({}, status_code=429)
        response.text = "Too Many Requests"
        response.raise_for_status.side_effect = HTTPError(response=response)
        client, _ = make_client(response)

        with pytest.raises(NetworkError) as exc_info:
            client.call("eth_getBalance", ["0xabc", "latest"])

        assert exc_info.value.error_type == NetworkErrorType.HTTP_ERROR
        assert exc_info.value.status_code == 429

    def test_invalid_json(self):
        response = Mock()
        response.json.side_effect = ValueError("Expecting value")
        client, _ = make_client(response)

        with pytest.raises(NetworkError) as exc_info:
            client.call("eth_blockNumber")

        assert exc_info.value.error_type == NetworkErrorType.UNKNOWN

    def test_close(self):
        client, session = make_client(json_response({"result": None}))
        client.close()
        session.close.assert_called_once()
