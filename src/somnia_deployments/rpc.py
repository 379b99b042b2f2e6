"""Raw JSON-RPC helpers for somnia-deployments."""

import requests

from .exceptions import NetworkError


def get_chain_id(rpc_url: str) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain id reported by eth_chainId

    Raises:
        NetworkError: If the endpoint is unreachable, answers with an HTTP or
            RPC error, or returns a malformed response
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=30,
        )
    except requests.RequestException as e:
        raise NetworkError(f"Network error during RPC call to {rpc_url}: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise NetworkError(f"RPC request failed with status {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise NetworkError(f"RPC endpoint returned a non-JSON response: {e}") from e

    # Check for RPC errors
    if "error" in result:
        raise NetworkError(f"RPC error: {result['error']}")

    try:
        return int(result["result"], 16)
    except (KeyError, TypeError, ValueError) as e:
        raise NetworkError(f"Malformed eth_chainId response: {result}") from e
