"""Exception classes and error classification for somnia-deployments."""

from enum import Enum
from typing import Any, Dict, Optional

import requests
from web3.exceptions import TimeExhausted


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the deployment environment is incomplete or inconsistent."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a contract build artifact cannot be located."""

    pass


class DefectiveArtifactError(DeploymentError, ValueError):
    """Raised when a build artifact has no ABI or no deployable bytecode."""

    pass


class InsufficientFundsError(DeploymentError):
    """Raised when the deployer cannot pay for a deployment transaction."""

    pass


class NetworkError(DeploymentError, ConnectionError):
    """Raised when the RPC endpoint is unreachable or misbehaves."""

    pass


class GasError(DeploymentError):
    """Raised when gas estimation, gas limit or gas pricing is rejected."""

    pass


class ErrorKind(Enum):
    """
    Coarse error taxonomy used to pick a remediation hint.

    Value strings appear in failure log lines.
    """

    INSUFFICIENT_FUNDS = "insufficient-funds"
    NETWORK = "network"
    GAS = "gas"
    UNKNOWN = "unknown"


_KIND_BY_TYPE = {
    InsufficientFundsError: ErrorKind.INSUFFICIENT_FUNDS,
    NetworkError: ErrorKind.NETWORK,
    GasError: ErrorKind.GAS,
}

_TYPE_BY_KIND = {kind: exc_type for exc_type, kind in _KIND_BY_TYPE.items()}
_TYPE_BY_KIND[ErrorKind.UNKNOWN] = DeploymentError

# Checked in order, first match wins
_MESSAGE_PATTERNS = (
    ("insufficient funds", ErrorKind.INSUFFICIENT_FUNDS),
    ("network", ErrorKind.NETWORK),
    ("gas", ErrorKind.GAS),
)


def classify_error(error: BaseException) -> ErrorKind:
    """
    Classify an error into the deployment error taxonomy.

    Typed deployment errors and known transport failures are classified by
    type, other DeploymentErrors are UNKNOWN. Anything else falls back to a
    case-insensitive substring search on the error message, for libraries
    that only report failures as text.

    Args:
        error: Exception raised during deployment

    Returns:
        Matching ErrorKind, ErrorKind.UNKNOWN if nothing matches
    """
    for exc_type, kind in _KIND_BY_TYPE.items():
        if isinstance(error, exc_type):
            return kind

    # Own errors are typed where raised
    if isinstance(error, DeploymentError):
        return ErrorKind.UNKNOWN

    if isinstance(error, (requests.RequestException, TimeExhausted)):
        return ErrorKind.NETWORK

    message = str(error).lower()
    for pattern, kind in _MESSAGE_PATTERNS:
        if pattern in message:
            return kind

    return ErrorKind.UNKNOWN


def translate_error(error: Exception, context: str) -> DeploymentError:
    """
    Wrap a foreign exception in the typed deployment error it classifies as.

    Args:
        error: Exception raised by web3 or the transport layer
        context: Short description of the failed operation

    Returns:
        DeploymentError subclass instance; the caller chains it with ``from``
    """
    if isinstance(error, DeploymentError):
        return error

    exc_type = _TYPE_BY_KIND[classify_error(error)]
    return exc_type(f"{context}: {error}")


def remediation_hint(kind: ErrorKind, network_config: Dict[str, Any]) -> Optional[str]:
    """Operator hint for an error kind, or None when there is nothing to suggest."""
    match kind:
        case ErrorKind.INSUFFICIENT_FUNDS:
            return (
                f"Get more {network_config['currency']} from the faucet: "
                f"{network_config['faucet_url']}"
            )
        case ErrorKind.NETWORK:
            return f"Check your RPC connection to {network_config['chain_name']}"
        case ErrorKind.GAS:
            return "Try increasing gas limit or gas price"
        case _:
            return None
