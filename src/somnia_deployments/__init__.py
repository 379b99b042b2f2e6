"""
somnia-deployments: deploy the event, boundary NFT and claim verification contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .backend import DeploymentBackend, Web3Backend
from .config import DeploymentConfig
from .deployments import deploy_contracts, main, run
from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    DefectiveArtifactError,
    DeploymentError,
    ErrorKind,
    GasError,
    InsufficientFundsError,
    NetworkError,
    classify_error,
)
from .manifest import load_manifest, save_manifest
from .types import ContractArtifact, ContractDeployment, DeploymentManifest

try:
    __version__ = version("somnia-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "deploy_contracts",
    "run",
    "main",
    "DeploymentBackend",
    "Web3Backend",
    "DeploymentConfig",
    "ContractArtifact",
    "ContractDeployment",
    "DeploymentManifest",
    "load_manifest",
    "save_manifest",
    "classify_error",
    "ErrorKind",
    "DeploymentError",
    "ConfigurationError",
    "ArtifactNotFoundError",
    "DefectiveArtifactError",
    "InsufficientFundsError",
    "NetworkError",
    "GasError",
]
