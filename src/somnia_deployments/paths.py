"""Path management utilities for somnia-deployments."""

from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_NETWORK, NETWORK_CONFIG


def get_default_deployments_dir() -> Path:
    """
    Get default directory for deployment manifests.

    Returns:
        Path to ./deployments
    """
    return Path.cwd() / "deployments"


def get_manifest_path(
    deployments_dir: Optional[Union[Path, str]] = None,
    network: str = DEFAULT_NETWORK,
) -> Path:
    """
    Get manifest file path for a network.

    Args:
        deployments_dir: Custom manifest directory (defaults to ./deployments)
        network: Key into NETWORK_CONFIG

    Returns:
        Absolute path, e.g. ./deployments/somnia-testnet-deployment.json
    """
    if deployments_dir is None:
        deployments_dir = get_default_deployments_dir()
    else:
        deployments_dir = Path(deployments_dir).absolute()

    return deployments_dir / NETWORK_CONFIG[network]["manifest_filename"]


def get_default_artifacts_dir() -> Path:
    """Hardhat's default build output directory, ./artifacts."""
    return Path.cwd() / "artifacts"


def get_artifact_path(artifacts_dir: Union[Path, str], contract_name: str) -> Path:
    """
    Get the conventional Hardhat artifact path for a contract.

    Hardhat writes artifacts/contracts/<Name>.sol/<Name>.json for a
    contract defined in contracts/<Name>.sol.

    Args:
        artifacts_dir: Hardhat artifacts directory
        contract_name: Contract name

    Returns:
        Path where the artifact is expected (may not exist)
    """
    return Path(artifacts_dir) / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"
