"""Hardhat build artifact loading for somnia-deployments."""

import json
from pathlib import Path
from typing import Union

from .exceptions import ArtifactNotFoundError, DefectiveArtifactError
from .paths import get_artifact_path
from .types import ContractArtifact


def find_artifact(artifacts_dir: Union[Path, str], contract_name: str) -> Path:
    """
    Locate the build artifact for a contract.

    Assumption: the artifact is a file named exactly {contract_name}.json
    somewhere below artifacts_dir. The conventional Hardhat location
    contracts/{contract_name}.sol/{contract_name}.json is checked first,
    for contracts kept in differently named source files the directory is
    searched.

    Args:
        artifacts_dir: Hardhat artifacts directory
        contract_name: Contract name

    Returns:
        Path to the artifact file

    Raises:
        ArtifactNotFoundError: If no artifact exists for the contract
    """
    conventional = get_artifact_path(artifacts_dir, contract_name)
    if conventional.is_file():
        return conventional

    artifacts_root = Path(artifacts_dir)
    if artifacts_root.is_dir():
        # sorted for a stable pick when a name is compiled from several sources
        matches = sorted(artifacts_root.rglob(f"{contract_name}.json"))
        if matches:
            return matches[0]

    raise ArtifactNotFoundError(
        f"Build artifact for {contract_name} not found under {artifacts_root}. "
        "Compile the contracts first (npx hardhat compile)."
    )


def parse_artifact(file_path: Path, contract_name: str) -> ContractArtifact:
    """
    Parse a Hardhat artifact JSON file.

    Args:
        file_path: Path to artifact file
        contract_name: Contract name the artifact is expected to describe

    Returns:
        ContractArtifact with abi and creation bytecode

    Raises:
        DefectiveArtifactError: If the file is not valid JSON, or lacks an ABI
            or deployable bytecode (interfaces and abstract contracts have "0x")
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DefectiveArtifactError(f"Invalid JSON in artifact {file_path}: {e}") from e

    abi = data.get("abi")
    if not isinstance(abi, list):
        raise DefectiveArtifactError(f"Missing ABI in artifact: {file_path}")

    bytecode = data.get("bytecode")
    if not bytecode or bytecode == "0x":
        raise DefectiveArtifactError(
            f"{contract_name} has no deployable bytecode in {file_path}"
        )

    return ContractArtifact(name=contract_name, abi=abi, bytecode=bytecode)


def load_artifact(artifacts_dir: Union[Path, str], contract_name: str) -> ContractArtifact:
    """Find and parse the artifact for contract_name."""
    return parse_artifact(find_artifact(artifacts_dir, contract_name), contract_name)
