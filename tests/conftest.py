"""Shared pytest fixtures for somnia-deployments tests."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

from somnia_deployments.config import DeploymentConfig
from somnia_deployments.constants import CONTRACT_NAMES
from somnia_deployments.types import ContractDeployment

DEPLOYER = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"
TEST_PRIVATE_KEY = "0x" + "11" * 32


class RecordingBackend:
    """Deployment backend double that records every call it receives."""

    def __init__(
        self,
        balance: int = 5 * 10**18,
        failures: Optional[Dict[str, Exception]] = None,
    ):
        self.deployer_address = DEPLOYER
        self.balance = balance
        self.failures = failures or {}
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def get_balance(self) -> int:
        return self.balance

    def deploy(self, contract_name: str, *constructor_args: Any) -> ContractDeployment:
        self.calls.append((contract_name, constructor_args))
        if contract_name in self.failures:
            raise self.failures[contract_name]

        n = len(self.calls)
        return ContractDeployment(
            address=f"0x{n:040x}",
            transaction_hash=f"0x{n:064x}",
            block_number=1000 + n,
        )


@pytest.fixture
def make_backend():
    """Factory for RecordingBackend instances."""
    return RecordingBackend


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Create a Hardhat-style artifacts directory with all three contracts."""
    root = tmp_path / "artifacts"
    for name in CONTRACT_NAMES:
        contract_dir = root / "contracts" / f"{name}.sol"
        contract_dir.mkdir(parents=True)
        artifact = {
            "_format": "hh-sol-artifact-1",
            "contractName": name,
            "sourceName": f"contracts/{name}.sol",
            "abi": [{"type": "constructor", "inputs": [], "stateMutability": "nonpayable"}],
            "bytecode": "0x6080604052348015600f57600080fd5b50",
            "deployedBytecode": "0x6080604052600080fd",
        }
        (contract_dir / f"{name}.json").write_text(json.dumps(artifact))
    return root


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Manifest location inside a directory that does not exist yet."""
    return tmp_path / "deployments" / "somnia-testnet-deployment.json"


@pytest.fixture
def deployment_config(artifacts_dir: Path, manifest_path: Path) -> DeploymentConfig:
    """Configuration pointing at temporary artifacts and manifest paths."""
    return DeploymentConfig(
        private_key=TEST_PRIVATE_KEY,
        rpc_url="http://test-rpc.example.com",
        chain_id=50312,
        artifacts_dir=artifacts_dir,
        manifest_path=manifest_path,
    )
