"""Data types and dataclasses for somnia-deployments."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ContractArtifact:
    """Compiled contract ready for deployment."""

    name: str
    abi: List[Dict[str, Any]]
    bytecode: str  # 0x-prefixed creation bytecode


@dataclass
class ContractDeployment:
    """Result of one confirmed contract deployment."""

    address: str  # Checksummed address
    transaction_hash: str  # 0x-prefixed
    block_number: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "transactionHash": self.transaction_hash,
            "blockNumber": self.block_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContractDeployment":
        return cls(
            address=data["address"],
            transaction_hash=data["transactionHash"],
            block_number=data["blockNumber"],
        )


@dataclass
class DeploymentManifest:
    """Record of one deployment run, written once to disk."""

    network: str  # e.g., "somniaTestnet"
    chain_id: int
    deployer: str
    deployment_time: str  # ISO-8601, UTC
    contracts: Dict[str, ContractDeployment] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the on-disk JSON shape.

        Contract entries keep their insertion (deployment) order.
        """
        return {
            "network": self.network,
            "chainId": self.chain_id,
            "deployer": self.deployer,
            "deploymentTime": self.deployment_time,
            "contracts": {
                name: deployment.to_dict() for name, deployment in self.contracts.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploymentManifest":
        return cls(
            network=data["network"],
            chain_id=data["chainId"],
            deployer=data["deployer"],
            deployment_time=data["deploymentTime"],
            contracts={
                name: ContractDeployment.from_dict(entry)
                for name, entry in data.get("contracts", {}).items()
            },
        )
