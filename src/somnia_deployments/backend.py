"""Transaction-submission backends for somnia-deployments."""

from pathlib import Path
from typing import Any, Protocol, Union

from web3 import Web3

from .artifacts import load_artifact
from .config import DeploymentConfig
from .exceptions import ConfigurationError, DeploymentError, translate_error
from .rpc import get_chain_id
from .types import ContractDeployment


class DeploymentBackend(Protocol):
    """Anything that can deploy contracts on behalf of one signing account."""

    deployer_address: str

    def get_balance(self) -> int:
        """Deployer balance in wei."""
        ...

    def deploy(self, contract_name: str, *constructor_args: Any) -> ContractDeployment:
        """Deploy a contract and block until the transaction is confirmed."""
        ...


class Web3Backend:
    """Deploys Hardhat-compiled contracts through web3 with a local signing key."""

    def __init__(self, w3: Web3, account: Any, artifacts_dir: Union[Path, str], chain_id: int):
        """
        Args:
            w3: Connected Web3 instance
            account: eth_account LocalAccount used to sign transactions
            artifacts_dir: Hardhat artifacts directory
            chain_id: Chain id embedded in signed transactions
        """
        self._w3 = w3
        self._account = account
        self._artifacts_dir = Path(artifacts_dir)
        self._chain_id = chain_id

    @classmethod
    def from_config(cls, config: DeploymentConfig) -> "Web3Backend":
        """
        Connect to the configured RPC endpoint.

        Raises:
            NetworkError: If the endpoint cannot be reached
            ConfigurationError: If the endpoint serves a different chain, or the
                private key is invalid
        """
        remote_chain_id = get_chain_id(config.rpc_url)
        if remote_chain_id != config.chain_id:
            raise ConfigurationError(
                f"RPC endpoint {config.rpc_url} serves chain {remote_chain_id}, "
                f"expected {config.chain_id} ({config.network_config['chain_name']})"
            )

        w3 = Web3(Web3.HTTPProvider(config.rpc_url))
        try:
            account = w3.eth.account.from_key(config.private_key)
        except Exception as e:
            raise ConfigurationError(f"Invalid deployer private key: {e}") from e

        return cls(w3, account, config.artifacts_dir, config.chain_id)

    @property
    def deployer_address(self) -> str:
        return self._account.address

    def get_balance(self) -> int:
        try:
            return self._w3.eth.get_balance(self.deployer_address)
        except Exception as e:
            raise translate_error(e, "Failed to query deployer balance") from e

    def deploy(self, contract_name: str, *constructor_args: Any) -> ContractDeployment:
        """
        Deploy a contract and wait for its receipt.

        Gas limit and EIP-1559 fees are filled in by web3 when the transaction
        is built. Waiting uses web3's default receipt timeout.

        Args:
            contract_name: Name of a compiled contract in the artifacts directory
            *constructor_args: Constructor arguments

        Returns:
            ContractDeployment for the confirmed transaction

        Raises:
            ArtifactNotFoundError: If the contract has not been compiled
            DefectiveArtifactError: If the artifact cannot be deployed
            InsufficientFundsError, NetworkError, GasError: Classified web3 failures
            DeploymentError: If the transaction reverts or any other failure occurs
        """
        artifact = load_artifact(self._artifacts_dir, contract_name)

        try:
            factory = self._w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            tx = factory.constructor(*constructor_args).build_transaction(
                {
                    "from": self.deployer_address,
                    "nonce": self._w3.eth.get_transaction_count(self.deployer_address, "pending"),
                    "chainId": self._chain_id,
                }
            )
            signed_tx = self._account.sign_transaction(tx)
            tx_hash = self._w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            receipt = self._w3.eth.wait_for_transaction_receipt(tx_hash)
        except Exception as e:
            raise translate_error(e, f"Failed to deploy {contract_name}") from e

        transaction_hash = Web3.to_hex(tx_hash)

        if receipt["status"] != 1:
            raise DeploymentError(
                f"{contract_name} deployment transaction {transaction_hash} reverted"
            )

        address = receipt.get("contractAddress")
        if not address:
            raise DeploymentError(
                f"Receipt for {transaction_hash} does not contain a contract address"
            )

        return ContractDeployment(
            address=address,
            transaction_hash=transaction_hash,
            block_number=receipt["blockNumber"],
        )
