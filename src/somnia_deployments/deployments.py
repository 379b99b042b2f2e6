"""Deployment orchestration for somnia-deployments."""

import logging
import sys
from typing import Any, Dict, List

from web3 import Web3

from .backend import DeploymentBackend, Web3Backend
from .config import DeploymentConfig
from .constants import (
    BOUNDARY_NFT,
    CLAIM_VERIFICATION,
    CONTRACT_NAMES,
    DEFAULT_NETWORK,
    EVENT_FACTORY,
    LOW_BALANCE_THRESHOLD_WEI,
    NETWORK_CONFIG,
    SUMMARY_RULE,
)
from .exceptions import classify_error, remediation_hint
from .manifest import deployment_timestamp, save_manifest
from .types import ContractDeployment, DeploymentManifest

logger = logging.getLogger(__name__)


def explorer_url(network_config: Dict[str, Any], address: str) -> str:
    """Block explorer page for an address."""
    return f"{network_config['block_explorer_url']}/address/{address}"


def _deploy_one(
    backend: DeploymentBackend,
    network_config: Dict[str, Any],
    contract_name: str,
    *constructor_args: Any,
) -> ContractDeployment:
    logger.info("")
    logger.info(f"📦 Deploying {contract_name} contract...")
    deployment = backend.deploy(contract_name, *constructor_args)
    logger.info(f"✅ {contract_name} deployed to: {deployment.address}")
    logger.info(f"🔗 View on explorer: {explorer_url(network_config, deployment.address)}")
    return deployment


def deploy_contracts(config: DeploymentConfig, backend: DeploymentBackend) -> DeploymentManifest:
    """
    Deploy EventFactory, BoundaryNFT and ClaimVerification, in that order.

    Each deployment is confirmed before the next one is submitted. BoundaryNFT
    receives the EventFactory address as its constructor argument. Nothing is
    retried or rolled back: the first failure propagates and contracts that
    were already deployed stay live without being recorded.

    Args:
        config: Deployment configuration
        backend: Backend holding the signing account

    Returns:
        The manifest, already written to config.manifest_path
    """
    network_config = config.network_config

    logger.info(f"🚀 Starting deployment to {network_config['chain_name']}...")
    logger.info("📋 Network Configuration:")
    logger.info(f"  - Network: {network_config['chain_name']}")
    logger.info(f"  - Chain ID: {config.chain_id}")
    logger.info(f"  - RPC URL: {config.rpc_url}")
    logger.info(f"  - Explorer: {network_config['block_explorer_url']}")
    logger.info(f"  - Currency: {network_config['currency']}")

    deployer = backend.deployer_address
    logger.info(f"👤 Deploying contracts with account: {deployer}")

    balance = backend.get_balance()
    logger.info(
        f"💰 Account balance: {Web3.from_wei(balance, 'ether')} {network_config['currency']}"
    )
    if balance < LOW_BALANCE_THRESHOLD_WEI:
        logger.warning(
            f"⚠️  WARNING: Low balance! You may need more {network_config['currency']} "
            "for gas fees."
        )
        logger.warning(
            f"💧 Get testnet {network_config['currency']} from: {network_config['faucet_url']}"
        )

    logger.info("⛽ Using EIP-1559 gas pricing selected by the network client")

    contracts: Dict[str, ContractDeployment] = {}

    for contract_name in CONTRACT_NAMES:
        # BoundaryNFT is bound to the already confirmed EventFactory
        if contract_name == BOUNDARY_NFT:
            constructor_args = (contracts[EVENT_FACTORY].address,)
        else:
            constructor_args = ()
        contracts[contract_name] = _deploy_one(
            backend, network_config, contract_name, *constructor_args
        )

    logger.info("")
    logger.info("🔗 Contract relationships:")
    logger.info(f"  - {EVENT_FACTORY}: Standalone contract for event management")
    logger.info(f"  - {BOUNDARY_NFT}: Connected to {EVENT_FACTORY} via constructor")
    logger.info(f"  - {CLAIM_VERIFICATION}: Standalone contract for claim verification")

    manifest = DeploymentManifest(
        network=network_config["manifest_name"],
        chain_id=config.chain_id,
        deployer=deployer,
        deployment_time=deployment_timestamp(),
        contracts=contracts,
    )
    save_manifest(manifest, config.manifest_path)

    logger.info("")
    logger.info("🎉 Deployment completed successfully!")
    logger.info(f"📄 Deployment data saved to: {config.manifest_path}")

    return manifest


def print_summary(manifest: DeploymentManifest, config: DeploymentConfig) -> None:
    """Print the human-readable deployment summary to stdout."""
    network_config = config.network_config
    width = max(len(name) for name in manifest.contracts) + 1

    print()
    print("📋 DEPLOYMENT SUMMARY:")
    print(SUMMARY_RULE)
    print(f"🌐 Network: {network_config['chain_name']} (Chain ID: {manifest.chain_id})")
    print(f"👤 Deployer: {manifest.deployer}")
    print(f"⏰ Time: {manifest.deployment_time}")
    print()
    print("📦 CONTRACT ADDRESSES:")
    for name, deployment in manifest.contracts.items():
        print(f"  {name + ':':<{width}} {deployment.address}")
    print()
    print("🔗 EXPLORER LINKS:")
    for name, deployment in manifest.contracts.items():
        print(f"  {name + ':':<{width}} {explorer_url(network_config, deployment.address)}")
    print()
    print("💡 NEXT STEPS:")
    print("  1. Update your app configuration with these addresses")
    print(f"  2. Test contract interactions on {network_config['chain_name']}")
    print(
        f"  3. Get {network_config['currency']} from faucet if needed: "
        f"{network_config['faucet_url']}"
    )
    print(SUMMARY_RULE)


def _report_failure(error: Exception, network_config: Dict[str, Any]) -> None:
    logger.error(f"❌ Deployment failed: {error!r}")
    kind = classify_error(error)
    logger.error(f"🔍 Error details [{kind.value}]: {error}")

    hint = remediation_hint(kind, network_config)
    if hint is not None:
        logger.error(f"💡 Solution: {hint}")


def run(config: DeploymentConfig, backend: DeploymentBackend) -> int:
    """
    Run the full deployment and report the outcome.

    Args:
        config: Deployment configuration
        backend: Backend holding the signing account

    Returns:
        Process exit status: 0 on success, 1 if anything failed
    """
    try:
        manifest = deploy_contracts(config, backend)
        print_summary(manifest, config)
    except Exception as e:
        _report_failure(e, config.network_config)
        return 1

    return 0


def console_handlers() -> List[logging.Handler]:
    """
    Handlers for terminal output.

    Progress and warnings go to stdout, errors to stderr.
    """
    formatter = logging.Formatter("%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    return [stdout_handler, stderr_handler]


def main() -> int:
    """Deploy to the network configured in the environment."""
    logging.basicConfig(level=logging.INFO, handlers=console_handlers())

    try:
        config = DeploymentConfig.from_env()
        backend = Web3Backend.from_config(config)
    except Exception as e:
        _report_failure(e, NETWORK_CONFIG[DEFAULT_NETWORK])
        return 1

    return run(config, backend)
