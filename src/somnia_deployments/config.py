"""Deployment configuration for somnia-deployments."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_NETWORK, NETWORK_CONFIG
from .exceptions import ConfigurationError
from .paths import get_default_artifacts_dir, get_manifest_path

PRIVATE_KEY_ENVS = ("DEPLOYER_PRIVATE_KEY", "PRIVATE_KEY")


@dataclass
class DeploymentConfig:
    """Everything a deployment run needs to know about its environment."""

    private_key: str = field(repr=False)
    rpc_url: str
    chain_id: int
    artifacts_dir: Path
    manifest_path: Path
    network: str = DEFAULT_NETWORK

    @property
    def network_config(self) -> Dict[str, Any]:
        return NETWORK_CONFIG[self.network]

    @classmethod
    def from_env(
        cls,
        network: str = DEFAULT_NETWORK,
        environ: Optional[Dict[str, str]] = None,
    ) -> "DeploymentConfig":
        """
        Build a configuration from environment variables.

        Reads:
        - $SOMNIA_RPC_URL (defaults to the public Somnia Testnet endpoint)
        - $DEPLOYER_PRIVATE_KEY, falling back to $PRIVATE_KEY (required)
        - $ARTIFACTS_DIR (defaults to ./artifacts)
        - $DEPLOYMENT_MANIFEST_PATH (defaults to ./deployments/somnia-testnet-deployment.json)

        Args:
            network: Key into NETWORK_CONFIG
            environ: Mapping to read instead of os.environ

        Returns:
            DeploymentConfig

        Raises:
            ConfigurationError: If the network is unknown or no private key is set
        """
        if environ is None:
            environ = dict(os.environ)

        if network not in NETWORK_CONFIG:
            raise ConfigurationError(f"Unknown network: {network}")
        network_config = NETWORK_CONFIG[network]

        private_key = None
        for env_name in PRIVATE_KEY_ENVS:
            if environ.get(env_name):
                private_key = environ[env_name]
                break

        if private_key is None:
            raise ConfigurationError(
                "Deployer key required: set $DEPLOYER_PRIVATE_KEY or $PRIVATE_KEY "
                "environment variable"
            )

        rpc_url = environ.get(network_config["default_rpc_env"]) or network_config["default_rpc_url"]

        artifacts_dir = environ.get("ARTIFACTS_DIR")
        manifest_path = environ.get("DEPLOYMENT_MANIFEST_PATH")

        return cls(
            private_key=private_key,
            rpc_url=rpc_url,
            chain_id=network_config["chain_id"],
            artifacts_dir=(
                Path(artifacts_dir).absolute() if artifacts_dir else get_default_artifacts_dir()
            ),
            manifest_path=(
                Path(manifest_path).absolute()
                if manifest_path
                else get_manifest_path(network=network)
            ),
            network=network,
        )
