"""Unit tests for environment-driven configuration."""

from pathlib import Path

import pytest

from somnia_deployments.config import DeploymentConfig
from somnia_deployments.exceptions import ConfigurationError

KEY = "0x" + "11" * 32


class TestFromEnv:
    """Test DeploymentConfig.from_env."""

    def test_defaults(self, tmp_path: Path, monkeypatch):
        """Test that only the private key is required."""
        monkeypatch.chdir(tmp_path)

        config = DeploymentConfig.from_env(environ={"DEPLOYER_PRIVATE_KEY": KEY})

        assert config.private_key == KEY
        assert config.rpc_url == "https://dream-rpc.somnia.network"
        assert config.chain_id == 50312
        assert config.network == "somnia-testnet"
        assert config.artifacts_dir == tmp_path / "artifacts"
        assert config.manifest_path == tmp_path / "deployments" / "somnia-testnet-deployment.json"

    def test_overrides(self, tmp_path: Path):
        environ = {
            "DEPLOYER_PRIVATE_KEY": KEY,
            "SOMNIA_RPC_URL": "http://localhost:8545",
            "ARTIFACTS_DIR": str(tmp_path / "build"),
            "DEPLOYMENT_MANIFEST_PATH": str(tmp_path / "out.json"),
        }

        config = DeploymentConfig.from_env(environ=environ)

        assert config.rpc_url == "http://localhost:8545"
        assert config.artifacts_dir == tmp_path / "build"
        assert config.manifest_path == tmp_path / "out.json"

    def test_private_key_fallback(self):
        """Test that $PRIVATE_KEY is used when $DEPLOYER_PRIVATE_KEY is unset."""
        config = DeploymentConfig.from_env(environ={"PRIVATE_KEY": KEY})

        assert config.private_key == KEY

    def test_deployer_key_takes_precedence(self):
        config = DeploymentConfig.from_env(
            environ={"DEPLOYER_PRIVATE_KEY": KEY, "PRIVATE_KEY": "0x" + "22" * 32}
        )

        assert config.private_key == KEY

    def test_missing_private_key_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DeploymentConfig.from_env(environ={})

        assert "DEPLOYER_PRIVATE_KEY" in str(exc_info.value)

    def test_empty_private_key_raises(self):
        with pytest.raises(ConfigurationError):
            DeploymentConfig.from_env(environ={"DEPLOYER_PRIVATE_KEY": ""})

    def test_unknown_network_raises(self):
        with pytest.raises(ConfigurationError):
            DeploymentConfig.from_env(network="mainnet", environ={"PRIVATE_KEY": KEY})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("DEPLOYER_PRIVATE_KEY", KEY)
        monkeypatch.setenv("SOMNIA_RPC_URL", "http://rpc.example.com")

        config = DeploymentConfig.from_env()

        assert config.rpc_url == "http://rpc.example.com"

    def test_private_key_hidden_from_repr(self):
        config = DeploymentConfig.from_env(environ={"PRIVATE_KEY": KEY})

        assert KEY not in repr(config)
