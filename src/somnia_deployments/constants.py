"""Configuration constants for somnia-deployments."""

# Contracts in deployment order
EVENT_FACTORY = "EventFactory"
BOUNDARY_NFT = "BoundaryNFT"
CLAIM_VERIFICATION = "ClaimVerification"

CONTRACT_NAMES = (EVENT_FACTORY, BOUNDARY_NFT, CLAIM_VERIFICATION)

DEFAULT_NETWORK = "somnia-testnet"

# Network configuration
# manifest_name is the value written to the "network" field of the manifest
NETWORK_CONFIG = {
    "somnia-testnet": {
        "chain_id": 50312,
        "chain_name": "Somnia Testnet",
        "manifest_name": "somniaTestnet",
        "currency": "STT",
        "default_rpc_url": "https://dream-rpc.somnia.network",
        "default_rpc_env": "SOMNIA_RPC_URL",
        "block_explorer_url": "https://shannon-explorer.somnia.network",
        "faucet_url": "https://testnet.somnia.network/",
        "manifest_filename": "somnia-testnet-deployment.json",
    },
}

# 0.1 units of native currency, in wei
LOW_BALANCE_THRESHOLD_WEI = 10**17

SUMMARY_RULE = "=" * 50
