METEORA_API_URL = "https://dlmm-api.meteora.ag"
DLMM_SDK_URL = "http://localhost:3000"
DEFAULT_RPC_URL = "https://solana-rpc.publicnode.com"
SOLSCAN_TX_URL = "https://solscan.io/tx/{signature}"

DEFAULT_MAX_RETRIES = 3
DEFAULT_RPC_TIMEOUT_MS = 30000
DEFAULT_POOL_LIMIT = 10

# SDK bridge routes (ts-client server)
SDK_ROUTES = {
    "positions_by_user": "/dlmm/get-all-lb-pair-positions-by-user",
    "position": "/dlmm/get-position",
    "active_bin": "/dlmm/get-active-bin",
    "claim_swap_fee": "/dlmm/claim-swap-fee",
}

NO_POSITIONS_MESSAGE = "No DLMM positions found for this wallet."
WALLET_NOT_CONFIGURED_MESSAGE = (
    "Error: Wallet not configured. Please provide 'walletPrivateKey' in the "
    "server configuration to perform transactions."
)
UNRESTRICTED_RPC_NOTE = (
    "Note: This operation requires an unrestricted RPC endpoint. "
    "Consider upgrading to a paid RPC provider."
)
FEE_CALCULATION_NOTE = "Fee calculation requires the DLMM SDK bridge with an unrestricted RPC endpoint"
FEE_CALCULATION_SUGGESTION = "Use a paid RPC provider (Helius, QuickNode) for fee calculations"
