# src/dlmm_mcp/clients/solana/wallet.py
import base64
import binascii
import logging
from typing import Optional

from solana.rpc.api import Client
from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.message import to_bytes_versioned
from solders.transaction import VersionedTransaction

logger = logging.getLogger(__name__)


def load_keypair(private_key_b64: Optional[str]) -> Optional[Keypair]:
    """Decode a base64 encoded 64-byte secret key.

    Returns None (and logs) when no key is given or it cannot be decoded.
    """
    if not private_key_b64:
        return None
    try:
        wallet = Keypair.from_bytes(base64.b64decode(private_key_b64, validate=True))
    except (binascii.Error, ValueError) as e:
        logger.error("Invalid private key format. Expected base64 encoded private key: %s", e)
        return None
    logger.info("Wallet loaded: %s", wallet.pubkey())
    return wallet


def sign_transaction(tx_b64: str, wallet: Keypair) -> bytes:
    """Sign a base64 serialized transaction and return the wire bytes."""
    vtx = VersionedTransaction.from_bytes(base64.b64decode(tx_b64))
    sig = wallet.sign_message(to_bytes_versioned(vtx.message))

    pub = wallet.pubkey()
    num_signers = vtx.message.header.num_required_signatures
    signers = list(vtx.message.account_keys)[:num_signers]
    if pub not in signers:
        raise ValueError(f"Wallet {pub} is not a required signer of this transaction")

    sigs = list(vtx.signatures)
    sigs[signers.index(pub)] = sig
    vtx.signatures = sigs
    return bytes(vtx)


class TransactionSender:
    """Submits signed transactions and waits for confirmation."""

    def __init__(self, rpc_url: str, timeout: float = 30.0, max_retries: int = 3,
                 client: Optional[Client] = None):
        self.rpc_url = rpc_url
        self.max_retries = max_retries
        self.client = client or Client(rpc_url, timeout=timeout)

    def send_and_confirm(self, signed_tx: bytes) -> str:
        resp = self.client.send_raw_transaction(
            signed_tx,
            opts=TxOpts(skip_preflight=False, preflight_commitment=Confirmed, max_retries=self.max_retries),
        )
        signature = resp.value
        logger.info("Transaction submitted: %s", signature)

        conf = self.client.confirm_transaction(signature, commitment=Confirmed)
        statuses = getattr(conf, "value", None) or []
        status = statuses[0] if statuses else None
        if status is not None and status.err is not None:
            raise RuntimeError(f"Transaction {signature} failed: {status.err}")
        return str(signature)
