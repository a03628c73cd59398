import base64
from unittest.mock import Mock

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.message import Message, to_bytes_versioned
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import Transaction, VersionedTransaction

from dlmm_mcp.clients.solana.wallet import TransactionSender, load_keypair, sign_transaction


def _unsigned_tx_b64(payer: Keypair) -> str:
    ix = transfer(TransferParams(from_pubkey=payer.pubkey(), to_pubkey=Keypair().pubkey(), lamports=1))
    message = Message.new_with_blockhash([ix], payer.pubkey(), Hash.default())
    return base64.b64encode(bytes(Transaction.new_unsigned(message))).decode()


def test_load_keypair_roundtrip():
    wallet = Keypair()
    loaded = load_keypair(base64.b64encode(bytes(wallet)).decode())
    assert loaded is not None
    assert loaded.pubkey() == wallet.pubkey()


def test_load_keypair_missing():
    assert load_keypair(None) is None
    assert load_keypair("") is None


def test_load_keypair_invalid_base64():
    assert load_keypair("not base64 at all!") is None


def test_load_keypair_wrong_length():
    assert load_keypair(base64.b64encode(b"short").decode()) is None


def test_sign_transaction_fills_owner_slot():
    wallet = Keypair()

    signed = VersionedTransaction.from_bytes(sign_transaction(_unsigned_tx_b64(wallet), wallet))

    assert signed.signatures[0] != Signature.default()
    assert signed.signatures[0] == wallet.sign_message(to_bytes_versioned(signed.message))


def test_sign_transaction_rejects_foreign_wallet():
    with pytest.raises(ValueError, match="not a required signer"):
        sign_transaction(_unsigned_tx_b64(Keypair()), Keypair())


def test_send_and_confirm():
    signature = Signature.default()
    client = Mock()
    client.send_raw_transaction.return_value = Mock(value=signature)
    client.confirm_transaction.return_value = Mock(value=[Mock(err=None)])

    sender = TransactionSender("https://rpc.example.org", max_retries=2, client=client)

    assert sender.send_and_confirm(b"\x01\x02") == str(signature)
    assert client.send_raw_transaction.call_args.args == (b"\x01\x02",)
    assert client.send_raw_transaction.call_args.kwargs["opts"].max_retries == 2
    client.confirm_transaction.assert_called_once()


def test_send_and_confirm_failed_transaction():
    client = Mock()
    client.send_raw_transaction.return_value = Mock(value=Signature.default())
    client.confirm_transaction.return_value = Mock(value=[Mock(err="InstructionError")])

    with pytest.raises(RuntimeError, match="InstructionError"):
        TransactionSender("https://rpc.example.org", client=client).send_and_confirm(b"\x01")
