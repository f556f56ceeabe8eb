"""Transaction submission.

TransactionSubmitter is the collaborator the SDK hands finished
instructions to. RpcTransactionSubmitter signs a v0 transaction with a
local keypair and sends it through the RPC node.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import structlog
from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.transaction import VersionedTransaction

from pumpswap.models.trade import TransactionResult

logger = structlog.get_logger()


class TransactionSubmitter(Protocol):
    """Submits instructions as one signed transaction."""

    @property
    def payer(self) -> str:
        """Address paying fees and signing (base58)."""
        ...

    async def submit(
        self, instructions: Sequence[Instruction], description: str = "Transaction"
    ) -> TransactionResult:
        """Sign and send; failures are reported in the result, not raised."""
        ...


class TransactionSender(Protocol):
    """RPC calls needed to land a transaction."""

    async def get_latest_blockhash(self) -> str: ...

    async def send_transaction(
        self, raw_transaction: bytes, skip_preflight: bool = False
    ) -> str: ...


class RpcTransactionSubmitter:
    """Signs with a local keypair and sends via JSON-RPC.

    Args:
        rpc: RPC client providing blockhash and sendTransaction
        signer: Fee payer and signing keypair
        skip_preflight: Skip the node's simulation before broadcasting
    """

    def __init__(
        self, rpc: TransactionSender, signer: Keypair, skip_preflight: bool = False
    ) -> None:
        self.rpc = rpc
        self.signer = signer
        self.skip_preflight = skip_preflight

    @property
    def payer(self) -> str:
        return str(self.signer.pubkey())

    def build_transaction(
        self, instructions: Sequence[Instruction], blockhash: str
    ) -> VersionedTransaction:
        """Compile and sign a v0 transaction for `instructions`."""
        message = MessageV0.try_compile(
            self.signer.pubkey(),
            list(instructions),
            [],
            Hash.from_string(blockhash),
        )
        return VersionedTransaction(message, [self.signer])

    async def submit(
        self, instructions: Sequence[Instruction], description: str = "Transaction"
    ) -> TransactionResult:
        logger.info("sending_transaction", description=description, instructions=len(instructions))
        try:
            blockhash = await self.rpc.get_latest_blockhash()
            transaction = self.build_transaction(instructions, blockhash)
            signature = await self.rpc.send_transaction(
                bytes(transaction), skip_preflight=self.skip_preflight
            )
        except Exception as e:
            logger.exception("transaction_failed", description=description, error=str(e))
            return TransactionResult.failed(str(e))

        logger.info("transaction_sent", description=description, signature=signature)
        return TransactionResult.ok(signature)
