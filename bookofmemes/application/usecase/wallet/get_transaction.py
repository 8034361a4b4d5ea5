"""Get wallet transaction use case."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from bookofmemes.domain.model import WalletTransaction
from bookofmemes.domain.service import WalletTransactionService
from bookofmemes.domain.value import TransactionId, TransactionStatus, TransactionType


class TransactionItem(BaseModel):
    """Wallet transaction in response."""

    id: str
    wallet_id: str | None
    type: TransactionType
    amount: Decimal
    description: str | None
    metadata: dict[str, Any] | None
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, transaction: WalletTransaction) -> "TransactionItem":
        return cls(
            id=transaction.id,
            wallet_id=transaction.wallet_id,
            type=transaction.type,
            amount=transaction.amount,
            description=transaction.description,
            metadata=transaction.metadata,
            status=transaction.status,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


class GetTransactionRequest(BaseModel):
    """Get transaction request."""

    transaction_id: str


class GetTransactionUseCase:
    """Use case for reading one wallet transaction."""

    def __init__(self, wallet_transaction_service: WalletTransactionService) -> None:
        self.wallet_transaction_service = wallet_transaction_service

    async def execute(self, request: GetTransactionRequest) -> TransactionItem:
        """Execute get transaction flow.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        transaction = await self.wallet_transaction_service.get_transaction(
            TransactionId(request.transaction_id)
        )
        return TransactionItem.from_domain(transaction)
