"""Create wallet transaction use case."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from bookofmemes.domain.service import WalletTransactionService
from bookofmemes.domain.value import TransactionStatus, TransactionType, WalletId

from .get_transaction import TransactionItem


class CreateTransactionRequest(BaseModel):
    """Create transaction request."""

    wallet_id: str | None = None
    type: TransactionType
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    description: str | None = None
    status: TransactionStatus = TransactionStatus.PENDING
    metadata: dict[str, Any] | None = None


class CreateTransactionUseCase:
    """Use case for recording a wallet transaction."""

    def __init__(self, wallet_transaction_service: WalletTransactionService) -> None:
        """Initialize create transaction use case.

        Args:
            wallet_transaction_service: Wallet transaction domain service
        """
        self.wallet_transaction_service = wallet_transaction_service

    async def execute(self, request: CreateTransactionRequest) -> TransactionItem:
        transaction = await self.wallet_transaction_service.create_transaction(
            type=request.type,
            amount=request.amount,
            wallet_id=WalletId(request.wallet_id) if request.wallet_id else None,
            description=request.description,
            status=request.status,
            metadata=request.metadata,
        )
        return TransactionItem.from_domain(transaction)
