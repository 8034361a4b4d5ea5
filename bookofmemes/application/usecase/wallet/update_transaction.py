"""Update wallet transaction use case."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from bookofmemes.domain.service import WalletTransactionService
from bookofmemes.domain.value import TransactionId, TransactionStatus, TransactionType

from .get_transaction import TransactionItem


class UpdateTransactionRequest(BaseModel):
    """Partial update. Only fields present in the request body are written."""

    type: TransactionType | None = None
    amount: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    description: str | None = None
    status: TransactionStatus | None = None
    metadata: dict[str, Any] | None = None


class UpdateTransactionUseCase:
    """Use case for editing a wallet transaction."""

    def __init__(self, wallet_transaction_service: WalletTransactionService) -> None:
        self.wallet_transaction_service = wallet_transaction_service

    async def execute(
        self, transaction_id: str, request: UpdateTransactionRequest
    ) -> TransactionItem:
        """Execute update transaction flow.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        changes = request.model_dump(exclude_unset=True)
        for required in ("type", "amount", "status"):
            # These columns are not nullable
            if required in changes and changes[required] is None:
                del changes[required]

        transaction = await self.wallet_transaction_service.update_transaction(
            TransactionId(transaction_id), changes
        )
        return TransactionItem.from_domain(transaction)
