"""Delete wallet transaction use case."""

from bookofmemes.domain.service import WalletTransactionService
from bookofmemes.domain.value import TransactionId


class DeleteTransactionUseCase:
    """Use case for deleting a wallet transaction."""

    def __init__(self, wallet_transaction_service: WalletTransactionService) -> None:
        self.wallet_transaction_service = wallet_transaction_service

    async def execute(self, transaction_id: str) -> None:
        """Execute delete transaction flow.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        await self.wallet_transaction_service.delete_transaction(
            TransactionId(transaction_id)
        )
