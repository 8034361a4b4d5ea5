"""List wallet transactions use case."""

from bookofmemes.domain.service import WalletTransactionService

from .get_transaction import TransactionItem


class ListTransactionsUseCase:
    """Use case for listing wallet transactions, newest first."""

    def __init__(self, wallet_transaction_service: WalletTransactionService) -> None:
        self.wallet_transaction_service = wallet_transaction_service

    async def execute(self) -> list[TransactionItem]:
        transactions = await self.wallet_transaction_service.list_transactions()
        return [TransactionItem.from_domain(t) for t in transactions]
