"""Wallet transaction use cases."""

from .create_transaction import CreateTransactionRequest, CreateTransactionUseCase
from .delete_transaction import DeleteTransactionUseCase
from .get_transaction import GetTransactionRequest, GetTransactionUseCase, TransactionItem
from .list_transactions import ListTransactionsUseCase
from .update_transaction import UpdateTransactionRequest, UpdateTransactionUseCase

__all__ = [
    "CreateTransactionRequest",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionRequest",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
    "TransactionItem",
    "UpdateTransactionRequest",
    "UpdateTransactionUseCase",
]
