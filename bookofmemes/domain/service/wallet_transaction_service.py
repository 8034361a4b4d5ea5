"""Wallet transaction domain service."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

import logfire

from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.model import WalletTransaction
from bookofmemes.domain.repository import Query, RecordStore, eq
from bookofmemes.domain.value import (
    Collection,
    TransactionId,
    TransactionStatus,
    TransactionType,
    WalletId,
)

from .base import Service


class WalletTransactionService(Service):
    """Domain service for wallet transaction bookkeeping."""

    def __init__(self, record_store: RecordStore) -> None:
        """Initialize wallet transaction service.

        Args:
            record_store: Record store
        """
        self.record_store = record_store

    async def list_transactions(self) -> list[WalletTransaction]:
        """All transactions, newest first."""
        rows = await self.record_store.find(
            Collection.WALLET_TRANSACTIONS,
            Query().order("created_at", descending=True),
        )
        return [WalletTransaction.model_validate(row) for row in rows]

    async def get_transaction(self, transaction_id: TransactionId) -> WalletTransaction:
        """Get a transaction by ID.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        row = await self.record_store.find_one(
            Collection.WALLET_TRANSACTIONS, Query.where(eq("id", transaction_id))
        )
        if row is None:
            logfire.warn("Transaction not found", transaction_id=transaction_id)
            raise NotFoundError("Transaction", transaction_id)
        return WalletTransaction.model_validate(row)

    async def create_transaction(
        self,
        type: TransactionType,
        amount: Decimal,
        wallet_id: Optional[WalletId] = None,
        description: Optional[str] = None,
        status: TransactionStatus = TransactionStatus.PENDING,
        metadata: Optional[dict[str, Any]] = None,
    ) -> WalletTransaction:
        """Record a new transaction."""
        with logfire.span(
            "wallet_transaction_service.create_transaction",
            wallet_id=wallet_id,
            type=type.value,
        ):
            now = datetime.now(timezone.utc)
            row = await self.record_store.insert(
                Collection.WALLET_TRANSACTIONS,
                {
                    "wallet_id": wallet_id,
                    "type": type,
                    "amount": amount,
                    "description": description,
                    "status": status,
                    "metadata": metadata,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            transaction = WalletTransaction.model_validate(row)
            logfire.info("Transaction created", transaction_id=transaction.id)
            return transaction

    async def update_transaction(
        self, transaction_id: TransactionId, changes: dict[str, Any]
    ) -> WalletTransaction:
        """Apply a partial update and bump ``updated_at``.

        Args:
            transaction_id: Transaction ID
            changes: Column values to overwrite

        Raises:
            NotFoundError: If the transaction does not exist
        """
        with logfire.span(
            "wallet_transaction_service.update_transaction",
            transaction_id=transaction_id,
            fields=sorted(changes),
        ):
            rows = await self.record_store.update(
                Collection.WALLET_TRANSACTIONS,
                Query.where(eq("id", transaction_id)),
                {**changes, "updated_at": datetime.now(timezone.utc)},
            )
            if not rows:
                logfire.warn("Transaction not found", transaction_id=transaction_id)
                raise NotFoundError("Transaction", transaction_id)
            return WalletTransaction.model_validate(rows[0])

    async def delete_transaction(self, transaction_id: TransactionId) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        with logfire.span(
            "wallet_transaction_service.delete_transaction",
            transaction_id=transaction_id,
        ):
            deleted = await self.record_store.delete(
                Collection.WALLET_TRANSACTIONS, Query.where(eq("id", transaction_id))
            )
            if not deleted:
                logfire.warn("Transaction not found", transaction_id=transaction_id)
                raise NotFoundError("Transaction", transaction_id)
