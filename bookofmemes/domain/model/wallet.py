"""Wallet transaction entity."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import (
    TransactionId,
    TransactionStatus,
    TransactionType,
    WalletId,
)


class WalletTransaction(DomainModel):
    """A movement of funds on a wallet.

    Owned by exactly one wallet; removed with it.
    """

    id: TransactionId
    wallet_id: Optional[WalletId] = None
    type: TransactionType
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    status: TransactionStatus = TransactionStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
