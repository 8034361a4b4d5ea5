"""Strongly typed identifiers for Book of Memes entities.

The hosted database hands identifiers back as UUID strings. We keep them
as opaque strings and use NewType so different entity IDs don't get mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
ItemId = NewType("ItemId", str)
CommentId = NewType("CommentId", str)
WalletId = NewType("WalletId", str)
TransactionId = NewType("TransactionId", str)
