"""Wallet transaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from bookofmemes.application.usecase.wallet import (
    CreateTransactionRequest,
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionRequest,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    TransactionItem,
    UpdateTransactionRequest,
    UpdateTransactionUseCase,
)

router = APIRouter(
    prefix="/wallet-transactions", tags=["wallet"], route_class=DishkaRoute
)


@router.get("", response_model=list[TransactionItem], summary="Fetch transactions")
async def list_transactions(
    list_transactions_use_case: FromDishka[ListTransactionsUseCase],
) -> list[TransactionItem]:
    """All wallet transactions, newest first."""
    return await list_transactions_use_case.execute()


@router.get(
    "/{transaction_id}", response_model=TransactionItem, summary="Fetch transaction"
)
async def get_transaction(
    transaction_id: str,
    get_transaction_use_case: FromDishka[GetTransactionUseCase],
) -> TransactionItem:
    """One wallet transaction."""
    return await get_transaction_use_case.execute(
        GetTransactionRequest(transaction_id=transaction_id)
    )


@router.post(
    "",
    response_model=TransactionItem,
    status_code=status.HTTP_201_CREATED,
    summary="Create transaction",
)
async def create_transaction(
    request: CreateTransactionRequest,
    create_transaction_use_case: FromDishka[CreateTransactionUseCase],
) -> TransactionItem:
    """Record a wallet transaction."""
    return await create_transaction_use_case.execute(request)


@router.put(
    "/{transaction_id}", response_model=TransactionItem, summary="Update transaction"
)
async def update_transaction(
    transaction_id: str,
    request: UpdateTransactionRequest,
    update_transaction_use_case: FromDishka[UpdateTransactionUseCase],
) -> TransactionItem:
    """Partially update a wallet transaction."""
    return await update_transaction_use_case.execute(transaction_id, request)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete transaction",
)
async def delete_transaction(
    transaction_id: str,
    delete_transaction_use_case: FromDishka[DeleteTransactionUseCase],
) -> Response:
    """Delete a wallet transaction."""
    await delete_transaction_use_case.execute(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
