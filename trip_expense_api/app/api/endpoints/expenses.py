"""
Expense endpoints.

Expenses are recorded against an existing trip request, listed newest
first, totalled per trip and deleted individually.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from trip_expense_api.app.core.http import parse_body
from trip_expense_api.app.core.store import DocumentStore, get_store
from trip_expense_api.app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseTotal
from trip_expense_api.app.services.expense_service import ExpenseService

router = APIRouter()


@router.get("", response_model=None, responses={200: {"model": List[ExpenseRead]}})
async def list_expenses(
    trip_request_id: Optional[str] = Query(None, alias="tripRequestId"),
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """Return all expenses in stored order, optionally for one trip request."""
    return await ExpenseService.list_expenses(store, trip_request_id=trip_request_id)


@router.post(
    "",
    response_model=ExpenseRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    request: Request,
    store: DocumentStore = Depends(get_store),
) -> ExpenseRead:
    """Record an expense.

    ``tripRequestId``, ``category``, ``amount``, ``date`` and
    ``description`` are required (``amount`` may be 0); ``receipt`` is
    optional.  The trip request must exist, otherwise 400 is returned.
    """
    data = await parse_body(request, ExpenseCreate)
    try:
        return await ExpenseService.create_expense(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/totals", response_model=List[ExpenseTotal])
async def expense_totals(store: DocumentStore = Depends(get_store)) -> List[ExpenseTotal]:
    """Return the expense total and count for every trip request."""
    return await ExpenseService.totals_by_trip(store)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: str,
    store: DocumentStore = Depends(get_store),
) -> None:
    """Delete an expense.  Returns 404 if it does not exist."""
    try:
        await ExpenseService.delete_expense(store, expense_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
