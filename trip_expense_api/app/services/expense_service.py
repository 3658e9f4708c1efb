"""
Service layer for expenses.

Expenses are reimbursable cost items recorded against a trip request.
The referenced trip request must exist when the expense is created;
it is not checked again afterwards.  Whether the trip has been
approved is not enforced here, that restriction belongs to the client.
Listing returns the stored records unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from trip_expense_api.app.core.store import DocumentStore, EXPENSES, TRIP_REQUESTS, generate_id
from trip_expense_api.app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseTotal


class ExpenseService:
    """Service class for recording, listing, totalling and deleting expenses."""

    @classmethod
    async def list_expenses(
        cls,
        store: DocumentStore,
        trip_request_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return expenses in stored order, optionally for one trip request."""
        records = store.load()[EXPENSES]
        if trip_request_id is not None:
            records = [r for r in records if r.get("tripRequestId") == trip_request_id]
        return records

    @classmethod
    async def create_expense(cls, store: DocumentStore, data: ExpenseCreate) -> ExpenseRead:
        """Record a new expense and return it.

        Raises
        ------
        ValueError
            If ``data.trip_request_id`` does not match a stored trip
            request.  Nothing is written in that case.
        """
        logger = logging.getLogger(__name__)
        with store.transaction() as document:
            if not any(r.get("id") == data.trip_request_id for r in document[TRIP_REQUESTS]):
                raise ValueError("Trip request not found")
            records = document[EXPENSES]
            expense = ExpenseRead(**data.model_dump(), id=generate_id(records))
            records.insert(0, expense.to_document())
        logger.info("Created expense %s for trip request %s", expense.id, expense.trip_request_id)
        return expense

    @classmethod
    async def delete_expense(cls, store: DocumentStore, expense_id: str) -> None:
        """Delete an expense by id.

        Raises
        ------
        ValueError
            If no expense has the given id.  The document is not
            rewritten in that case.
        """
        logger = logging.getLogger(__name__)
        with store.transaction() as document:
            records = document[EXPENSES]
            remaining = [r for r in records if r.get("id") != expense_id]
            if len(remaining) == len(records):
                raise ValueError("Expense not found")
            document[EXPENSES] = remaining
        logger.info("Deleted expense %s", expense_id)

    @classmethod
    async def totals_by_trip(cls, store: DocumentStore) -> List[ExpenseTotal]:
        """Sum expense amounts per trip request.

        One entry is returned for every stored trip request, in stored
        order, including trips without expenses.  Expenses whose trip
        request no longer exists are left out, and amounts that are not
        numbers count towards ``count`` but add nothing to ``total``.
        """
        document = store.load()
        totals: Dict[str, ExpenseTotal] = {
            r["id"]: ExpenseTotal(trip_request_id=r["id"])
            for r in document[TRIP_REQUESTS]
            if "id" in r
        }
        for expense in document[EXPENSES]:
            trip_request_id = expense.get("tripRequestId")
            entry = totals.get(trip_request_id) if isinstance(trip_request_id, str) else None
            if entry is None:
                continue
            amount = expense.get("amount")
            if isinstance(amount, (int, float)) and not isinstance(amount, bool):
                entry.total += amount
            entry.count += 1
        return list(totals.values())
