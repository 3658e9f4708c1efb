"""
Pydantic models for expenses.

An expense is one reimbursable cost item tied to a trip request.  The
``receipt`` field is an optional, unvalidated attachment reference.
``ExpenseTotal`` aggregates the expenses of one trip request.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, Number


class ExpenseBase(CamelModel):
    trip_request_id: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, examples=["Lodging"])
    amount: Number = Field(..., examples=[12000])
    date: str = Field(..., min_length=1, examples=["2024-04-01"])
    description: str = Field(..., min_length=1, examples=["Hotel"])
    receipt: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    """Schema for recording an expense."""
    pass


class ExpenseRead(ExpenseBase):
    """Schema for an expense returned by the API."""

    id: str


class ExpenseTotal(CamelModel):
    """Sum and count of the expenses recorded for one trip request."""

    trip_request_id: str
    total: Number = 0
    count: int = 0
