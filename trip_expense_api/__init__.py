"""
Top-level package for the Trip Expense API.

The HTTP service lives in ``trip_expense_api.app`` and a Python client
for it in ``trip_expense_api.client``.
"""

__all__ = []
