"""
Query Execution Engine

Aggregate queries over stored expenses: totals, counts and the
per-category breakdown.

DESIGN DECISION: Aggregation is DETERMINISTIC and read-only. The
executor only reads snapshots from storage and never changes them.
Category matching is exact (no trimming, no case folding), the same
rule the storage layer uses for category filtering.
"""

from typing import Optional

from pydantic import BaseModel, Field

from expense_tracker.models.expense import Expense
from expense_tracker.services.storage import ExpenseStorageInterface


class ExpenseSummary(BaseModel):
    """Aggregate view of a set of expenses."""

    category_filter: Optional[str] = Field(
        default=None,
        description="Category the summary is restricted to, if any"
    )
    expense_count: int = Field(
        ...,
        ge=0,
        description="Number of expenses included"
    )
    total_amount: float = Field(
        ...,
        description="Sum of the included amounts"
    )
    average_amount: float = Field(
        ...,
        description="Mean amount (0 when there are no expenses)"
    )
    by_category: dict[str, float] = Field(
        default_factory=dict,
        description="Totals per category, in order of first appearance"
    )


class QueryExecutor:
    """
    Executes aggregate queries against expense storage.

    GUARANTEES:
    - Only returns figures computed from stored data
    - An empty selection totals to 0, never raises
    """

    def __init__(self, storage: ExpenseStorageInterface):
        self._storage = storage

    def _select(self, category: str) -> list[Expense]:
        if category:
            return self._storage.get_expenses_by_category(category)
        return list(self._storage.get_all_expenses())

    def total(self, category: str = "") -> float:
        """
        Sum of amounts, over everything or one exact category.

        An empty category means "all expenses".
        """
        return sum((e.amount for e in self._select(category)), 0.0)

    def totals_by_category(self) -> dict[str, float]:
        """Total per category, keyed in order of first appearance."""
        groups: dict[str, float] = {}
        for expense in self._storage.get_all_expenses():
            groups[expense.category] = groups.get(expense.category, 0.0) + expense.amount
        return groups

    def summarize(self, category: str = "") -> ExpenseSummary:
        """Count, total, average and per-category breakdown in one pass."""
        expenses = self._select(category)
        total = sum((e.amount for e in expenses), 0.0)

        breakdown: dict[str, float] = {}
        for expense in expenses:
            breakdown[expense.category] = breakdown.get(expense.category, 0.0) + expense.amount

        return ExpenseSummary(
            category_filter=category or None,
            expense_count=len(expenses),
            total_amount=total,
            average_amount=total / len(expenses) if expenses else 0.0,
            by_category=breakdown,
        )
