"""Query execution package."""

from expense_tracker.queries.executor import ExpenseSummary, QueryExecutor

__all__ = ["ExpenseSummary", "QueryExecutor"]
