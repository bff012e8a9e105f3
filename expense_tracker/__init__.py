"""
Expense Tracker - Source Package

A personal expense record keeper: add, edit, delete, search and total
expenses, and keep them in a plain CSV file.

DESIGN PRINCIPLES:
1. Validation reports, it never corrects
2. Every failure is returned as data, never raised to the caller
3. Storage layer is swappable
4. Every change is auditable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
