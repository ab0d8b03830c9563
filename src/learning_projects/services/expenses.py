"""
Expense ledger.

Expenses are kept in insertion order. The total is recomputed on every
read. Without a store the ledger lives in memory and starts from a demo
set; with one, it is loaded from and rewritten to the ``expenses`` key.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from learning_projects.schemas import Expense, ExpenseCategory, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

    from learning_projects.store import KeyValueStore

logger = logging.getLogger(__name__)

EXPENSES_KEY = "expenses"

_expense_list = TypeAdapter(list[Expense])


def demo_expenses(now: datetime | None = None) -> list[Expense]:
    """Eight sample expenses dated relative to ``now``."""
    now = now or datetime.now()

    def days_ago(days: float) -> datetime:
        return now - timedelta(days=days)

    return [
        Expense(title="Groceries", amount=55.20, category=ExpenseCategory.FOOD, date=days_ago(2)),
        Expense(title="Bus Ticket", amount=3.50, category=ExpenseCategory.TRANSPORT, date=days_ago(1)),
        Expense(title="Movie Night", amount=25.00, category=ExpenseCategory.ENTERTAINMENT, date=now),
        Expense(
            title="Electricity Bill",
            amount=75.00,
            category=ExpenseCategory.UTILITIES,
            date=days_ago(5),
        ),
        Expense(title="Rent", amount=1200.00, category=ExpenseCategory.HOUSING, date=days_ago(10)),
        Expense(title="Coffee", amount=4.50, category=ExpenseCategory.FOOD, date=days_ago(3)),
        Expense(title="Dinner", amount=40.00, category=ExpenseCategory.FOOD, date=days_ago(1)),
        Expense(title="Uber", amount=15.00, category=ExpenseCategory.TRANSPORT, date=days_ago(0.5)),
    ]


class ExpenseService:
    """Owns the expense list."""

    def __init__(
        self,
        expenses: Iterable[Expense] | None = None,
        store: KeyValueStore | None = None,
        key: str = EXPENSES_KEY,
    ) -> None:
        self.store = store
        self.key = key
        if expenses is not None:
            self._expenses = list(expenses)
        elif store is not None:
            self._expenses = self._load_or_seed(store)
        else:
            self._expenses = demo_expenses()

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def total_expenses(self) -> float:
        """Sum of all current amounts."""
        return sum(expense.amount for expense in self._expenses)

    def add_expense(self, expense: Expense) -> Result:
        self._expenses.append(expense)
        return self._save()

    def delete_expense(self, indices: Iterable[int]) -> Result:
        """
        Remove the expenses at the given positions.

        Positions refer to the list before any removal; duplicates are
        ignored.

        Raises:
            IndexError: If any position is out of range. Nothing is removed.
        """
        positions = set(indices)
        size = len(self._expenses)
        for position in positions:
            if not 0 <= position < size:
                msg = f"Expense index {position} out of range (0..{size - 1})"
                raise IndexError(msg)
        self._expenses = [e for i, e in enumerate(self._expenses) if i not in positions]
        return self._save()

    def totals_by_category(self) -> dict[ExpenseCategory, float]:
        """Per-category sums, in order of first appearance."""
        totals: dict[ExpenseCategory, float] = {}
        for expense in self._expenses:
            totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount
        return totals

    def sorted_by_date(self) -> list[Expense]:
        """Newest first. The ledger itself stays in insertion order."""
        return sorted(self._expenses, key=lambda e: e.date, reverse=True)

    def _load_or_seed(self, store: KeyValueStore) -> list[Expense]:
        try:
            raw = store.read(self.key)
            if raw is not None:
                return _expense_list.validate_python(raw)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Could not load expenses under %r, using demo data: %s", self.key, exc)
        return demo_expenses()

    def _save(self) -> Result:
        if self.store is None:
            return Result(success=True, message="Not persisted")
        try:
            payload = [expense.model_dump(mode="json") for expense in self._expenses]
            self.store.write(self.key, payload, source="expenses")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save expenses under %r: %s", self.key, exc)
            return Result(success=False, message="Could not save expenses", error=str(exc))
        return Result(success=True, message=f"Saved {len(self._expenses)} expenses")
