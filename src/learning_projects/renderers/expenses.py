"""Expense report renderer.

Rows are numbered by ledger position so the numbers can be passed back to
``expenses --delete``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from learning_projects.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from uuid import UUID

    from learning_projects.schemas import Expense, ExpenseCategory


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"


def expense_line(index: int, expense: Expense) -> str:
    line = (
        f"{index:>2}. {expense.date:%Y-%m-%d}  {expense.title:<20} "
        f"{expense.category.value:<13} {format_money(expense.amount):>10}"
    )
    if expense.notes:
        line += f"  ({expense.notes})"
    return line


def build_expense_report_text(
    expenses: Sequence[Expense],
    total: float,
    by_category: Mapping[ExpenseCategory, float] | None = None,
    positions: Mapping[UUID, int] | None = None,
) -> str:
    """
    Ledger rows, the total, and an optional per-category breakdown.

    Args:
        expenses: Rows in display order.
        total: Ledger total.
        by_category: Per-category sums; omitted when None or empty.
        positions: Ledger position per expense id, used as the row number
            when ``expenses`` is a re-ordered view. Defaults to display order.
    """
    if positions is None:
        positions = {expense.id: index for index, expense in enumerate(expenses)}
    rows = [expense_line(positions[e.id], e) for e in expenses]
    categories = [
        f"{category.value:<13} {format_money(amount):>10}"
        for category, amount in (by_category or {}).items()
    ]
    return render_template(
        "expenses.txt.j2",
        rows=rows,
        total=format_money(total),
        categories=categories,
    )
