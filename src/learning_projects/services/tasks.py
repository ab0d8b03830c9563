"""
Categorized to-do list.

Tasks point at their category by id. Lookups always go through the id,
never the category name. Deleting a category applies an explicit
``OrphanPolicy`` to its tasks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from learning_projects.schemas import Category, OrphanPolicy, Task

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

logger = logging.getLogger(__name__)


class CategoryNotFoundError(LookupError):
    """No category with the given id."""


class CategoryInUseError(RuntimeError):
    """Deletion refused because the category still has tasks."""


def demo_board() -> TaskBoard:
    """Work / Personal / Shopping with a few tasks each."""
    board = TaskBoard()
    work = board.add_category("Work", icon="briefcase.fill")
    personal = board.add_category("Personal", icon="house.fill")
    shopping = board.add_category("Shopping", icon="cart.fill")

    board.add_task(work.id, "Finish weekly project")
    done = board.add_task(work.id, "Prepare presentation")
    board.toggle_task(done.id)
    board.add_task(personal.id, "Buy groceries")
    board.add_task(personal.id, "Call mom")
    board.add_task(shopping.id, "New shoes")
    return board


class TaskBoard:
    """Owns categories and their tasks."""

    def __init__(self, policy: OrphanPolicy = OrphanPolicy.BLOCK) -> None:
        self.policy = OrphanPolicy(policy)
        self._categories: list[Category] = []
        self._tasks: list[Task] = []

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    def get_category(self, category_id: UUID) -> Category:
        for category in self._categories:
            if category.id == category_id:
                return category
        msg = f"No category with id {category_id}"
        raise CategoryNotFoundError(msg)

    def find_category(self, name: str) -> Category | None:
        """First category whose name matches, case-insensitive."""
        wanted = name.strip().casefold()
        return next((c for c in self._categories if c.name.casefold() == wanted), None)

    def add_category(self, name: str, icon: str = "folder") -> Category:
        if not name.strip():
            msg = "Category name must not be blank"
            raise ValueError(msg)
        category = Category(name=name.strip(), icon=icon)
        self._categories.append(category)
        return category

    def tasks_for(self, category_id: UUID) -> list[Task]:
        """Tasks in ``category_id``, in the order they were added."""
        self.get_category(category_id)
        return [task for task in self._tasks if task.category_id == category_id]

    def add_task(self, category_id: UUID, title: str) -> Task:
        """
        Create an incomplete task in ``category_id``.

        Raises:
            ValueError: Blank title.
            CategoryNotFoundError: Unknown category.
        """
        if not title.strip():
            msg = "Task title must not be blank"
            raise ValueError(msg)
        self.get_category(category_id)
        task = Task(title=title.strip(), category_id=category_id)
        self._tasks.append(task)
        return task

    def toggle_task(self, task_id: UUID) -> Task:
        """Flip completion. Raises ``KeyError`` for an unknown task."""
        for task in self._tasks:
            if task.id == task_id:
                task.is_completed = not task.is_completed
                return task
        raise KeyError(task_id)

    def delete_tasks(self, category_id: UUID, indices: Iterable[int]) -> list[Task]:
        """
        Delete tasks by position within ``tasks_for(category_id)``.

        Returns the removed tasks.

        Raises:
            IndexError: A position is out of range. Nothing is removed.
        """
        visible = self.tasks_for(category_id)
        positions = set(indices)
        for position in positions:
            if not 0 <= position < len(visible):
                msg = f"Task index {position} out of range for {len(visible)} tasks"
                raise IndexError(msg)
        doomed = {visible[position].id for position in positions}
        removed = [task for task in self._tasks if task.id in doomed]
        self._tasks = [task for task in self._tasks if task.id not in doomed]
        return removed

    def delete_category(
        self,
        category_id: UUID,
        policy: OrphanPolicy | None = None,
        reassign_to: UUID | None = None,
    ) -> Category:
        """
        Delete a category and deal with its tasks.

        Args:
            category_id: Category to delete.
            policy: Overrides the board's default policy for this call.
            reassign_to: Target category, required for ``REASSIGN``.

        Raises:
            CategoryNotFoundError: Unknown ``category_id`` or ``reassign_to``.
            CategoryInUseError: ``BLOCK`` and the category has tasks.
            ValueError: ``REASSIGN`` without a different target category.
        """
        policy = OrphanPolicy(policy or self.policy)
        category = self.get_category(category_id)
        orphans = [task for task in self._tasks if task.category_id == category_id]

        if orphans:
            if policy is OrphanPolicy.BLOCK:
                msg = f"Category {category.name!r} still has {len(orphans)} tasks"
                raise CategoryInUseError(msg)
            if policy is OrphanPolicy.REASSIGN:
                if reassign_to is None or reassign_to == category_id:
                    msg = "Reassigning tasks needs a different target category"
                    raise ValueError(msg)
                self.get_category(reassign_to)
                for task in orphans:
                    task.category_id = reassign_to
            elif policy is OrphanPolicy.CASCADE:
                self._tasks = [task for task in self._tasks if task.category_id != category_id]

        self._categories = [c for c in self._categories if c.id != category_id]
        logger.info(
            "Deleted category %r (%d tasks, policy=%s)", category.name, len(orphans), policy
        )
        return category
