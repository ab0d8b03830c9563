"""Tests for the categorized to-do board."""

from __future__ import annotations

import uuid

import pytest

from learning_projects.schemas import OrphanPolicy
from learning_projects.services.tasks import (
    CategoryInUseError,
    CategoryNotFoundError,
    TaskBoard,
    demo_board,
)


class TestDemoBoard:
    """Test the seeded board."""

    def test_categories(self) -> None:
        """Demo categories in order."""
        board = demo_board()
        assert [c.name for c in board.categories] == ["Work", "Personal", "Shopping"]

    def test_tasks_per_category(self) -> None:
        """Demo tasks sit under their categories."""
        board = demo_board()
        work, personal, shopping = board.categories
        assert [t.title for t in board.tasks_for(work.id)] == [
            "Finish weekly project",
            "Prepare presentation",
        ]
        assert len(board.tasks_for(personal.id)) == 2
        assert [t.title for t in board.tasks_for(shopping.id)] == ["New shoes"]

    def test_presentation_is_done(self) -> None:
        """Only the presentation starts completed."""
        board = demo_board()
        work = board.categories[0]
        assert [t.is_completed for t in board.tasks_for(work.id)] == [False, True]


class TestTasks:
    """Test task operations."""

    def test_lookup_is_by_id_not_name(self) -> None:
        """Same-named categories keep separate tasks."""
        board = TaskBoard()
        first = board.add_category("Work")
        second = board.add_category("Work")
        board.add_task(first.id, "only in first")
        assert [t.title for t in board.tasks_for(first.id)] == ["only in first"]
        assert board.tasks_for(second.id) == []

    def test_new_task_is_incomplete(self) -> None:
        """New tasks start incomplete in their category."""
        board = TaskBoard()
        category = board.add_category("Home")
        task = board.add_task(category.id, "Water plants")
        assert task.is_completed is False
        assert task.category_id == category.id

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, title: str) -> None:
        """Blank titles raise ValueError."""
        board = TaskBoard()
        category = board.add_category("Home")
        with pytest.raises(ValueError):
            board.add_task(category.id, title)

    def test_unknown_category(self) -> None:
        """Adding to an unknown category fails."""
        board = TaskBoard()
        with pytest.raises(CategoryNotFoundError):
            board.add_task(uuid.uuid4(), "task")

    def test_toggle(self) -> None:
        """Toggle flips completion both ways."""
        board = TaskBoard()
        category = board.add_category("Home")
        task = board.add_task(category.id, "Dishes")
        assert board.toggle_task(task.id).is_completed is True
        assert board.toggle_task(task.id).is_completed is False

    def test_toggle_unknown(self) -> None:
        """Toggling an unknown task raises KeyError."""
        with pytest.raises(KeyError):
            TaskBoard().toggle_task(uuid.uuid4())

    def test_delete_by_position_within_category(self) -> None:
        """Positions count within one category only."""
        board = TaskBoard()
        home = board.add_category("Home")
        work = board.add_category("Work")
        board.add_task(home.id, "h0")
        board.add_task(work.id, "w0")
        board.add_task(home.id, "h1")
        board.add_task(home.id, "h2")

        removed = board.delete_tasks(home.id, [1])
        assert [t.title for t in removed] == ["h1"]
        assert [t.title for t in board.tasks_for(home.id)] == ["h0", "h2"]
        assert [t.title for t in board.tasks_for(work.id)] == ["w0"]

    def test_delete_out_of_range(self) -> None:
        """One bad position deletes nothing."""
        board = TaskBoard()
        home = board.add_category("Home")
        board.add_task(home.id, "h0")
        with pytest.raises(IndexError):
            board.delete_tasks(home.id, [0, 1])
        assert len(board.tasks_for(home.id)) == 1

    def test_find_category(self) -> None:
        """Name lookup ignores case and surrounding spaces."""
        board = demo_board()
        found = board.find_category(" shopping ")
        assert found is not None
        assert found.name == "Shopping"
        assert board.find_category("Garden") is None


class TestDeleteCategory:
    """Test the orphan policies."""

    def test_empty_category_always_deletes(self) -> None:
        """A category without tasks deletes under any policy."""
        board = TaskBoard(policy=OrphanPolicy.BLOCK)
        category = board.add_category("Empty")
        board.delete_category(category.id)
        assert board.categories == ()

    def test_block_refuses(self) -> None:
        """Block leaves the category and its tasks in place."""
        board = demo_board()
        work = board.categories[0]
        with pytest.raises(CategoryInUseError):
            board.delete_category(work.id)
        assert work in board.categories
        assert len(board.tasks_for(work.id)) == 2

    def test_cascade_removes_tasks(self) -> None:
        """Cascade removes only that category's tasks."""
        board = demo_board()
        work, personal, _ = board.categories
        board.delete_category(work.id, policy=OrphanPolicy.CASCADE)
        assert [c.name for c in board.categories] == ["Personal", "Shopping"]
        assert len(board.tasks_for(personal.id)) == 2
        with pytest.raises(CategoryNotFoundError):
            board.tasks_for(work.id)

    def test_reassign_moves_tasks(self) -> None:
        """Reassign moves tasks to the target."""
        board = demo_board()
        work, personal, _ = board.categories
        board.delete_category(work.id, policy=OrphanPolicy.REASSIGN, reassign_to=personal.id)
        titles = [t.title for t in board.tasks_for(personal.id)]
        assert titles == ["Finish weekly project", "Prepare presentation", "Buy groceries", "Call mom"]

    def test_reassign_needs_target(self) -> None:
        """Reassign needs a different target category."""
        board = demo_board()
        work = board.categories[0]
        with pytest.raises(ValueError):
            board.delete_category(work.id, policy=OrphanPolicy.REASSIGN)
        with pytest.raises(ValueError):
            board.delete_category(work.id, policy=OrphanPolicy.REASSIGN, reassign_to=work.id)

    def test_reassign_unknown_target(self) -> None:
        """An unknown target leaves the category in place."""
        board = demo_board()
        work = board.categories[0]
        with pytest.raises(CategoryNotFoundError):
            board.delete_category(work.id, policy=OrphanPolicy.REASSIGN, reassign_to=uuid.uuid4())
        assert work in board.categories

    def test_board_default_policy(self) -> None:
        """The board's policy applies when none is passed."""
        board = TaskBoard(policy=OrphanPolicy.CASCADE)
        category = board.add_category("Temp")
        board.add_task(category.id, "gone")
        board.delete_category(category.id)
        assert board.categories == ()

    def test_policy_from_string(self) -> None:
        """Policy names are accepted as strings."""
        board = TaskBoard(policy="cascade")  # type: ignore[arg-type]
        assert board.policy is OrphanPolicy.CASCADE

    def test_unknown_category(self) -> None:
        """Deleting an unknown category fails."""
        with pytest.raises(CategoryNotFoundError):
            TaskBoard().delete_category(uuid.uuid4())
