"""To-do board renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from learning_projects.renderers import render_template

if TYPE_CHECKING:
    from learning_projects.schemas import Category
    from learning_projects.services.tasks import TaskBoard


def build_task_board_text(board: TaskBoard, only: Category | None = None) -> str:
    """Each category with its tasks; ``[x]`` marks completed ones."""
    categories = [only] if only is not None else list(board.categories)
    sections = [
        {
            "title": category.name,
            "rows": [
                f"{index}. [{'x' if task.is_completed else ' '}] {task.title}"
                for index, task in enumerate(board.tasks_for(category.id))
            ],
        }
        for category in categories
    ]
    return render_template("tasks.txt.j2", sections=sections)
