"""Pure rendering functions: structured data -> plain text.

All renderers follow the same pattern:
  - Input: a ViewState, schema objects, or plain values
  - Output: str (text block for the terminal)
  - No side effects, no I/O

Used by screens/ and cli.py.

Public API:
  - github: build_user_search_text, build_favorites_text
  - weather: build_weather_text
  - expenses: build_expense_report_text
  - tasks: build_task_board_text

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from learning_projects.renderers import render_template

       def build_mywidget_text(data: MyData) -> str:
           rows = [...]
           return render_template("mywidget.txt.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.txt.j2``.

3. Add tests: call the build function with sample data and assert the
   returned text contains the expected lines.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers. Templates produce plain
# text, so autoescaping stays off.
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name, without a trailing newline."""
    return _jinja_env.get_template(template_name).render(**kwargs).rstrip("\n")
