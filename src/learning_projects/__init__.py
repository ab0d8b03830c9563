"""Learning Projects - small app exercises behind a shared service layer.

Architecture::

    schemas.py     Domain records (users, repositories, weather, expenses, tasks)
    exercises.py   Single-screen exercises (color, counter, temperature, tip)
    store.py       Key-value JSON store (one blob per key, rewritten whole)
    services/      State-owning services (GitHub, weather, favorites, expenses, tasks)
    screens/       View state per screen (initial / loading / loaded / error)
    renderers/     Pure view state -> text (Jinja2 templates)
    cli.py         Command-line front end

Data flow: screen triggers a service call -> service does (simulated or real)
I/O -> service updates the state it owns -> screen re-renders.

Screens only talk to services; services never talk to each other.
"""

__version__ = "0.1.0"

from learning_projects.config import Settings
from learning_projects.schemas import Expense, GitHubUser, Repository, Result

__all__ = ["Expense", "GitHubUser", "Repository", "Result", "Settings", "__version__"]
