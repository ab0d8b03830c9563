"""
State-owning services.

Each service owns one piece of application state plus the operations that
change it. Screens call services; services never call each other.

- http.py      - Shared requests session (User-Agent, default timeout)
- errors.py    - ServiceError taxonomy shown on screen
- github.py    - GitHub users and repositories (REST, no auth)
- weather.py   - Simulated weather lookup
- favorites.py - Favorite repositories, persisted as one JSON blob
- expenses.py  - Expense ledger
- tasks.py     - Categories and their to-do tasks
"""
