"""Grocery back-office FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml ("production" → PostgreSQL).
from grocery.domain import grocery
from grocery.web import create_app

grocery.init()

app = create_app(grocery)
