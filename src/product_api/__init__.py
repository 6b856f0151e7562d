"""Product catalog API.

A FastAPI service exposing CRUD operations over a single Product resource,
persisted through SQLModel and logged with loguru.
"""

__version__ = "0.1.0"
