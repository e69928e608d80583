from .connection import engine, get_db, Base, SessionLocal
from .gateway import run_query, transaction, unit_of_work

__all__ = ["engine", "get_db", "Base", "SessionLocal", "run_query", "transaction", "unit_of_work"]
