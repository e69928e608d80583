import os
import sys
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'app' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Tests use their own sqlite file, never the dev database
os.environ.setdefault("DATABASE_URL", f"sqlite:///{ROOT / 'test_work_orders.db'}")

from app.db import Base, engine, SessionLocal


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so the test DB matches the current models exactly
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
