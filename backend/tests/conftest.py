import os, sys
import pytest
from fastapi.testclient import TestClient
import tempfile
import uuid

# Isolated SQLite file per test session; must be set before app import
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+pysqlite:///{os.path.join(tempfile.gettempdir(), f'event_status_{uuid.uuid4().hex}.db')}",
)

# Ensure app import path
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

from app.main import app  # noqa: E402
from app.db.session import engine, Base  # noqa: E402

@pytest.fixture(scope="function")  # fresh DB per test
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    return TestClient(app)
