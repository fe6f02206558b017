import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import Settings  # noqa: E402
from database import db  # noqa: E402
from models import logged_profile  # noqa: E402


@pytest.fixture(autouse=True)
def temp_db_path(tmp_path, monkeypatch):
    """Garante que cada teste use um banco isolado fora do repositório."""
    db_path = tmp_path / "accounts.db"
    monkeypatch.setenv("ACCOUNTS_DB_PATH", str(db_path))
    monkeypatch.delenv("ACCOUNTS_DB_URL", raising=False)
    monkeypatch.delenv("ACCOUNTS_BACKEND", raising=False)
    logged_profile.clear()
    yield db_path
    logged_profile.clear()
    db.reset_pool(None)


@pytest.fixture
def settings():
    return Settings.from_env()


@pytest.fixture
def pool(settings):
    pool = db.ConnectionPool(settings.db_url)
    pool.init_db(settings)
    db.reset_pool(pool)
    yield pool
    pool.dispose()
