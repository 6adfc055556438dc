import os
import sys
from pathlib import Path

import pytest

# Ensure `backend/` and the repository root are on sys.path so `import app...` and `import engine...` work
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "backend"))
sys.path.insert(0, str(REPO_ROOT))

# Never touch a developer database from tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

from app.config import settings  # noqa: E402
from factories import make_session_factory  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_card_cache(tmp_path, monkeypatch):
    """Point the catalog cache at a per-test file."""
    cache_path = tmp_path / "cards_cache.json"
    monkeypatch.setattr(settings, "CARDS_CACHE_PATH", str(cache_path))
    return cache_path


@pytest.fixture
def db_session():
    Session = make_session_factory()
    db = Session()
    try:
        yield db
    finally:
        db.close()
