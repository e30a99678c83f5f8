from pathlib import Path

import pytest
from fastapi.testclient import TestClient

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture(autouse=True)
def test_state(tmp_path, monkeypatch):
    """Fresh database, sample snippet data and an empty registry cache per test."""
    import findit.db as db_module
    from findit.config import settings
    from findit.db import init_db
    from findit.snippets.registry import reset_code_challenges

    monkeypatch.setattr(db_module, "DB_PATH", tmp_path / "test.db")
    monkeypatch.setattr(
        settings, "challenge_source_dirs", [str(DATA_DIR / "static" / "vulncode")]
    )
    monkeypatch.setattr(settings, "codefixes_dir", str(DATA_DIR / "static" / "codefixes"))
    monkeypatch.setattr(settings, "i18n_dir", str(DATA_DIR / "i18n"))
    monkeypatch.setattr(settings, "default_locale", "en")

    reset_code_challenges()
    init_db()
    yield
    reset_code_challenges()


@pytest.fixture
def client():
    from findit.main import app

    with TestClient(app) as c:
        yield c
