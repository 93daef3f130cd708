from __future__ import annotations

import pytest

from src.core.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for var in ("GROCERY_INPUT_FILE", "GROCERY_BACKUP_FILE", "GROCERY_FILE_ENCODING", "LOG_LEVEL", "WEB_HOST", "WEB_PORT"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def grocery_file(tmp_path):
    path = tmp_path / "groceries.txt"
    path.write_text("Milk\nmilk\nBread\n\n", encoding="utf-8")
    return path
