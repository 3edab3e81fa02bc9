"""Root test configuration: keep DOCSTORE_* env vars from leaking into tests"""

import pytest


@pytest.fixture(autouse=True)
def clear_docstore_env(monkeypatch):
    """Tests start without DOCSTORE_* overrides from the outer environment."""
    for name in ("DOCSTORE_APP_NAME", "DOCSTORE_DATA_FILE", "DOCSTORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
