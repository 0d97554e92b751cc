import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import route_csv and tests.helpers without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()


@pytest.fixture(autouse=True)
def clear_route_csv_env(monkeypatch):
    """Ensure each test starts without compiler or logging environment variables."""
    for name in ("ROUTE_CSV_NO_HEADER", "ROUTE_CSV_NO_END_COMMA", "ROUTE_CSV_ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
