from pathlib import Path

import pytest


@pytest.fixture
def write_source(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(text: str, name: str = "program.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch) -> None:
    """Keep the caller's PRINTSCAN_* settings out of tests."""
    monkeypatch.delenv("PRINTSCAN_CAPACITY", raising=False)
    monkeypatch.delenv("PRINTSCAN_LOG_LEVEL", raising=False)
