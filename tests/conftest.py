from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from fakes import FakeGoogle

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _load_fixture(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def speedtest_data() -> dict[str, Any]:
    return _load_fixture("speedtest_result.json")


@pytest.fixture
def log_data() -> dict[str, Any]:
    return _load_fixture("log_entry.json")


@pytest.fixture
def fake_google(monkeypatch: pytest.MonkeyPatch) -> FakeGoogle:
    from speedtest_logger import gsheet

    fake = FakeGoogle(titles=["Sheet1", "2024-02"])
    monkeypatch.setattr(
        gsheet.Credentials, "from_service_account_file", fake.from_service_account_file
    )
    monkeypatch.setattr(gsheet.gspread, "authorize", fake.authorize)
    return fake


@pytest.fixture
def creds_file(tmp_path: Path) -> Path:
    path = tmp_path / ".account.json"
    path.write_text('{"type": "service_account"}', encoding="utf-8")
    return path
