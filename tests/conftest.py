# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path
import pytest

from sheet_listing.logging.init import LOGGER_NAME, reset_logging
from sheet_listing.services.loader import reset_last_result

HEADERS = ["Lakás", "m2", "Erkély m2", "Kert m2", "Szerk.kész ár", "Kulcsrakész ár", "Emelet", "Elérhető"]


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    reset_logging()
    reset_last_result()
    monkeypatch.delenv("LISTING_CSV_URL", raising=False)
    yield
    reset_logging()
    reset_last_result()
    # drop handlers bound to the captured stdout of this test
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "build").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """csv_url: https://example.test/sheet.csv
table_id: lakas-table
timeout_seconds: 5
output_path: build/index.html
page_title: Lakások
navigation:
  scroll_threshold: 48
  links:
    - label: Lakások
      href: "#lakasok"
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "listing.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def headers() -> list[str]:
    return list(HEADERS)


@pytest.fixture()
def sample_csv() -> str:
    return (
        "Lakás,m2,Erkély m2,Kert m2,Szerk.kész ár,Kulcsrakész ár,Emelet,Elérhető\n"
        'A3,"54,20",6,,45000000,52500000,2. emelet,igen\n'
        'A1,"61,75",,"32,5",49800000,58000000,fsz,Nem\n'
        "A2,48,4,,39900000,,1,foglalt\n"
        "\n"
    )
