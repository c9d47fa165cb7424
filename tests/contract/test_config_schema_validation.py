from __future__ import annotations

import json

import jsonschema
import pytest
from jsonschema.exceptions import ValidationError

from sheet_listing.config.loader import SCHEMA_PATH

"""Config schema contract test (bundled config_schema.json)."""


def _schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_config_schema_valid_example():
    config = {
        "csv_url": "https://docs.google.com/spreadsheets/d/e/x/pub?output=csv",
        "table_id": "lakas-table",
        "timeout_seconds": 30,
        "fallback_headers": ["Lakás", "Emelet", "Elérhető"],
        "output_path": "build/index.html",
        "page_title": "Lakások",
        "navigation": {
            "scroll_threshold": 48,
            "links": [{"label": "Kapcsolat", "href": "#kapcsolat"}],
        },
    }
    jsonschema.validate(config, _schema())


def test_config_schema_missing_csv_url():
    with pytest.raises(ValidationError):
        jsonschema.validate({"table_id": "t"}, _schema())


def test_config_schema_rejects_empty_fallback_headers():
    with pytest.raises(ValidationError):
        jsonschema.validate({"csv_url": "", "fallback_headers": []}, _schema())


def test_config_schema_rejects_negative_scroll_threshold():
    with pytest.raises(ValidationError):
        jsonschema.validate({"csv_url": "", "navigation": {"scroll_threshold": -1}}, _schema())
