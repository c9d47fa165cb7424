from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_FALLBACK_HEADERS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PAGE_TITLE,
    DEFAULT_SCROLL_THRESHOLD,
    DEFAULT_TABLE_ID,
    DEFAULT_TIMEOUT_SECONDS,
    ListingConfig,
    NavigationConfig,
    NavLink,
)

"""Config loader.

Responsibilities:
- Load YAML config (default ``config/listing.yml``)
- Validate against the bundled JSON schema
- Apply defaults for every optional key
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the
            config data fails validation (missing ``csv_url``, wrong types,
            unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _build_navigation(raw: dict[str, Any]) -> NavigationConfig:
    links = tuple(NavLink(label=item["label"], href=item["href"]) for item in raw.get("links", []))
    return NavigationConfig(
        scroll_threshold=raw.get("scroll_threshold", DEFAULT_SCROLL_THRESHOLD),
        links=links,
    )


def load_config(path: Path) -> ListingConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return ListingConfig(
        csv_url=data["csv_url"].strip(),
        table_id=data.get("table_id", DEFAULT_TABLE_ID),
        timeout_seconds=float(data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        fallback_headers=tuple(data.get("fallback_headers", DEFAULT_FALLBACK_HEADERS)),
        output_path=data.get("output_path", DEFAULT_OUTPUT_PATH),
        page_title=data.get("page_title", DEFAULT_PAGE_TITLE),
        navigation=_build_navigation(data.get("navigation", {})),
    )
