from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv

from sheet_listing.config.loader import ConfigError, load_config
from sheet_listing.logging.init import log_summary, setup_logging
from sheet_listing.models.columns import ColumnRole
from sheet_listing.models.config_models import ListingConfig
from sheet_listing.models.load_result import LoadResult
from sheet_listing.services.loader import load_and_render
from sheet_listing.services.navigation import NavigationState
from sheet_listing.services.normalizer import normalize_row, resolve_column_roles
from sheet_listing.services.page import render_page
from sheet_listing.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then config/listing.yml (LISTING_CSV_URL overrides csv_url)
- Fetch + parse + render once (fallback table on any data failure)
- Write the HTML page and print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_FALLBACK = 2

DEFAULT_CONFIG_PATH = Path("config/listing.yml")
CSV_URL_ENV = "LISTING_CSV_URL"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; values there win over the process env."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _apply_env_overrides(cfg: ListingConfig) -> ListingConfig:
    # Set-but-empty disables the fetch, same as an empty csv_url in the config
    url = os.getenv(CSV_URL_ENV)
    if url is None:
        return cfg
    return dataclasses.replace(cfg, csv_url=url.strip())


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the apartment listing table from a published CSV")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to listing.yml")
    p.add_argument("--output", type=Path, default=None, help="Output HTML path (overrides config)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print normalized rows then exit")
    return p.parse_args(argv)


def normalized_frame(result: LoadResult) -> pd.DataFrame:
    """Normalized rows as a DataFrame: floor, availability, then the other columns."""
    columns = resolve_column_roles(result.headers)
    value_columns = list(dict.fromkeys(
        spec.name for spec in columns if spec.role not in (ColumnRole.FLOOR, ColumnRole.AVAILABILITY)
    ))
    records = []
    for raw in result.rows:
        norm = normalize_row(raw, columns)
        records.append({"floor": norm.floor, "availability": norm.availability, **norm.values})
    return pd.DataFrame(records, columns=["floor", "availability", *value_columns])


def _inspect_data(result: LoadResult) -> int:
    df = normalized_frame(result)
    print(f"inspect: source={result.source.value} rows={len(df)} cols={list(result.headers)}")
    if df.empty:
        print("  (no rows)")
    else:
        print(df.to_string(index=False))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read the process arguments for None; [] means "no arguments"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    cfg = _apply_env_overrides(cfg)

    if args.debug:
        for h in logger.handlers:
            h.setLevel("DEBUG")
        logger.setLevel("DEBUG")
        logger.debug("debug mode enabled")

    logger.info(f"Loading listing from: {cfg.csv_url or '(fallback)'}")
    result = load_and_render(cfg)

    if args.inspect_data:
        return _inspect_data(result)

    nav = NavigationState.create(cfg.navigation.scroll_threshold)
    page = render_page(result, nav, cfg.navigation.links, table_id=cfg.table_id, title=cfg.page_title)

    output = args.output or Path(cfg.output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(page, encoding="utf-8")
    except OSError as e:
        logger.error(f"output: cannot write {output}: {e}")
        return EXIT_FATAL
    logger.info(f"wrote {output}")

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])

    return EXIT_FALLBACK if result.is_fallback else EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
