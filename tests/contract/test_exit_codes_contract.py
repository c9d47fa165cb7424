from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from sheet_listing.cli import main as cli_main

"""Exit code contract: 0 remote rendered, 2 fallback rendered, 1 fatal."""


def test_exit_code_fatal_missing_config(temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR config:" in out


def test_exit_code_fatal_invalid_config(write_config, capsys):
    write_config.write_text("table_id: x\n", encoding="utf-8")
    code = cli_main([])
    assert code == 1
    assert "ERROR config: config validation failed" in capsys.readouterr().out


def test_exit_code_success(write_config, temp_workdir: Path, sample_csv: str):
    resp = MagicMock()
    resp.content = sample_csv.encode("utf-8")
    with patch("sheet_listing.services.loader.requests.get", return_value=resp):
        assert cli_main([]) == 0


def test_exit_code_fallback_when_url_disabled(write_config, temp_workdir: Path, monkeypatch, capsys):
    monkeypatch.setenv("LISTING_CSV_URL", "")
    with patch("sheet_listing.services.loader.requests.get") as mock_get:
        code = cli_main([])
    mock_get.assert_not_called()
    out = capsys.readouterr().out
    assert code == 2
    assert "WARN" not in out
    assert "SUMMARY source=fallback" in out


def test_exit_code_fatal_unwritable_output(write_config, temp_workdir: Path, capsys):
    blocker = temp_workdir / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with patch("sheet_listing.services.loader.requests.get", side_effect=OSError("offline")):
        code = cli_main(["--output", str(blocker / "index.html")])
    assert code == 1
    assert "ERROR output: cannot write" in capsys.readouterr().out
