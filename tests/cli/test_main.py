# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the linkdb CLI entry point."""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from linkdb.cli.main import main

# ###############
# Helpers
# ###############


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Iterator[None]:
    """main() installs a stderr handler on the root logger; drop it afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    root.handlers[:] = handlers


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run main() with the given arguments and return the exit code."""
    monkeypatch.setattr(sys, "argv", ["linkdb", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _write(tmp_path: Path, content: str, name: str = "links.ldb") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- check tests --------


def test_check_clean_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """check prints the counts and exits 0 for a file without problems."""
    path = _write(tmp_path, ".tag python\n.tag rust\n.link https://example.com\n.added 20240229\n")
    assert _run(monkeypatch, "check", str(path)) == 0
    captured = capsys.readouterr()
    assert "Counts: Tags=2; Links=1" in captured.out
    assert captured.err == ""


def test_check_reports_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Duplicate tags, bad dates and unknown commands are printed and fail the check."""
    path = _write(tmp_path, ".tag a\n.tag a\n.link x\n.added 20230229\n.frobnicate\n")
    assert _run(monkeypatch, "check", str(path)) == 1
    captured = capsys.readouterr()
    assert "ERROR: line 2: Duplicate tag: a" in captured.err
    assert "ERROR: line 4: Added command contained invalid date: 20230229" in captured.err
    assert "ERROR: line 5: Unknown command type: .frobnicate" in captured.err
    assert "Counts: Tags=1; Links=1" in captured.out


def test_check_only_duplicate_links(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """-dl restricts duplicate reporting to links."""
    path = _write(tmp_path, ".tag a\n.tag a\n.link a\n")
    assert _run(monkeypatch, "check", "-dl", str(path)) == 1
    captured = capsys.readouterr()
    assert "Duplicate tag" not in captured.err
    assert "Duplicate link: a" in captured.err


def test_check_only_duplicate_tags_passes_without_tag_duplicates(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Suppressed duplicate links do not fail the check."""
    path = _write(tmp_path, ".tag a\n.link a\n")
    assert _run(monkeypatch, "check", "-dt", str(path)) == 0
    assert "Duplicate link" not in capsys.readouterr().err


def test_check_all(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """-a overrides a config that disables duplicate checks."""
    _write(tmp_path, "check-duplicate-tags: false\ncheck-duplicate-links: false\n", name=".linkdb.yaml")
    path = _write(tmp_path, ".tag a\n.tag a\n.link a\n")
    assert _run(monkeypatch, "check", "-a", str(path)) == 1
    err = capsys.readouterr().err
    assert "Duplicate tag: a" in err
    assert "Duplicate link: a" in err


def test_check_uses_config_next_to_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Settings in .linkdb.yaml switch checks off and stray-line warnings on."""
    _write(tmp_path, "check-duplicate-tags: false\nreport-stray-lines: true\n", name=".linkdb.yaml")
    path = _write(tmp_path, ".tag a\n.tag a\nloose text\n")
    assert _run(monkeypatch, "check", str(path)) == 0
    captured = capsys.readouterr()
    assert "WARN: line 3: Ignored line: loose text" in captured.out
    assert "Duplicate tag" not in captured.err


def test_check_explicit_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = _write(tmp_path, "check-duplicate-tags: false\n", name="custom.yaml")
    path = _write(tmp_path, ".tag a\n.tag a\n")
    assert _run(monkeypatch, "check", "--config", str(config), str(path)) == 0


def test_check_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _write(tmp_path, "unknown-key: 1\n", name=".linkdb.yaml")
    path = _write(tmp_path, ".tag a\n")
    assert _run(monkeypatch, "check", str(path)) == 1
    assert "Error:" in capsys.readouterr().err


def test_check_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "check", str(tmp_path / "missing.ldb")) == 1
    assert "not found" in capsys.readouterr().err


def test_check_verbose_logs_to_stderr(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write(tmp_path, ".tag a\n")
    assert _run(monkeypatch, "-v", "check", str(path)) == 0
    assert "Parsing linkdb file" in capsys.readouterr().err


def test_check_requires_file(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "check") == 2


# -------- epoch tests --------


def test_epoch_iso_date(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "epoch", "2024-01-01") == 0
    assert "Epoch time for 2024-01-01 is 1704067200" in capsys.readouterr().out


def test_epoch_compact_date(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "epoch", "19700102") == 0
    assert "Epoch time for 1970-01-02 is 86400" in capsys.readouterr().out


def test_epoch_defaults_to_today(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "epoch") == 0
    assert "Epoch time for " in capsys.readouterr().out


def test_epoch_invalid_date(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "epoch", "20230229") == 2
