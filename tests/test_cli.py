from __future__ import annotations

import json
import sqlite3
import sys
from typing import List

import pytest


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


def _stub_completion(monkeypatch, completion: str) -> list:
    from services.llm_client import LLMClient

    calls = []

    def _complete(self, *, use_case, system_prompt, user_prompt):
        calls.append({"use_case": use_case, "system_prompt": system_prompt, "user_prompt": user_prompt})
        return completion

    monkeypatch.setattr(LLMClient, "complete", _complete)
    return calls


def test_cli_bootstrap_creates_share_table(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    _run_cli_with_args(["--db", str(db_path), "bootstrap"])
    assert "Schema ready (0 shares)" in capsys.readouterr().out

    conn = sqlite3.connect(str(db_path))
    try:
        names = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    finally:
        conn.close()
    assert "shared_recommendations" in names


def test_cli_share_then_show(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    _run_cli_with_args(["--db", str(db_path), "share", "-c", "c-001", "-c", "c-006", "--summary", "VP - EQ"])
    created = json.loads(capsys.readouterr().out)
    assert created["url"].endswith(f"/share/{created['slug']}")

    _run_cli_with_args(["--db", str(db_path), "show-share", created["slug"]])
    shown = json.loads(capsys.readouterr().out)
    assert [c["coach_id"] for c in shown["coaches"]] == ["c-001", "c-006"]
    assert shown["request_summary"] == "VP - EQ"


def test_cli_show_missing_share_exits_nonzero(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "cli.db"), "show-share", "nosuchslug"])
    assert exc.value.code == 1
    assert "Share not found" in capsys.readouterr().out


def test_cli_share_without_coaches_is_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "cli.db"), "share"])
    assert exc.value.code == 2
    assert "At least one coach must be selected" in capsys.readouterr().err


def test_cli_match_prints_enriched_json(tmp_path, monkeypatch, capsys, vp_finance_completion):
    calls = _stub_completion(monkeypatch, vp_finance_completion)
    _run_cli_with_args([
        "--db", str(tmp_path / "cli.db"),
        "match", "-t", "VP of Finance, low EQ, wants 2 options including a male coach", "-n", "2",
    ])
    out = json.loads(capsys.readouterr().out)
    assert [r["coach"]["name"] for r in out["recommendations"]] == ["Marcus Hale", "David Okafor"]
    assert "share" not in out
    assert "Return exactly 2 coach recommendations" in calls[0]["system_prompt"]


def test_cli_match_reads_file_and_shares(tmp_path, monkeypatch, capsys, vp_finance_completion):
    _stub_completion(monkeypatch, vp_finance_completion)
    request_file = tmp_path / "request.txt"
    request_file.write_text("VP of Finance, low EQ\n", encoding="utf-8")
    db_path = tmp_path / "cli.db"

    _run_cli_with_args(["--db", str(db_path), "match", "-i", str(request_file), "-n", "2", "--share"])
    out = json.loads(capsys.readouterr().out)
    slug = out["share"]["slug"]

    _run_cli_with_args(["--db", str(db_path), "show-share", slug])
    shown = json.loads(capsys.readouterr().out)
    assert [c["coach_id"] for c in shown["coaches"]] == ["c-001", "c-003"]
    assert shown["coaches"][0]["match_score"] == 94
    assert shown["request_summary"].startswith("VP - senior leader")


def test_cli_match_bad_count_exits_2(tmp_path, monkeypatch, capsys):
    calls = _stub_completion(monkeypatch, "{}")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "cli.db"), "match", "-t", "Manager", "-n", "9"])
    assert exc.value.code == 2
    assert "between 1 and 8" in capsys.readouterr().err
    assert calls == []


def test_cli_match_parse_failure_exits_1(tmp_path, monkeypatch, capsys):
    _stub_completion(monkeypatch, "not json at all")
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(["--db", str(tmp_path / "cli.db"), "match", "-t", "Manager", "-n", "1"])
    assert exc.value.code == 1
    assert "Error: " in capsys.readouterr().err
