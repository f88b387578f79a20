import json
import subprocess
import sys
from pathlib import Path

from typer.testing import CliRunner

from presentation.cli import app


ROOT = Path(__file__).resolve().parent.parent
runner = CliRunner()


def run_main(*args):
    return subprocess.run(
        [sys.executable, str(ROOT / "main.py"), *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        check=False,
    )


def write_pair(tmp_path):
    old = tmp_path / "old.txt"
    new = tmp_path / "new.txt"
    old.write_text("a\nb\nc", encoding="utf-8")
    new.write_text("a\nx\nb\nc", encoding="utf-8")
    return old, new


def test_cli_version_exits_zero_and_prints_version():
    proc = run_main("version")
    assert proc.returncode == 0
    assert "linediff v" in proc.stdout + proc.stderr


def test_diff_command_renders_counts(tmp_path):
    old, new = write_pair(tmp_path)
    result = runner.invoke(app, ["diff", str(old), str(new)])
    assert result.exit_code == 0
    assert "+1" in result.output
    assert "-0" in result.output
    assert "=3" in result.output


def test_diff_command_writes_unified_output(tmp_path):
    old, new = write_pair(tmp_path)
    out = tmp_path / "result.diff"
    result = runner.invoke(app, ["diff", str(old), str(new), "--output", str(out)])
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8").splitlines()[2:] == [" a", "+x", " b", " c"]


def test_diff_command_reports_output_write_failure(tmp_path):
    old, new = write_pair(tmp_path)
    out_dir = tmp_path / "outdir"
    out_dir.mkdir()
    result = runner.invoke(app, ["diff", str(old), str(new), "--output", str(out_dir)])
    assert result.exit_code == 1
    assert "Error writing output" in result.output
    assert "Error reading files" not in result.output


def test_diff_command_json_output(tmp_path):
    old, new = write_pair(tmp_path)
    proc = run_main("diff", str(old), str(new), "--json")
    assert proc.returncode == 0
    data = json.loads(proc.stdout)
    assert data["stats"] == {"added": 1, "removed": 0, "unchanged": 3}
    assert data["diff_lines"][1]["diff_type"] == "added"


def test_diff_command_missing_file(tmp_path):
    old, _ = write_pair(tmp_path)
    result = runner.invoke(app, ["diff", str(old), str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Error reading files" in result.output


def test_diff_command_rejects_negative_lookahead(tmp_path):
    old, new = write_pair(tmp_path)
    result = runner.invoke(app, ["diff", str(old), str(new), "--lookahead=-1"])
    assert result.exit_code == 1
    assert "Invalid option" in result.output


def test_demo_command():
    result = runner.invoke(app, ["demo", "--all"])
    assert result.exit_code == 0
    assert "original -> modified" in result.output
