from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes and
stdout/stderr output.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "devicespace" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_solves_both_parts(sample_input_file: Path) -> None:
    """TC-01: Standard execution prints both answers (Exit Code 0)."""
    result = run_cli(["-i", str(sample_input_file)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "Result for part 1 = 95437" in result.stdout
    assert "Result for part 2 = 24933642" in result.stdout


def test_cli_single_part_with_custom_threshold(sample_input_file: Path) -> None:
    result = run_cli(["-i", str(sample_input_file), "--part", "1", "--threshold", "1000"])

    assert result.returncode == 0
    assert result.stdout.strip() == "Result for part 1 = 584"


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """TC-02: Missing input returns exit code 2."""
    result = run_cli(["-i", str(tmp_path / "absent.txt")])

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_reports_malformed_transcript(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("$ cd /\n$ format c:\n", encoding="utf-8")

    result = run_cli(["-i", str(bad)])

    assert result.returncode == 1
    assert "format c:" in result.stderr


def test_cli_json_output_structure(sample_input_file: Path) -> None:
    """TC-03: JSON mode emits one object per part."""
    result = run_cli(["-i", str(sample_input_file), "--json"])

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert [item["part"] for item in data] == [1, 2]
    assert data[0]["answer"] == 95437
    assert data[1]["summary"]["deletion_target"] == 8381165


def test_cli_config_file_and_dump(tmp_path: Path, sample_input_file: Path) -> None:
    """TC-04: Values from --config are merged and CLI flags override them."""
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"size_threshold": 650, "total_space": 9000}), encoding="utf-8")

    result = run_cli([
        "--config", str(cfg),
        "-i", str(sample_input_file),
        "--total-space", "80000000",
        "--dump-config",
    ])

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["size_threshold"] == 650
    assert data["total_space"] == 80000000
    assert data["input_path"] == str(sample_input_file)


def test_cli_print_tree(sample_input_file: Path) -> None:
    result = run_cli(["-i", str(sample_input_file), "--part", "1", "--print-tree"])

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "/ (dir, size=48381165)"
    assert "├── a/ (dir, size=94853)" in lines
