from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: exit codes, stream output (stdout/stderr) and file
system side effects. HOME is redirected so the user's saved configuration
is never read or written.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "scriptfmt" / "main.py"


def run_cli(
        args: List[str],
        home: Path,
        stdin: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        home: Directory used as the user's home for this run.
        stdin: Text piped to the process.

    Returns:
        subprocess.CompletedProcess: Return code, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        input=stdin if stdin is not None else "",
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_minify_stdin(tmp_path: Path) -> None:
    """TC-01: Minified text goes to stdout with a trailing newline."""
    result = run_cli(["--use-defaults", "-m", "minify"], tmp_path, stdin="a = 1; // c\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a=1;\n"


def test_cli_beautify_file(tmp_path: Path) -> None:
    """TC-02: Beautified text is written to the requested file."""
    source = tmp_path / "in.js"
    target = tmp_path / "out.js"
    source.write_text("function f(){return 1;}", encoding="utf-8")

    result = run_cli(["--use-defaults", "-i", str(source), "-o", str(target)], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert target.read_text(encoding="utf-8") == "function f(){\n  return 1;\n}"


def test_cli_json_output(tmp_path: Path) -> None:
    """TC-03: --json prints the whole result."""
    result = run_cli(["--use-defaults", "--minify", "--json"], tmp_path, stdin="let x = 'a  b' ;")

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["mode"] == "minify"
    assert data["output"] == "let x='a  b';"
    assert data["fallback"] is False


def test_cli_missing_input(tmp_path: Path) -> None:
    """TC-04: A missing input file exits with code 2."""
    result = run_cli(["--use-defaults", "-i", str(tmp_path / "ghost.js")], tmp_path)

    assert result.returncode == 2
    assert "ghost.js" in result.stderr


def test_cli_invalid_mode_rejected_by_parser(tmp_path: Path) -> None:
    """TC-05: argparse refuses unknown modes."""
    result = run_cli(["--mode", "uglify"], tmp_path)
    assert result.returncode == 2
    assert "invalid choice" in result.stderr


@pytest.mark.skipif(os.name == "nt", reason="Home directory layout differs on Windows")
def test_cli_saved_config_is_reused(tmp_path: Path) -> None:
    """TC-06: Settings saved once become the defaults of later runs."""
    saved = run_cli(["--save-config", "--dump-config", "-m", "minify", "--indent", "4"], tmp_path)
    assert saved.returncode == 0, saved.stderr
    assert (tmp_path / ".scriptfmt" / "config.json").exists()

    dumped = run_cli(["--dump-config"], tmp_path)
    conf = json.loads(dumped.stdout)
    assert conf["mode"] == "minify"
    assert conf["indent_size"] == 4

    ignored = run_cli(["--dump-config", "--use-defaults"], tmp_path)
    assert json.loads(ignored.stdout)["mode"] == "beautify"
