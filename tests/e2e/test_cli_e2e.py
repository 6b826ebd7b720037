from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess with scripted standard input. These tests validate
exit codes, stream output (stdout/stderr) and filesystem side effects.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "treeshell" / "main.py"


def run_cli(args: List[str], stdin: str = "", cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH. Preferences and log files
    are disabled so no user files are touched.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        stdin: Text fed to the interactive prompts.
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT), "--use-defaults", "--no-log-file"] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


def test_show_tree_and_exit(simple_root: Path) -> None:
    """TC-01: Prompted path, tree display, normal exit (code 0)."""
    result = run_cli([], stdin=f"{simple_root}\n1\n6\n")

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    lines = result.stdout.splitlines()
    assert "Enter path: Menu:" in lines
    assert f"Choice: + {simple_root}" in lines
    assert "  - a.txt" in lines
    assert "  + d" in lines
    assert lines[-1] == "Choice: Exiting..."


def test_missing_root_exits_with_one(tmp_path: Path) -> None:
    """TC-02: Invalid initial path, exit code 1 and message on stderr."""
    missing = tmp_path / "does" / "not" / "exist"
    result = run_cli([], stdin=f"{missing}\n")

    assert result.returncode == 1
    assert "Not a directory" in result.stderr
    assert "Menu:" not in result.stdout


def test_full_session_mutations(simple_root: Path) -> None:
    """TC-03: Create file, search it, fail on existing dir, delete dir."""
    script = "\n".join([
        "4", "b.txt",
        "2", "b",
        "3", "d",
        "5", "d",
        "1",
        "6",
    ]) + "\n"
    result = run_cli(["-p", str(simple_root)], stdin=script)

    assert result.returncode == 0, result.stderr
    assert "Found files:\nb.txt\n" in result.stdout
    assert "Already exists: 'd'" in result.stdout
    assert "Deleted: d" in result.stdout
    assert (simple_root / "b.txt").is_file()
    assert not (simple_root / "d").exists()


def test_end_of_input_is_clean_exit(simple_root: Path) -> None:
    """TC-04: Closing stdin ends the session with code 0."""
    result = run_cli(["-p", str(simple_root)], stdin="1\n")

    assert result.returncode == 0
    assert "End of input" in result.stdout


def test_cli_help_message() -> None:
    """TC-05: Help message is displayed (smoke test for argparse)."""
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: treeshell" in result.stdout
