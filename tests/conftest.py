from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared on-disk directory fixtures used across unit and e2e tests.
3. Reset of process-wide singletons (locale, logging) between tests.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treeshell.infra.logging import shutdown_logging  # noqa: E402
from treeshell.utils.i18n import i18n  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_singletons() -> Iterator[None]:
    """Restore the English locale and detach managed log handlers."""
    yield
    i18n.load_locale("en")
    shutdown_logging()


@pytest.fixture
def simple_root(tmp_path: Path) -> Path:
    """
    Directory with one file and one empty subdirectory.

    Structure:
    /x
      a.txt
      /d
    """
    root = tmp_path / "x"
    root.mkdir()
    (root / "a.txt").write_text("", encoding="utf-8")
    (root / "d").mkdir()
    return root


@pytest.fixture
def nested_root(tmp_path: Path) -> Path:
    """
    Deeper hierarchy with repeated basenames.

    Structure:
    /project
      README.md
      /src
        main.py
        /pkg
          main.py
          util.py
      /docs
        guide.md
      /empty
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("# Readme", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("print('hi')", encoding="utf-8")
    pkg = src / "pkg"
    pkg.mkdir()
    (pkg / "main.py").write_text("", encoding="utf-8")
    (pkg / "util.py").write_text("", encoding="utf-8")

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("", encoding="utf-8")

    (root / "empty").mkdir()
    return root
