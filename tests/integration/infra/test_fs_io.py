from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates cross-platform data directory resolution and parent directory
creation for configuration and log files.
"""

import os
from pathlib import Path
from unittest.mock import patch

from modelhierarchy.infra.fs import ensure_parent_dir, get_user_data_dir

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "ModelHierarchy" in path


def test_get_user_data_dir_unix() -> None:
    """TC-02: Verify resolution of ~/.modelhierarchy on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.modelhierarchy")


def test_get_user_data_dir_tolerates_unwritable_home() -> None:
    """TC-03: Verify that directory creation failures do not propagate."""
    with patch("os.makedirs", side_effect=OSError("read-only")):
        assert get_user_data_dir()

# -----------------------------------------------------------------------------
# DIRECTORY CREATION TESTS
# -----------------------------------------------------------------------------

def test_ensure_parent_dir_creates_hierarchy(tmp_path: Path) -> None:
    """TC-04: Verify nested parent directories are created for a file path."""
    target = tmp_path / "a" / "b" / "config.json"

    ensure_parent_dir(str(target))
    ensure_parent_dir(str(target))

    assert target.parent.is_dir()
    assert not target.exists()
