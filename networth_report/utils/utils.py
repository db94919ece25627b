"""Generic project helpers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the ``networth_report`` package.
    """
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
