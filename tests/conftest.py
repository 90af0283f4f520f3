from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def flat_colors() -> dict[str, Any]:
    """Flat token map in the shape design tools export."""
    return {
        "primary": "#ff0000",
        "primary-foreground": "#ffffff",
        "accent": "oklch(0.7 0.1 200)",
        "sidebar": {"primary": "#222222", "primary-foreground": "#eeeeee"},
    }


@pytest.fixture
def write_options(tmp_path: Path):
    """Write an options mapping to a YAML file and return its path."""

    def _write(options: Any, name: str = "preset-color.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.safe_dump(options, f)
        return path

    return _write
