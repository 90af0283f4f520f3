"""
Preset options loader tests.

Verifies YAML loading, schema validation and the options path lookup.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from preset_color.components.contrast import ContrastOptions
from preset_color.config import (
    DEFAULT_OPTIONS_PATH,
    OPTIONS_PATH_ENV,
    PresetOptionsError,
    load_preset_options,
    options_path,
)


class TestLoadPresetOptions:
    """Test options file loading."""

    def test_load_full_options(self, write_options, flat_colors) -> None:
        """Colors and contrast settings are read and validated."""
        path = write_options(
            {"colors": flat_colors, "contrast": {"suffix": "fg", "defaultDelta": 40}}
        )
        options = load_preset_options(path)
        assert options.colors == flat_colors
        assert options.contrast == ContrastOptions(suffix="fg", default_delta=40)

    def test_contrast_true(self, write_options) -> None:
        options = load_preset_options(write_options({"contrast": True}))
        assert options.contrast is True

    def test_bare_contrast_key(self, tmp_path: Path) -> None:
        """A ``contrast:`` key with no value loads as disabled."""
        path = tmp_path / "bare.yaml"
        path.write_text("colors:\n  a: red\ncontrast:\n")
        options = load_preset_options(path)
        assert options.colors == {"a": "red"}
        assert options.contrast is None

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty options file means default options."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        options = load_preset_options(path)
        assert options.colors is None
        assert options.contrast is False

    def test_numeric_shades(self, tmp_path: Path) -> None:
        """Unquoted YAML shade keys load as strings."""
        path = tmp_path / "shades.yaml"
        path.write_text("colors:\n  gray:\n    500: '#6b7280'\n")
        options = load_preset_options(path)
        assert options.colors == {"gray": {"500": "#6b7280"}}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_preset_options(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("colors: [")
        with pytest.raises(PresetOptionsError) as exc_info:
            load_preset_options(path)
        assert "Invalid YAML syntax" in exc_info.value.errors[0]

    def test_non_mapping_top_level(self, write_options) -> None:
        with pytest.raises(PresetOptionsError) as exc_info:
            load_preset_options(write_options(["red", "blue"]))
        assert "top level must be a mapping" in exc_info.value.errors[0]

    def test_schema_errors_are_listed(self, write_options) -> None:
        """Each validation problem is reported with its location."""
        path = write_options({"colors": {"primary": None}, "contrast": {"defaultDelta": "x"}})
        with pytest.raises(PresetOptionsError) as exc_info:
            load_preset_options(path)
        errors = exc_info.value.errors
        assert any(e.startswith("colors") and "colors.primary" in e for e in errors)
        assert any("contrast" in e for e in errors)

    def test_error_is_value_error(self, write_options) -> None:
        with pytest.raises(ValueError):
            load_preset_options(write_options({"unknown": 1}))


class TestOptionsPath:
    """Test options path lookup."""

    def test_default(self) -> None:
        assert options_path({}) == Path(DEFAULT_OPTIONS_PATH)

    def test_from_env(self) -> None:
        assert options_path({OPTIONS_PATH_ENV: "/etc/colors.yaml"}) == Path("/etc/colors.yaml")

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(OPTIONS_PATH_ENV, "custom.yaml")
        assert options_path() == Path("custom.yaml")
