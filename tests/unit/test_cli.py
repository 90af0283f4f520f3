"""
CLI tests: theme, preflight and render commands.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from preset_color.app_shell.cli import main
from preset_color.config import OPTIONS_PATH_ENV


@pytest.fixture
def options_file(write_options, flat_colors) -> Path:
    return write_options({"colors": flat_colors, "contrast": True})


class TestThemeCommand:
    def test_prints_split_theme(self, options_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--options", str(options_file), "theme"])
        theme = json.loads(capsys.readouterr().out)
        assert theme["colors"]["primary"] == {"DEFAULT": "#ff0000", "foreground": "#ffffff"}
        assert theme["colors"]["sidebar"]["primary"]["foreground"] == "#eeeeee"

    def test_options_from_env(
        self,
        options_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(OPTIONS_PATH_ENV, str(options_file))
        main(["theme", "--indent", "0"])
        assert "primary" in json.loads(capsys.readouterr().out)["colors"]


class TestPreflightCommand:
    def test_prints_variables(self, options_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--options", str(options_file), "preflight"])
        out = capsys.readouterr().out
        assert "--contrast-dark: 1;" in out
        assert '[data-kb-theme="dark"]' in out

    def test_contrast_disabled(
        self, write_options, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_options({"colors": {"primary": "red"}})
        with caplog.at_level(logging.WARNING, logger="cli"):
            main(["--options", str(path), "preflight"])
        assert capsys.readouterr().out == ""
        assert "Contrast is disabled" in caplog.text


class TestRenderCommand:
    def test_renders_utilities(self, options_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--options", str(options_file), "render", "text-primary-foreground"])
        out = capsys.readouterr().out
        assert ".text-primary-foreground{color:#ffffff;" in out
        assert "oklch(from #ff0000" in out

    def test_warns_for_unmatched(
        self,
        options_file: Path,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="cli"):
            main(["--options", str(options_file), "render", "p-4"])
        assert "No CSS generated for 'p-4'" in caplog.text


class TestErrors:
    def test_missing_options_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--options", str(tmp_path / "nope.yaml"), "theme"])
        assert exc_info.value.code == 1

    def test_invalid_options_file(
        self, write_options, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_options({"contrast": {"sufix": "fg"}})
        with caplog.at_level(logging.ERROR, logger="cli"):
            with pytest.raises(SystemExit) as exc_info:
                main(["--options", str(path), "theme"])
        assert exc_info.value.code == 1
        assert "sufix" in caplog.text
