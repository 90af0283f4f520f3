import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from preset_color.components.preset.models import PresetColorOptions

DEFAULT_OPTIONS_PATH = "preset-color.yaml"
OPTIONS_PATH_ENV = "PRESET_COLOR_OPTIONS"


class PresetOptionsError(ValueError):
    """Raised when a preset options file cannot be parsed or validated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Preset options invalid: {'; '.join(errors)}")


def options_path(env: Mapping[str, str] | None = None) -> Path:
    """Options file from PRESET_COLOR_OPTIONS, else preset-color.yaml."""
    env = os.environ if env is None else env
    return Path(env.get(OPTIONS_PATH_ENV) or DEFAULT_OPTIONS_PATH)


def _format_pydantic_errors(exc: ValidationError) -> list[str]:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        errors.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return errors


def load_preset_options(path: Path | str) -> PresetColorOptions:
    """
    Load and validate a preset options file.
    Raises FileNotFoundError if file missing.
    Raises PresetOptionsError if YAML or schema invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Preset options file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise PresetOptionsError([f"Invalid YAML syntax in {path}: {e}"]) from e

    # An empty file means default options
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PresetOptionsError([f"{path}: top level must be a mapping"])

    try:
        return PresetColorOptions.model_validate(data)
    except ValidationError as e:
        raise PresetOptionsError(_format_pydantic_errors(e)) from e
