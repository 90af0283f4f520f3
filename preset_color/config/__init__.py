from preset_color.config.loader import (
    DEFAULT_OPTIONS_PATH,
    OPTIONS_PATH_ENV,
    PresetOptionsError,
    load_preset_options,
    options_path,
)

__all__ = [
    "DEFAULT_OPTIONS_PATH",
    "OPTIONS_PATH_ENV",
    "PresetOptionsError",
    "load_preset_options",
    "options_path",
]
