import argparse
import json
import logging
import sys
from pathlib import Path

from preset_color.adapters.dev_host import DevHost
from preset_color.components.preset import Preset, preset_color
from preset_color.config.loader import (
    PresetOptionsError,
    load_preset_options,
    options_path,
)

logger = logging.getLogger("cli")


def get_preset(path_arg: str | None) -> Preset:
    path = Path(path_arg) if path_arg else options_path()
    if not path.exists():
        logger.error(f"Options file {path} not found.")
        sys.exit(1)

    try:
        options = load_preset_options(path)
    except PresetOptionsError as e:
        for error in e.errors:
            logger.error(error)
        sys.exit(1)

    return preset_color(options)


def handle_theme(preset: Preset, args: argparse.Namespace) -> None:
    print(json.dumps(preset.theme, indent=args.indent))


def handle_preflight(preset: Preset, args: argparse.Namespace) -> None:
    css = DevHost(preset).preflight_css()
    if not css:
        logger.warning("Contrast is disabled; no preflight CSS.")
        return
    print(css, end="")


def handle_render(preset: Preset, args: argparse.Namespace) -> None:
    host = DevHost(preset)
    print(host.render(args.utilities))
    for utility in host.unmatched:
        logger.warning(f"No CSS generated for '{utility}'.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="preset-color CLI")
    parser.add_argument("--options", help="Path to options YAML (default: $PRESET_COLOR_OPTIONS)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # theme
    theme_parser = subparsers.add_parser("theme", help="Print the split theme colors as JSON")
    theme_parser.add_argument("--indent", type=int, default=2, help="JSON indent")

    # preflight
    subparsers.add_parser("preflight", help="Print preflight CSS")

    # render
    render_parser = subparsers.add_parser("render", help="Print CSS for utility classes")
    render_parser.add_argument("utilities", nargs="+", help="Utility class names")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    preset = get_preset(args.options)

    if args.command == "theme":
        handle_theme(preset, args)
    elif args.command == "preflight":
        handle_preflight(preset, args)
    elif args.command == "render":
        handle_render(preset, args)


if __name__ == "__main__":
    main()
