"""
Retro Tile Studio - Editor Main

Command-line entry point for the editor application.

Usage:
    retrotile-editor [--palettes FILE ...] [--tiles FILE ...] [--scale N]
"""

import argparse
import sys
from pathlib import Path

from retrotile.logging_config import setup_logging

from .core.constants import DEFAULT_MAP_SCALE, MAX_MAP_SCALE, MIN_MAP_SCALE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Edit a 32x32 tile map built from 4bpp tiles and 15-bit palettes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Start empty and upload files from the toolbar:
    retrotile-editor

  Preload assets (files are appended in the order given):
    retrotile-editor --palettes bg.pal --tiles bg1.bin bg2.bin

  Larger map view with debug logging:
    retrotile-editor --scale 3 --log-level DEBUG
        """,
    )
    parser.add_argument(
        "--palettes", nargs="+", default=[], metavar="FILE", help="Palette files to load"
    )
    parser.add_argument(
        "--tiles", nargs="+", default=[], metavar="FILE", help="Tile files to load"
    )
    parser.add_argument(
        "--scale",
        type=int,
        choices=range(MIN_MAP_SCALE, MAX_MAP_SCALE + 1),
        default=DEFAULT_MAP_SCALE,
        help=f"Tile map magnification (default: {DEFAULT_MAP_SCALE})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def validate_asset_files(paths: list[str], label: str) -> list[str]:
    """Return the error messages for paths that are missing or not files."""
    errors = []
    for path in paths:
        p = Path(path)
        if not p.exists():
            errors.append(f"{label} file not found: {path}")
        elif not p.is_file():
            errors.append(f"{label} path is not a file: {path}")
    return errors


def main(argv: list[str] | None = None):
    """Main entry point for the editor."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level, args.log_file)

    # Validate files exist before starting pygame
    errors = validate_asset_files(args.palettes, "Palette") + validate_asset_files(
        args.tiles, "Tile"
    )
    if errors:
        for message in errors:
            logger.error(message)
        sys.exit(1)

    from .application import EditorApplication

    app = EditorApplication(map_scale=args.scale)
    if args.palettes:
        app.load_palettes(args.palettes)
    if args.tiles:
        app.load_tiles(args.tiles)
    app.run()


if __name__ == "__main__":
    main()
