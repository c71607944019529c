"""Application configuration: window options and command-line flags."""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "ImageViewer"
ORGANIZATION = "ImageViewer"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class AppConfig:
    title: str = "Image Viewer"
    width: int = 800
    height: int = 600
    background_color: str = "#ffffff"
    log_level: int = logging.INFO
    log_file: Path | None = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="image-viewer", description="Browse the images in a folder.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Logging verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    return parser


def load_config(argv: list[str] | None = None) -> AppConfig:
    """Build the AppConfig from command-line arguments (sys.argv when None).

    Unknown arguments are ignored so Qt's own flags (e.g. -platform) pass through.
    """
    args, _ = build_parser().parse_known_args(argv)
    return AppConfig(
        log_level=getattr(logging, args.log_level),
        log_file=args.log_file,
    )
