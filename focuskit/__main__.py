"""
Application entry point.

Usage:
    python -m focuskit [options]

Options:
    --dev           Enable development mode (debug logging, focus overlay)
    --scale N       Display scale factor (1, 2, or 4) [default: 1]
    --headless      Run without a window (dummy SDL video driver)
    --frames N      Stop after N frames
    --strict        Re-raise focus errors instead of logging them
    --log-file PATH Also write logs to a rotating file

Keys:
    Tab / arrows    Move the tab selection
    Enter           Activate the selected tab
    Escape          Clear the selection, quit when nothing is selected
    Mouse wheel     Scroll the hotbar
    Click           Focus a window

Examples:
    python -m focuskit --dev --scale 2
    python -m focuskit --headless --frames 60
"""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import Config
from .core.app import Application


def setup_logging(dev_mode: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if dev_mode else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)

    # Root logger
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)

    if log_file is not None:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            logging.info(f"File logging enabled: {log_file}")
        except OSError as e:
            logging.warning(f"Could not enable file logging: {e}")

    logging.info("Logging initialized")


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="focuskit - focus coordination demo"
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Enable development mode"
    )
    parser.add_argument(
        "--scale",
        type=int,
        choices=[1, 2, 4],
        default=None,
        help="Display scale factor (1, 2, or 4). Default: 2 in dev mode, 1 otherwise"
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without opening a window"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Re-raise focus errors instead of only logging them"
    )
    parser.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap tab navigation instead of passing through 'no selection'"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to a rotating file"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if args.scale is not None:
        scale = args.scale
    elif args.dev:
        scale = 2  # Larger for development
    else:
        scale = 1

    return Config(
        dev_mode=args.dev,
        scale_factor=scale,
        headless=args.headless,
        strict=args.strict,
        null_cycle=not args.wrap
    )


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging first
    setup_logging(dev_mode=args.dev, log_file=args.log_file)

    logger = logging.getLogger(__name__)
    logger.info("focuskit demo starting...")

    config = build_config(args)
    logger.info(f"Config: dev={config.dev_mode}, scale={config.scale_factor}, strict={config.strict}")

    app = Application(config)

    try:
        app.run(max_frames=args.frames)
    except KeyboardInterrupt:
        print("\nShutdown requested...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
