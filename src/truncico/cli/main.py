"""
Unified CLI entry point for truncated icosahedron builds.
"""

import argparse
import logging
import sys

# Import sub-command handlers
from . import build
from . import info
from . import preview
from ..errors import TruncicoError

logger = logging.getLogger(__name__)

def setup_logging(level_str: str):
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

def main(argv=None):
    parser = argparse.ArgumentParser(description="Truncated icosahedron face builder")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Sub-commands")

    # Face data export
    cmd_build = subparsers.add_parser("build", help="Build faces and write them as JSON")
    build.register_arguments(cmd_build)

    # PNG preview
    cmd_preview = subparsers.add_parser("preview", help="Render the solid and its flattened faces")
    preview.register_arguments(cmd_preview)

    # Summary
    cmd_info = subparsers.add_parser("info", help="Print topology counts and solid metrics")
    info.register_arguments(cmd_info)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    handlers = {
        "build": build.run,
        "preview": preview.run,
        "info": info.run,
    }
    try:
        handlers[args.command](args)
    except TruncicoError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
