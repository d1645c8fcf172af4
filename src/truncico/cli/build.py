"""
CLI handler for JSON face export.
"""

import argparse
import logging

from ..geometry.truncation import build_truncated_icosahedron
from ..utils.export import faces_to_document, write_document
from .common import add_build_options, config_from_args

logger = logging.getLogger(__name__)

def register_arguments(parser: argparse.ArgumentParser):
    add_build_options(parser)
    parser.add_argument("--out", type=str, default="-", help="Output JSON path ('-' for stdout)")

def run(args: argparse.Namespace):
    cfg = config_from_args(args)
    faces = build_truncated_icosahedron(config=cfg)
    doc = faces_to_document(faces, cfg)
    write_document(doc, args.out)
    if args.out != "-":
        logger.info("Wrote %d faces → %s", len(doc["faces"]), args.out)
