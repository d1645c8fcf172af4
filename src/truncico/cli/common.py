"""
Options shared by every sub-command.
"""

import argparse

from ..config import DEFAULT_TRUNCATION, BuildConfig

def add_build_options(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--truncation", "-s",
        type=float,
        default=DEFAULT_TRUNCATION,
        help="Fraction along each edge where corners are cut, in (0, 1)",
    )
    parser.add_argument("--scale", type=float, default=100.0, help="Linear scale for sizes and offsets")
    parser.add_argument("--planarity-tolerance", type=float, default=1e-6)

def config_from_args(args: argparse.Namespace) -> BuildConfig:
    return BuildConfig(
        truncation=args.truncation,
        scale=args.scale,
        planarity_tolerance=args.planarity_tolerance,
    ).validate()
