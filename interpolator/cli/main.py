"""Main CLI entry point for interpolator."""

import argparse
import sys
from typing import Optional

from interpolator.config import LOG_LEVELS
from .commands import interpolate_files


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the interpolate CLI."""
    parser = argparse.ArgumentParser(
        prog='interpolate',
        description=(
            'Interpolate the environment variables inside {{}} in files and '
            'substitute them with the value of the variables'
        )
    )
    parser.add_argument(
        'files',
        nargs='+',
        metavar='FILE',
        help='Template files; each result is written to out-<name> next to the input'
    )
    parser.add_argument(
        '-p', '--prefix',
        type=str,
        default=None,
        help='Primary prefix to add when looking for environment variables'
    )
    parser.add_argument(
        '-a', '--alternative-prefix',
        type=str,
        default=None,
        help='Prefix to use when the primary prefixed variable is unset or empty'
    )
    parser.add_argument(
        '--config',
        type=str,
        metavar='FILE',
        help='Path to a YAML config file (default: .interpolate.yaml if present)'
    )
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default=None,
        help='Set log level (default: info)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return interpolate_files(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
