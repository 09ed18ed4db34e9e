#!/usr/bin/env python3
"""
Command-line interface for Keg Tracker
"""
import sys
import argparse
from typing import List, Optional

from . import __version__
from .shell import KegShell
from .tracker import KegTracker


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser_cli = argparse.ArgumentParser(
        prog="keg-tracker",
        description="Keg Tracker - Track beer kegs and their contents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the interactive menu
  keg-tracker

  # Show volumes in liters in the prompts (no conversion is done)
  keg-tracker --unit liters
        """
    )
    parser_cli.add_argument('--unit', type=str, default='gallons',
                            help='Volume unit shown in prompts (default: gallons)')
    parser_cli.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser_cli.parse_args(argv)

    tracker = KegTracker()
    return KegShell(tracker, unit=args.unit).run()


if __name__ == '__main__':
    sys.exit(main())
