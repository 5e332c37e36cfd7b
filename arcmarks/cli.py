#!/usr/bin/env python3
"""
Arc Bookmarks Export

Export the pinned tabs and folders of Arc Browser spaces to a Netscape
bookmarks HTML file that any browser can import.
"""

import argparse
import sys
from pathlib import Path

from .errors import ArcDataError
from .exporter import Colors, export_to_html


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcmarks",
        description="Export Arc Browser pinned spaces to a bookmarks HTML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  arcmarks                                  # Export to arc_bookmarks_<date>.html
  arcmarks -i ~/Desktop/StorableSidebar.json
  arcmarks -o bookmarks.html --escape
        """
    )
    parser.add_argument(
        '-i', '--input',
        type=Path,
        help='Path to StorableSidebar.json (default: current directory, then Arc data directory)'
    )
    parser.add_argument(
        '-o', '--output',
        type=Path,
        help='Output HTML file (default: arc_bookmarks_YYYY_MM_DD.html)'
    )
    parser.add_argument(
        '--escape',
        action='store_true',
        help='HTML-escape titles and URLs instead of writing them verbatim'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging output'
    )
    parser.add_argument(
        '-q', '--silent',
        action='store_true',
        help='Disable logging output'
    )
    return parser


def print_header():
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Arc Bookmarks Export{Colors.RESET}")
    print("=" * 60)


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if not args.silent:
        print_header()

    try:
        bookmarks, folders = export_to_html(
            input_path=args.input,
            output_path=args.output,
            escape=args.escape,
            verbose=args.verbose,
            silent=args.silent,
        )
    except ArcDataError as e:
        print(f"\n{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n{Colors.RED}Unexpected error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    print()
    print(f"{Colors.GREEN}Export completed!{Colors.RESET}")
    print(f"  Bookmarks: {bookmarks}")
    print(f"  Folders: {folders}")
    return 0


def run():
    """Console script wrapper: exit with main()'s status."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(0)


if __name__ == "__main__":
    run()
