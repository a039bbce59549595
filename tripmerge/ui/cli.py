"""Command-line interface for TripMerge."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .. import __version__
from ..importing import SECTIONS, generate_preview_data
from ..matching import calculate_string_similarity, get_duplicate_display_name
from ..utils.config import configure_logging, default_config


def load_json_file(filepath: str) -> Any:
    """Load a JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}") from e


def print_preview(preview: Dict[str, Any]) -> None:
    """Print section counts and every duplicate found.

    Args:
        preview: Preview data from generate_preview_data
    """
    stats = preview['stats']

    print("\n" + "=" * 60)
    print("IMPORT PREVIEW")
    print("=" * 60)
    print(f"Total Items:            {stats['totalItems']:,}")
    print(f"Duplicates:             {stats['totalDuplicates']:,}")
    print(f"Standalone Items:       {stats['totalStandalone']:,}")
    print()

    for section in SECTIONS:
        counts = preview['sections'][section]
        if counts['count']:
            print(f"{section:<24}{counts['count']:>6,} ({counts['duplicates']} duplicates)")

    duplicates = [item for item in preview['items'] if item['isDuplicate']]
    if duplicates:
        print("\nDUPLICATES:")
        print("-" * 60)
        for item in duplicates:
            label = get_duplicate_display_name(item['data'], item['type'])
            print(f"[{item['type']}] {label} ({item['duplicateSimilarity']}% similar)")
            print(f"   {item['summary']}")

    print("=" * 60 + "\n")


def preview_command(args: argparse.Namespace) -> int:
    """Execute the preview command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        import_data = load_json_file(args.file)
        current_data = load_json_file(args.existing) if args.existing else {}
        preview = generate_preview_data(import_data, current_data)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if args.json:
        print(json.dumps(preview, indent=default_config.json_indent, default=str))
    else:
        print_preview(preview)
    return 0


def similarity_command(args: argparse.Namespace) -> int:
    """Execute the similarity command."""
    score = calculate_string_similarity(args.first, args.second)
    print(f"{score:.1f}%")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='tripmerge',
        description='Find duplicate travel items when importing account data.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    preview_parser = subparsers.add_parser(
        'preview',
        help='Preview an account export and flag duplicates'
    )
    preview_parser.add_argument(
        'file',
        help='Path to the exported account JSON file'
    )
    preview_parser.add_argument(
        '-e', '--existing',
        help='Path to a JSON file with the current account data'
    )
    preview_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the full preview as JSON'
    )

    similarity_parser = subparsers.add_parser(
        'similarity',
        help='Show the similarity percentage of two strings'
    )
    similarity_parser.add_argument('first', help='First string')
    similarity_parser.add_argument('second', help='Second string')

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(default_config, verbose=args.verbose)

    if args.command == 'preview':
        return preview_command(args)
    elif args.command == 'similarity':
        return similarity_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
