"""
Grocery Split - split a shared purchase from recognized receipt text

python3 main.py receipt.txt                              # Show parsed items
python3 main.py receipt.txt --people Alice Bob           # Equal split
python3 main.py - --people Alice Bob --assign smart      # Read stdin, settle up
python3 main.py --barcode TXN12345 --people Alice Bob    # Scanned barcode payload
python3 main.py receipt.txt --percent Alice=60 Bob=40    # Percentage split
"""

import sys
import argparse

from cli_interface import ASSIGN_METHODS, SplitCLI, parse_percentages, parse_weights
from config import DEFAULT_CURRENCY
from exceptions import ScanningError, describe_error
from exporter import default_export_filename
from scanning import ReceiptScanner

__version__ = '1.0'


def read_text(source: str) -> str:
    """Read already-recognized text from a file, or stdin for '-'

    Bytes that are not valid UTF-8 become U+FFFD so one garbled line from the
    recognizer does not lose the rest of the receipt.
    """
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Grocery Split - split a shared purchase between people',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  grocery-split receipt.txt --people Alice Bob Charlie
  grocery-split receipt.txt --people Alice Bob --assign weighted --weights Alice=2 Bob=1
  grocery-split --barcode QR001 --people Alice Bob --export
  grocery-split receipt.txt --percent Alice=60 Bob=40
        """
    )

    parser.add_argument(
        'source',
        nargs='?',
        help="File with recognized receipt text, '-' for stdin"
    )
    parser.add_argument(
        '--barcode',
        help='Decoded barcode/QR payload instead of receipt text'
    )
    parser.add_argument(
        '--people',
        nargs='+',
        default=[],
        help='Names of people splitting the bill'
    )
    parser.add_argument(
        '--assign',
        choices=ASSIGN_METHODS,
        default='none',
        help='How to assign items to people before settling (default: none)'
    )
    parser.add_argument(
        '--weights',
        nargs='+',
        help='NAME=WEIGHT pairs for weighted and smart assignment'
    )
    parser.add_argument(
        '--percent',
        nargs='+',
        help='NAME=PCT pairs for a percentage split instead of an equal one'
    )
    parser.add_argument(
        '--currency',
        default=DEFAULT_CURRENCY,
        help=f'Currency used for display (default: {DEFAULT_CURRENCY})'
    )
    parser.add_argument(
        '--export',
        nargs='?',
        const='',
        help='Export the split to JSON (default file name when no path is given)'
    )
    parser.add_argument(
        '--quick',
        action='store_true',
        help='Quick mode - show parsed items only'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'Grocery Split {__version__}'
    )
    return parser


def run(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.source and not args.barcode:
        parser.error('a text source or --barcode is required')

    scanner = ReceiptScanner()
    try:
        if args.barcode:
            scan = scanner.scan_code(args.barcode)
        else:
            source_id = None if args.source == '-' else args.source
            scan = scanner.scan_text(read_text(args.source), source_id=source_id)
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Could not read {args.source}: {e}")
        return 1
    except ScanningError as e:
        info = describe_error(e)
        print(f"⚠ {info.title}: {info.message}")
        return 1

    export_path = args.export
    if export_path == '':
        export_path = default_export_filename()

    cli = SplitCLI(currency=args.currency)
    ok = cli.run(
        scan,
        args.people,
        method=args.assign,
        weights=parse_weights(args.weights),
        quick=args.quick,
        export_path=export_path,
        percentages=parse_percentages(args.percent),
    )
    return 0 if ok else 1


def main(argv=None) -> int:
    """Main entry point"""
    try:
        return run(argv)
    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
