"""
Command-line interface for the result cleaner.
"""

import sys
import argparse
from typing import List, Optional

from .logging_setup import setup_logger, log_stats
from .sources import load_text, STDIN_SOURCE
from .parser import parse_contacts
from .writer import contacts_to_csv, write_json, write_csv, calculate_field_stats


def print_banner(logger):
    """Print startup banner."""
    logger.info("═" * 40)
    logger.info("  RESULT CLEANER v1.0")
    logger.info("  Pasted Results to Contact CSV")
    logger.info("═" * 40)
    logger.info("")


def print_summary(contacts, logger):
    """Print field coverage statistics."""
    stats = calculate_field_stats(contacts)
    total = stats["totalContacts"]

    summary = {"Total Contacts": total}
    for field, count in stats["fieldCounts"].items():
        summary[f"With {field.capitalize()}"] = f"{count}/{total} ({stats['fieldCoverage'][field]}%)"
    summary["Complete Records"] = f"{stats['completeRecords']}/{total}"

    logger.info("")
    log_stats(logger, summary, title="Summary Statistics")


def print_sample_contacts(contacts, logger, limit=5):
    """Print sample contacts."""
    logger.info("")
    logger.info(f"Sample Contacts (first {min(limit, len(contacts))}):")

    for i, contact in enumerate(contacts[:limit], 1):
        name = contact.name or "N/A"
        title = contact.title or "N/A"
        email = contact.email or "N/A"
        phone = contact.phone or "N/A"
        logger.info(f"{i}. {name} ({title}) - {email} - {phone}")


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='result-cleaner',
        description='Convert pasted Google / LinkedIn results into a contact CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'source',
        nargs='?',
        default=STDIN_SOURCE,
        help='Text or PDF file with pasted results (default: - for stdin)'
    )

    parser.add_argument(
        '--pdf',
        action='store_true',
        help='Read the source as a PDF regardless of its extension'
    )

    parser.add_argument(
        '--output', '-o',
        choices=['csv', 'json'],
        default='csv',
        help='Output format (default: csv)'
    )

    parser.add_argument(
        '--out-dir',
        default='output',
        help='Output directory (default: output)'
    )

    parser.add_argument(
        '--stdout',
        action='store_true',
        help='Print the CSV to stdout instead of writing a file'
    )

    parser.add_argument(
        '--limit', '-l',
        type=positive_int,
        default=None,
        help='Limit number of contacts (optional)'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG log to this file (optional)'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logger = setup_logger(level=args.log_level, log_file=args.log_file)

    print_banner(logger)

    logger.info(f"Source: {'stdin' if args.source == STDIN_SOURCE else args.source}")
    logger.info(f"Limit: {args.limit}")
    logger.info(f"Output: {'stdout' if args.stdout else args.output}")
    logger.info("")

    try:
        logger.info("Reading raw text...")
        raw_text = load_text(args.source, pdf=args.pdf)
        logger.debug(f"Read {len(raw_text)} characters")

        logger.info("Parsing contact blocks...")
        contacts = parse_contacts(raw_text)
        logger.info(f"Found {len(contacts)} contacts")

        if not contacts:
            logger.warning("No contacts found. Separate results with a blank line.")

        # Apply limit if specified
        if args.limit is not None and len(contacts) > args.limit:
            logger.info(f"Limiting to {args.limit} contacts")
            contacts = contacts[:args.limit]

        # Write output
        if args.stdout:
            sys.stdout.write(contacts_to_csv(contacts))
            sys.stdout.write("\n")
        elif args.output == 'json':
            source = 'stdin' if args.source == STDIN_SOURCE else args.source
            output_path = write_json(contacts, source, output_dir=args.out_dir)
            logger.info(f"JSON output saved: {output_path}")
        else:
            output_path = write_csv(contacts, output_dir=args.out_dir)
            logger.info(f"CSV output saved: {output_path}")

        print_summary(contacts, logger)

        print_sample_contacts(contacts, logger)

        logger.info("")
        logger.info("Cleaning completed successfully")

        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Cleaning failed: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
