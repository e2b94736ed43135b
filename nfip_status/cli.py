"""
Command-line front end for the NFIP Community Status Book.

Usage:
    nfip-status --search ana
    nfip-status --id 60001 --indent 2
    nfip-status --search "harris" --output harris.json
    nfip-status --stats
"""

import asyncio
import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from nfip_status.config import Settings
from nfip_status.errors import StatusBookError
from nfip_status.models.community_status_collection import CommunityStatusCollection
from nfip_status.status_book import StatusBook

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Search and export the FEMA NFIP Community Status Book',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nfip-status --search anaheim
  nfip-status --id 60001
  nfip-status --file data/nation.csv --stats
  nfip-status --output nation.json --indent 2
        """
    )

    parser.add_argument('--file', help='Local status book CSV (downloaded if missing)')
    parser.add_argument('--url', help='Where to download the status book from')
    parser.add_argument('--timeout', type=float,
                        help='Seconds allowed for the download (default: 60)')
    parser.add_argument('--search', metavar='TERM',
                        help='Only keep communities whose name, county or CID contains TERM')
    parser.add_argument('--id', dest='cid', type=int,
                        help='Only keep communities with this CID')
    parser.add_argument('--output', help='Write JSON here instead of stdout')
    parser.add_argument('--indent', type=int, help='Indent the JSON output')
    parser.add_argument('--stats', action='store_true',
                        help='Show statistics instead of JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings with any command-line overrides applied."""
    settings = Settings.from_env()
    if args.file:
        settings.path = args.file
    if args.url:
        settings.url = args.url
    if args.timeout is not None:
        settings.timeout = args.timeout
    return settings


def print_statistics(communities: CommunityStatusCollection):
    """Print a formatted summary."""
    stats = communities.get_statistics()

    print("\n" + "=" * 60)
    print("COMMUNITY STATUS BOOK STATISTICS")
    print("=" * 60)
    print(f"Total Records:          {stats['total_records']}")
    print(f"Unique Communities:     {stats['unique_communities']}")
    print(f"Participating:          {stats['participating']}")
    print(f"Tribal:                 {stats['tribal']}")

    print("\nBy Program:")
    for program, count in sorted(stats['by_program'].items(), key=lambda x: -x[1]):
        print(f"  {program}: {count}")

    print("\nDates Present:")
    for name, count in stats['dates_present'].items():
        print(f"  {name}: {count}")


async def run(args: argparse.Namespace) -> int:
    try:
        book = StatusBook(settings_from_args(args))
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        communities = await book.load()
    except (StatusBookError, OSError) as e:
        logger.error(f"Could not load status book: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.search is not None:
        communities = communities.search(args.search)
        logger.info(f"Filtered to '{args.search}': {len(communities)} records")

    if args.cid is not None:
        communities = communities.get_by_id(args.cid)
        logger.info(f"Filtered to CID {args.cid}: {len(communities)} records")
        for community in communities:
            logger.info(f"  {community.display_name}")

    if args.stats:
        print_statistics(communities)
        return 0

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                communities.to_json(f, indent=args.indent)
        except OSError as e:
            logger.error(f"Could not write {args.output}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logger.info(f"Exported {len(communities)} records to {args.output}")
    else:
        communities.to_json(sys.stdout, indent=args.indent)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    return asyncio.run(run(args))


if __name__ == '__main__':
    sys.exit(main())
