"""
Command line interface for the GHIN client.
"""

import argparse
import json
import sys
from collections.abc import Sequence
from datetime import date
from typing import Any

from pydantic import BaseModel
from tabulate import tabulate

from ghin.client import GhinClient
from ghin.config.logging import setup_logging
from ghin.config.settings import load_config
from ghin.exceptions import GhinError
from ghin.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _print(data: Any, fmt: str, rows: list[dict[str, Any]] | None = None) -> None:
    """Print a result as JSON or, when rows are given, as a table."""
    if fmt == 'json' or rows is None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode='json')
        elif isinstance(data, list):
            data = [item.model_dump(mode='json') for item in data]
        print(json.dumps(data, indent=2))
        return

    if not rows:
        print("No results")
        return
    print(tabulate(rows, headers='keys', tablefmt='simple'))

def _golfer_row(golfer: Any) -> dict[str, Any]:
    return {
        'GHIN': golfer.ghin,
        'Name': f"{golfer.first_name} {golfer.last_name}",
        'Club': golfer.club_name or '',
        'Index': golfer.handicap_index or '',
    }

def cmd_handicap(client: GhinClient, args: argparse.Namespace) -> int:
    golfer = client.handicaps.get_one(args.ghin)
    _print(golfer, args.format, [_golfer_row(golfer)])
    return 0

def cmd_golfer(client: GhinClient, args: argparse.Namespace) -> int:
    golfer = client.golfers.get_one(args.ghin)
    if golfer is None:
        print(f"No active golfer found for GHIN {args.ghin}")
        return 1
    _print(golfer, args.format, [_golfer_row(golfer)])
    return 0

def cmd_search(client: GhinClient, args: argparse.Namespace) -> int:
    golfers = client.golfers.search({'ghin': args.ghin})
    _print(golfers, args.format, [_golfer_row(golfer) for golfer in golfers])
    return 0

def cmd_scores(client: GhinClient, args: argparse.Namespace) -> int:
    request = {
        'from_date_played': args.from_date,
        'to_date_played': args.to_date,
        'statuses': args.status,
        'limit': args.limit,
        'offset': args.offset,
    }
    response = client.golfers.get_scores(args.ghin, request)
    rows = [
        {
            'Played': score.played_at or '',
            'Course': score.course_name or '',
            'Tee': score.tee_name or '',
            'Score': score.adjusted_gross_score if score.adjusted_gross_score is not None else '',
            'Differential': score.differential if score.differential is not None else '',
        }
        for score in response.scores
    ]
    _print(response, args.format, rows)
    return 0

def cmd_course_handicaps(client: GhinClient, args: argparse.Namespace) -> int:
    requests = [
        {'ghin': ghin, 'course_id': args.course_id, 'tee_set_id': args.tee_set_id}
        for ghin in args.ghin
    ]
    response = client.handicaps.get_course_player_handicaps(requests)
    rows = [
        {
            'GHIN': player.golfer_id,
            'Tee': tee_set.name,
            'Side': rating.tee_set_side,
            'Course handicap': rating.course_handicap if rating.course_handicap is not None else '',
        }
        for player in response.golfers
        for tee_set in player.tee_sets
        for rating in tee_set.ratings
    ]
    _print(response, args.format, rows)
    return 0

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(prog='ghin', description='Query the GHIN handicap service')
    parser.add_argument('--config', help='YAML configuration file (default: $GHIN_CONFIG_FILE)')
    parser.add_argument('--format', choices=['table', 'json'], default='table', help='Output format')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Write debug logs to this file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    handicap = subparsers.add_parser('handicap', help='Show the handicap of a golfer')
    handicap.add_argument('ghin', type=int)
    handicap.set_defaults(func=cmd_handicap)

    golfer = subparsers.add_parser('golfer', help='Show an active golfer')
    golfer.add_argument('ghin', type=int)
    golfer.set_defaults(func=cmd_golfer)

    search = subparsers.add_parser('search', help='Search golfers')
    search.add_argument('--ghin', type=int)
    search.set_defaults(func=cmd_search)

    scores = subparsers.add_parser('scores', help='List scores of a golfer')
    scores.add_argument('ghin', type=int)
    scores.add_argument('--from', dest='from_date', type=date.fromisoformat, help='First date played (YYYY-MM-DD)')
    scores.add_argument('--to', dest='to_date', type=date.fromisoformat, help='Last date played (YYYY-MM-DD)')
    scores.add_argument('--status', action='append', help='Score status filter, may be repeated')
    scores.add_argument('--limit', type=int)
    scores.add_argument('--offset', type=int)
    scores.set_defaults(func=cmd_scores)

    course = subparsers.add_parser('course-handicaps', help='Compute course handicaps')
    course.add_argument('--course-id', type=int, required=True)
    course.add_argument('--tee-set-id', type=int)
    course.add_argument('ghin', type=int, nargs='+')
    course.set_defaults(func=cmd_course_handicaps)

    return parser

def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        client = GhinClient(load_config(args.config))
        return args.func(client, args)
    except GhinError as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
