#!/usr/bin/env python3
"""
H5 Tournament Stats - Report Runner

Builds the statistics workbook for one tournament:
- race overview (race pairing table, winrates, matchup matrices)
- one sheet per race (bargains, hero usage, hero matchups)
- one sheet per participant (game history, race and hero selection)

Usage:
    h5stats-report TOURNAMENT_ID                          # fetch and report
    h5stats-report TOURNAMENT_ID --save-snapshot          # also keep the raw data
    h5stats-report TOURNAMENT_ID --snapshot data.json     # offline, from a snapshot
    h5stats-report --list                                 # list tournaments
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from h5stats.config import API_URL, LookupPolicy, get_lookup_policy
from h5stats.errors import H5StatsError
from h5stats.ingest.client import TournamentClient
from h5stats.ingest.snapshot import load_snapshot, save_snapshot
from h5stats.jobs.generate import fetch_collections, generate_report, model_from_collections
from h5stats.model.entities import Tournament
from h5stats.paths import default_report_path, default_snapshot_path, setup_file_logging


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="h5stats-report",
        description="H5 Tournament Stats - statistics workbook for one tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  h5stats-report 0b9f...                       # Fetch from the service
  h5stats-report 0b9f... -o cup.xlsx           # Choose the output file
  h5stats-report 0b9f... --snapshot cup.json   # Offline run
  h5stats-report 0b9f... --strict              # Stop on unknown races/heroes/users
  h5stats-report --list                        # Show tournament ids
        """
    )

    parser.add_argument("tournament_id", nargs="?", help="Tournament id (UUID)")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the tournaments known to the service and exit"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output .xlsx path (default: reports/<tournament>_stats_<timestamp>.xlsx)"
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        help="Read the tournament data from a snapshot file instead of the service"
    )
    parser.add_argument(
        "--save-snapshot",
        nargs="?",
        const="",
        metavar="PATH",
        help="Save the fetched data as a snapshot (default: snapshots/<id>.json)"
    )
    parser.add_argument("--url", default=API_URL, help=f"Service URL (default: {API_URL})")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on unknown race/hero/user references instead of skipping them"
    )

    args = parser.parse_args(argv)
    if not args.list and not args.tournament_id:
        parser.error("tournament_id is required unless --list is given")
    return args


def list_tournaments(client: TournamentClient) -> int:
    """Print id, name and report flags of every tournament."""
    try:
        tournaments = [Tournament.from_api(t) for t in client.get_tournaments()]
    except H5StatsError as e:
        logger.error("Listing tournaments failed: %s", e)
        print(f"[ERROR] {e}")
        return 1
    except (KeyError, ValueError) as e:
        logger.error("Listing tournaments failed: %s", e)
        print(f"[ERROR] Malformed tournament list: {e}")
        return 1

    print(f"{len(tournaments)} tournaments")
    for t in tournaments:
        flags = [name for name, on in (
            ("bargains", t.with_bargains),
            ("bargain colors", t.with_bargains_color),
            ("foreign heroes", t.with_foreign_heroes),
        ) if on]
        line = f"  {t.id}  {t.name}  [{t.mod_type.name} {t.game_type.name}]"
        if flags:
            line += "  " + ", ".join(flags)
        print(line)
    return 0


def main(argv=None) -> int:
    """Main entry point for one report run."""
    args = parse_args(argv)
    setup_file_logging()

    if args.list:
        return list_tournaments(TournamentClient(url=args.url))

    policy = LookupPolicy.ABORT if args.strict else get_lookup_policy()
    started = datetime.now()

    print("=" * 70)
    print("H5 TOURNAMENT STATS - REPORT")
    print(f"Tournament: {args.tournament_id}")
    print(f"Time: {started.strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"Lookup policy: {policy.value}")
    print("=" * 70)
    print()

    try:
        # Step 1: Raw data
        if args.snapshot:
            print(f"[1/4] Loading snapshot {args.snapshot}...")
            collections = load_snapshot(args.snapshot)
        else:
            print(f"[1/4] Fetching tournament data from {args.url}...")
            collections = fetch_collections(TournamentClient(url=args.url), args.tournament_id)
        print(f"  {len(collections['users'])} players, {len(collections['matches'])} matches, "
              f"{len(collections['games'])} games")
        print()

        # Step 2: Snapshot
        if args.save_snapshot is not None:
            snapshot_path = Path(args.save_snapshot) if args.save_snapshot else default_snapshot_path(args.tournament_id)
            print(f"[2/4] Saving snapshot to {snapshot_path}...")
            save_snapshot(snapshot_path, collections)
        else:
            print("[2/4] Snapshot not requested, skipping")
        print()

        # Step 3: Stats model
        print("[3/4] Validating games...")
        model = model_from_collections(collections, policy)
        print(f"  Kept {len(model.games)} games, rejected {len(model.rejections)}")
        for rejection in model.rejections:
            print(f"    {rejection}")
        print()

        # Step 4: Workbook
        output_path = args.output or default_report_path(model.tournament.name, started)
        print("[4/4] Writing workbook...")
        saved = generate_report(model, output_path)
    except (H5StatsError, OSError) as e:
        logger.error("Report for %s failed: %s", args.tournament_id, e)
        print(f"[ERROR] {e}")
        return 1

    print(f"  Saved to {saved}")
    print()
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
