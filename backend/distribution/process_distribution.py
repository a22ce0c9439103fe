"""
CLI script for approving, distributing and re-sending publications.

Usage:
    # Approve a draft publication and distribute it
    uv run python -m distribution.process_distribution --approve 12

    # Re-run distribution for a publication (re-sends to every current match)
    uv run python -m distribution.process_distribution --distribute 12

    # Re-send logged notifications
    uv run python -m distribution.process_distribution --resend 345
    uv run python -m distribution.process_distribution --resend-bulk 345 346 347

    # Seed the metadata catalog / migrate legacy tier names
    uv run python -m distribution.process_distribution --seed-metadata
    uv run python -m distribution.process_distribution --migrate-tiers

    # Dry run (log emails instead of sending them)
    uv run python -m distribution.process_distribution --approve 12 --dry-run
"""

import argparse

from catalog.metadata_catalog import seed_default_metadata
from distribution.orchestrator import approve_publication, distribute_publication
from distribution.resend import resend_bulk, resend_log_entry
from models import DistributionSummary
from notifications.transport import MailTransport, NullTransport, get_mail_transport
from shared.errors import DistributionError
from shared.store import get_record_store
from shared.utils import print_summary


def _print_distribution(summary: DistributionSummary | None) -> None:
    if summary is None:
        print("Publication not found; nothing distributed.")
        return
    print_summary(
        f"Distribution Complete: {summary.publication_number}",
        {
            "Active customers": summary.active_customers,
            "Recipients": summary.recipients_count,
            "Failed sends": summary.failed_sends,
            "Failed log writes": summary.failed_log_writes,
        },
    )


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Approve, distribute and re-send publication notifications"
    )

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument(
        "--approve", type=int, metavar="ID", help="Approve and distribute a publication"
    )
    action.add_argument(
        "--distribute", type=int, metavar="ID", help="Run distribution for a publication"
    )
    action.add_argument(
        "--resend", type=int, metavar="LOG_ID", help="Re-send one logged notification"
    )
    action.add_argument(
        "--resend-bulk",
        type=int,
        nargs="+",
        metavar="LOG_ID",
        help="Re-send several logged notifications",
    )
    action.add_argument(
        "--seed-metadata",
        action="store_true",
        help="Insert the default tag vocabulary into an empty catalog",
    )
    action.add_argument(
        "--migrate-tiers",
        action="store_true",
        help="Rewrite legacy subscription tier names",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode (log emails instead of sending them)",
    )

    args = parser.parse_args()

    store = get_record_store()
    transport: MailTransport = NullTransport() if args.dry_run else get_mail_transport()

    try:
        if args.approve is not None:
            _print_distribution(approve_publication(args.approve, store, transport))
        elif args.distribute is not None:
            _print_distribution(distribute_publication(args.distribute, store, transport))
        elif args.resend is not None:
            resend_log_entry(args.resend, store, transport)
        elif args.resend_bulk:
            count = resend_bulk(args.resend_bulk, store, transport)
            print_summary(
                "Bulk Resend Complete",
                {"Resent": count, "Skipped": len(args.resend_bulk) - count},
            )
        elif args.seed_metadata:
            seed_default_metadata(store)
        elif args.migrate_tiers:
            updated = store.normalize_legacy_tiers()
            print(f"Migrated {updated} customer(s) to current tier names.")
    except DistributionError as e:
        parser.exit(1, f"✗ {e}\n")


if __name__ == "__main__":
    main()
