"""
Refresh stored patents from users' Google Scholar profiles.

This script:
1. Reads the Google Scholar profile URL stored for each user
2. Scrapes the patents listed on that profile
3. Replaces the user's stored patents with the fresh list

Run it on demand for one user, or from a scheduler for every user with a
profile URL configured.
"""

import argparse
import logging
import sys
from pathlib import Path

#
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scholar_patents.sources.data import (
    UserScholarProfile,
    get_db_connection,
    get_user_profile,
    init_database,
    list_patents_for_user,
    store_user_profile,
)
from scholar_patents.sources.patents import (
    RefreshResult,
    refresh_all_eligible_users,
    refresh_patents,
)


def print_result(result: RefreshResult) -> None:
    """Print a one-line summary of a refresh."""
    if result.success:
        print(f"{result.user_id}: stored {result.count} patents")
    elif result.error_kind == "no_patents_found":
        print(f"{result.user_id}: no patents found, kept existing patents")
    else:
        print(f"{result.user_id}: ERROR ({result.error_kind}): {result.error}")


def refresh_user(user_id: str, db_path=None) -> int:
    """Refresh one user's patents. Returns a process exit code."""
    result = refresh_patents(user_id, db_path)
    print_result(result)
    return 0 if result.success or result.error_kind == "no_patents_found" else 1


def refresh_everyone(delay: float, db_path=None) -> int:
    """Refresh every eligible user's patents. Returns a process exit code."""
    results = refresh_all_eligible_users(db_path, delay_between_requests=delay)

    if not results:
        print("No users with Google Scholar URLs found.")
        return 0

    for result in results:
        print_result(result)

    success_count = sum(1 for r in results if r.success)
    error_count = sum(
        1 for r in results if not r.success and r.error_kind != "no_patents_found"
    )

    print(f"\n{'='*60}")
    print(f"Completed!")
    print(f"  Successful: {success_count}/{len(results)}")
    print(f"  Errors: {error_count}/{len(results)}")
    print(f"{'='*60}")
    return 0


def positive_int(value: str) -> int:
    """argparse type for counts of at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def set_profile_url(user_id: str, url: str, patents_to_display=None, db_path=None) -> None:
    """Store a user's Google Scholar profile URL."""
    conn = get_db_connection(db_path)
    try:
        profile = get_user_profile(conn, user_id) or UserScholarProfile(user_id=user_id)
        profile.google_scholar_url = url
        if patents_to_display is not None:
            profile.patents_to_display = patents_to_display
        store_user_profile(conn, profile)
    finally:
        conn.close()
    print(f"Saved Google Scholar URL for {user_id}")


def list_user_patents(user_id: str, db_path=None) -> None:
    """Print the patents stored for a user."""
    conn = get_db_connection(db_path)
    try:
        patents = list_patents_for_user(conn, user_id)
    finally:
        conn.close()

    print(f"\n{'='*60}")
    print(f"{len(patents)} Patents for {user_id}")
    print(f"{'='*60}")

    for i, patent in enumerate(patents, 1):
        print(f"\n{i}. {patent.title}")
        print(f"   Citations: {patent.citations}")
        if patent.patent_number:
            print(f"   Patent Number: {patent.patent_number}")
        if patent.publication_date:
            print(f"   Published: {patent.publication_date}")
        if patent.url:
            print(f"   URL: {patent.url}")


if __name__ == "__main__":
    from config.settings import settings

    parser = argparse.ArgumentParser(
        description="Refresh patents from Google Scholar profiles"
    )
    parser.add_argument(
        "user_id",
        nargs="?",
        default=None,
        help="User to refresh. If not specified, refreshes all users "
             "with a Google Scholar URL."
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=settings.scrape_delay,
        help=f"Delay between users in seconds (default: {settings.scrape_delay})"
    )
    parser.add_argument(
        "--set-url",
        metavar="URL",
        help="Save URL as the user's Google Scholar profile and exit"
    )
    parser.add_argument(
        "--display",
        type=positive_int,
        default=None,
        help="With --set-url, number of patents to show on the résumé"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the user's stored patents and exit"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Database path (default: settings.database_path)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    init_database(args.db)

    if (args.set_url or args.list) and not args.user_id:
        parser.error("--set-url and --list need a user_id")

    if args.set_url:
        set_profile_url(args.user_id, args.set_url, args.display, args.db)
        sys.exit(0)

    if args.list:
        list_user_patents(args.user_id, args.db)
        sys.exit(0)

    if args.user_id:
        sys.exit(refresh_user(args.user_id, args.db))
    else:
        print("Refreshing all users...")
        sys.exit(refresh_everyone(args.delay, args.db))
