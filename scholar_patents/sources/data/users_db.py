"""Database operations for the user Scholar profile settings."""

import sqlite3
from typing import List, Optional

from .models import DEFAULT_PATENTS_TO_DISPLAY, UserScholarProfile


def init_users_table(conn: sqlite3.Connection) -> None:
    """Create the users table if it doesn't exist."""
    conn.execute(f"""
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            google_scholar_url TEXT,
            patents_to_display INTEGER NOT NULL DEFAULT {DEFAULT_PATENTS_TO_DISPLAY}
        )
    """)
    conn.commit()


def store_user_profile(conn: sqlite3.Connection, profile: UserScholarProfile) -> None:
    """Insert or update a user's Scholar profile settings."""
    if profile.patents_to_display is not None and profile.patents_to_display < 0:
        raise ValueError(
            f"patents_to_display must not be negative, got {profile.patents_to_display}"
        )

    conn.execute("""
        INSERT INTO users (id, google_scholar_url, patents_to_display)
        VALUES (?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET
            google_scholar_url = excluded.google_scholar_url,
            patents_to_display = excluded.patents_to_display
    """, (
        profile.user_id,
        profile.google_scholar_url,
        profile.patents_to_display
    ))
    conn.commit()


def _row_to_profile(row: sqlite3.Row) -> UserScholarProfile:
    return UserScholarProfile(
        user_id=row["id"],
        google_scholar_url=row["google_scholar_url"],
        patents_to_display=row["patents_to_display"],
    )


def get_user_profile(conn: sqlite3.Connection, user_id: str) -> Optional[UserScholarProfile]:
    """Retrieve a user's Scholar profile settings."""
    row = conn.execute("""
        SELECT id, google_scholar_url, patents_to_display
        FROM users
        WHERE id = ?
    """, (user_id,)).fetchone()

    if not row:
        return None
    return _row_to_profile(row)


def get_scholar_profile_url(conn: sqlite3.Connection, user_id: str) -> Optional[str]:
    """Return the user's Google Scholar profile URL, or None if unset."""
    profile = get_user_profile(conn, user_id)
    if profile is None or not profile.google_scholar_url:
        return None
    return profile.google_scholar_url


def get_users_with_scholar_url(conn: sqlite3.Connection) -> List[UserScholarProfile]:
    """Retrieve all users that have a Google Scholar profile URL configured."""
    rows = conn.execute("""
        SELECT id, google_scholar_url, patents_to_display
        FROM users
        WHERE google_scholar_url IS NOT NULL AND google_scholar_url != ''
        ORDER BY id
    """).fetchall()
    return [_row_to_profile(row) for row in rows]
