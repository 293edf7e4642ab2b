"""Database operations for patent storage."""

import sqlite3
from datetime import datetime
from typing import List, Optional

from .models import PatentRecord


def init_patents_table(conn: sqlite3.Connection) -> None:
    """Create the patents table if it doesn't exist."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS patents (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id TEXT NOT NULL,
            title TEXT NOT NULL,
            authors TEXT,
            publication_date TEXT,
            patent_number TEXT,
            abstract TEXT,
            url TEXT,
            citations INTEGER NOT NULL DEFAULT 0 CHECK (citations >= 0),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.execute("""
        CREATE INDEX IF NOT EXISTS idx_patents_user
        ON patents(user_id)
    """)
    conn.commit()


def _row_to_patent(row: sqlite3.Row) -> PatentRecord:
    return PatentRecord(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        authors=row["authors"] or "",
        publication_date=row["publication_date"],
        patent_number=row["patent_number"],
        abstract=row["abstract"],
        url=row["url"],
        citations=row["citations"],
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


def list_patents_for_user(
    conn: sqlite3.Connection,
    user_id: str,
    limit: Optional[int] = None
) -> List[PatentRecord]:
    """
    Retrieve the stored patents for a user.

    Args:
        conn: Database connection
        user_id: Owning user
        limit: Optional maximum number of patents to return

    Returns:
        List of PatentRecord objects, most cited first, then newest first
    """
    query = """
        SELECT * FROM patents
        WHERE user_id = ?
        ORDER BY citations DESC, publication_date DESC, id ASC
    """
    params: tuple = (user_id,)
    if limit is not None:
        query += " LIMIT ?"
        params = (user_id, limit)

    rows = conn.execute(query, params).fetchall()
    return [_row_to_patent(row) for row in rows]


def count_patents_for_user(conn: sqlite3.Connection, user_id: str) -> int:
    """Number of patents stored for a user."""
    row = conn.execute(
        "SELECT COUNT(*) FROM patents WHERE user_id = ?", (user_id,)
    ).fetchone()
    return row[0]


def delete_all_patents_for_user(conn: sqlite3.Connection, user_id: str) -> int:
    """
    Delete every stored patent for a user. Does not commit.

    Returns:
        Number of rows deleted
    """
    cursor = conn.execute("DELETE FROM patents WHERE user_id = ?", (user_id,))
    return cursor.rowcount


def insert_patents(
    conn: sqlite3.Connection,
    user_id: str,
    patents: List[PatentRecord]
) -> int:
    """
    Insert patents tagged with user_id. Does not commit.

    Returns:
        Number of patents inserted
    """
    now = datetime.now().isoformat()
    cursor = conn.cursor()
    count = 0

    for patent in patents:
        cursor.execute("""
            INSERT INTO patents (
                user_id, title, authors, publication_date, patent_number,
                abstract, url, citations, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, (
            user_id,
            patent.title,
            patent.authors,
            patent.publication_date,
            patent.patent_number,
            patent.abstract,
            patent.url,
            max(patent.citations or 0, 0),
            now
        ))
        count += 1

    return count


def replace_patents_for_user(
    conn: sqlite3.Connection,
    user_id: str,
    patents: List[PatentRecord]
) -> int:
    """
    Replace a user's stored patents with a new set.

    The delete and the inserts run in a single transaction, so other
    connections see either the old set or the new one. Any error rolls
    the whole replacement back.

    Args:
        conn: Database connection
        user_id: Owning user
        patents: Freshly scraped patents

    Returns:
        Number of patents stored
    """
    with conn:
        delete_all_patents_for_user(conn, user_id)
        return insert_patents(conn, user_id, patents)
