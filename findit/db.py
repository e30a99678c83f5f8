import sqlite3
from contextlib import contextmanager
from pathlib import Path

DB_PATH = Path("data/findit.db")

# coding_challenges.status values
STATUS_UNSOLVED = 0
STATUS_FIND_IT_SOLVED = 1


def get_db_path() -> Path:
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    return DB_PATH


def init_db():
    """Create tables if they don't exist."""
    with get_connection() as conn:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS coding_challenges (
                key TEXT PRIMARY KEY,
                find_it_solved INTEGER NOT NULL DEFAULT 0,
                find_it_attempts INTEGER NOT NULL DEFAULT 0,
                status INTEGER NOT NULL DEFAULT 0,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)


@contextmanager
def get_connection():
    conn = sqlite3.connect(get_db_path())
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def ensure_challenge_row(conn: sqlite3.Connection, key: str):
    conn.execute(
        "INSERT OR IGNORE INTO coding_challenges (key) VALUES (?)",
        (key,),
    )


def get_challenge_row(key: str) -> dict | None:
    with get_connection() as conn:
        row = conn.execute(
            "SELECT * FROM coding_challenges WHERE key = ?", (key,)
        ).fetchone()
        return dict(row) if row else None
