"""Find-it attempt tracking and accuracy for coding challenges."""

import logging

from findit.db import ensure_challenge_row, get_challenge_row, get_connection

logger = logging.getLogger(__name__)


def get_find_it_attempts(key: str) -> int:
    row = get_challenge_row(key)
    return row["find_it_attempts"] if row else 0


def store_find_it_verdict(key: str, verdict: bool):
    """Count an attempt unless the find-it phase is already solved."""
    with get_connection() as conn:
        ensure_challenge_row(conn, key)
        conn.execute(
            """
            UPDATE coding_challenges
            SET find_it_solved = ?, find_it_attempts = find_it_attempts + 1,
                updated_at = CURRENT_TIMESTAMP
            WHERE key = ? AND find_it_solved = 0
            """,
            (int(verdict), key),
        )


def calculate_find_it_accuracy(key: str) -> float:
    row = get_challenge_row(key)
    accuracy = 0.0
    if row and row["find_it_solved"] and row["find_it_attempts"]:
        accuracy = 1 / row["find_it_attempts"]
    logger.info(f"Accuracy for 'Find It' phase of coding challenge {key}: {accuracy}")
    return accuracy


def total_find_it_accuracy() -> float:
    """Mean accuracy over every challenge with at least one attempt."""
    with get_connection() as conn:
        rows = conn.execute(
            "SELECT find_it_solved, find_it_attempts FROM coding_challenges "
            "WHERE find_it_attempts > 0"
        ).fetchall()

    if not rows:
        return 0.0
    total = sum(1 / r["find_it_attempts"] for r in rows if r["find_it_solved"])
    return total / len(rows)
