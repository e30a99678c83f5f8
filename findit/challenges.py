import logging

from findit import accuracy
from findit.db import STATUS_FIND_IT_SOLVED, ensure_challenge_row, get_connection

logger = logging.getLogger(__name__)


async def solve_find_it(key: str):
    """Mark the 'Find It' phase of a coding challenge as solved."""
    with get_connection() as conn:
        ensure_challenge_row(conn, key)
        conn.execute(
            "UPDATE coding_challenges SET status = ?, updated_at = CURRENT_TIMESTAMP "
            "WHERE key = ? AND status < ?",
            (STATUS_FIND_IT_SOLVED, key, STATUS_FIND_IT_SOLVED),
        )
    logger.info(f"Solved 'Find It' phase of coding challenge {key}")
    accuracy.store_find_it_verdict(key, True)
    accuracy.calculate_find_it_accuracy(key)
