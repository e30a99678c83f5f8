import asyncio

from findit.accuracy import (
    calculate_find_it_accuracy,
    get_find_it_attempts,
    store_find_it_verdict,
    total_find_it_accuracy,
)
from findit.challenges import solve_find_it
from findit.db import STATUS_FIND_IT_SOLVED, get_challenge_row


def test_attempts_start_at_zero():
    assert get_find_it_attempts("unknownChallenge") == 0


def test_store_find_it_verdict_counts_attempts():
    store_find_it_verdict("loginAdminChallenge", False)
    store_find_it_verdict("loginAdminChallenge", False)
    assert get_find_it_attempts("loginAdminChallenge") == 2


def test_solved_challenge_stops_counting():
    store_find_it_verdict("loginAdminChallenge", False)
    store_find_it_verdict("loginAdminChallenge", True)
    store_find_it_verdict("loginAdminChallenge", False)
    assert get_find_it_attempts("loginAdminChallenge") == 2


def test_accuracy():
    assert calculate_find_it_accuracy("loginAdminChallenge") == 0
    store_find_it_verdict("loginAdminChallenge", False)
    store_find_it_verdict("loginAdminChallenge", False)
    store_find_it_verdict("loginAdminChallenge", False)
    store_find_it_verdict("loginAdminChallenge", True)
    assert calculate_find_it_accuracy("loginAdminChallenge") == 0.25


def test_total_accuracy():
    assert total_find_it_accuracy() == 0
    store_find_it_verdict("loginAdminChallenge", True)
    store_find_it_verdict("loginBenderChallenge", False)
    store_find_it_verdict("loginBenderChallenge", True)
    store_find_it_verdict("directoryListingChallenge", False)
    assert total_find_it_accuracy() == (1 + 0.5 + 0) / 3


def test_solve_find_it():
    store_find_it_verdict("loginAdminChallenge", False)
    asyncio.run(solve_find_it("loginAdminChallenge"))

    row = get_challenge_row("loginAdminChallenge")
    assert row["status"] == STATUS_FIND_IT_SOLVED
    assert row["find_it_solved"] == 1
    assert row["find_it_attempts"] == 2
