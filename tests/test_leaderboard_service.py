from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError
from sqlmodel import select

from reaction_board.core.time import TimeFilter, utcnow
from reaction_board.models import Attempt, AttemptCreate
from reaction_board.services import (
    get_leaderboard,
    get_personal_best,
    submit_reaction_time,
)

UTC = ZoneInfo("UTC")
NOW = datetime(2026, 10, 21, 12, 0, tzinfo=timezone.utc)  # Wednesday


def _times(entries):
    return [entry.reaction_time_ms for entry in entries]


def test_fastest_first_with_positional_ranks(session, add_attempt):
    for name, ms in [("Alice", 250), ("Bob", 200), ("Charlie", 300), ("Dana", 220)]:
        add_attempt(name, ms)

    board = get_leaderboard(session, TimeFilter.ALL_TIME, 4)

    assert _times(board) == [200, 220, 250, 300]
    assert [entry.participant_name for entry in board] == ["Bob", "Dana", "Alice", "Charlie"]
    assert [entry.rank for entry in board] == [1, 2, 3, 4]


def test_false_starts_never_rank(session, add_attempt):
    add_attempt("Alice", 250)
    add_attempt("Bob", 1, is_false_start=True)
    add_attempt("Charlie", 300)

    board = get_leaderboard(session, TimeFilter.ALL_TIME)

    assert [entry.participant_name for entry in board] == ["Alice", "Charlie"]


def test_only_false_starts_yields_empty_board(session, add_attempt):
    add_attempt("Player1", 200, is_false_start=True)
    add_attempt("Player2", 250, is_false_start=True)

    assert get_leaderboard(session, TimeFilter.ALL_TIME) == []


def test_limit_keeps_the_fastest_and_ranks_from_one(session, add_attempt):
    for index, ms in enumerate([350, 200, 300, 250, 400]):
        add_attempt(f"P{index}", ms)

    board = get_leaderboard(session, TimeFilter.ALL_TIME, 2)

    assert _times(board) == [200, 250]
    assert [entry.rank for entry in board] == [1, 2]


def test_ties_at_the_limit_are_not_shared_ranks(session, add_attempt):
    add_attempt("A", 200)
    add_attempt("B", 250)
    add_attempt("C", 250)

    board = get_leaderboard(session, TimeFilter.ALL_TIME, 2)

    assert [entry.participant_name for entry in board] == ["A", "B"]
    assert [entry.rank for entry in board] == [1, 2]


def test_equal_times_ordered_by_creation_then_id(session, add_attempt):
    earlier = NOW - timedelta(hours=2)
    later_row = add_attempt("Later", 180, created_at=NOW - timedelta(hours=1))
    first_same = add_attempt("SameA", 180, created_at=earlier)
    second_same = add_attempt("SameB", 180, created_at=earlier)

    board = get_leaderboard(session, TimeFilter.ALL_TIME)

    assert [entry.id for entry in board] == [first_same.id, second_same.id, later_row.id]


def test_default_limit_is_ten(session, add_attempt):
    for ms in range(100, 115):
        add_attempt("Busy", ms)

    board = get_leaderboard(session, TimeFilter.ALL_TIME)

    assert len(board) == 10
    assert board[-1].rank == 10


def test_non_positive_limit_is_rejected(session):
    with pytest.raises(ValueError):
        get_leaderboard(session, TimeFilter.ALL_TIME, 0)


def test_time_windows(session, add_attempt):
    today = add_attempt("Today", 300, created_at=datetime(2026, 10, 21, 10, tzinfo=timezone.utc))
    yesterday = add_attempt("Yesterday", 250, created_at=datetime(2026, 10, 20, 10, tzinfo=timezone.utc))
    eight_days = add_attempt("EightDays", 200, created_at=NOW - timedelta(days=8))
    last_month = add_attempt("LastMonth", 150, created_at=datetime(2026, 9, 15, 10, tzinfo=timezone.utc))

    def ids(time_filter):
        return {entry.id for entry in get_leaderboard(session, time_filter, 10, NOW, UTC)}

    assert ids(TimeFilter.TODAY) == {today.id}
    assert ids(TimeFilter.THIS_WEEK) == {today.id, yesterday.id}
    assert ids(TimeFilter.THIS_MONTH) == {today.id, yesterday.id, eight_days.id}
    assert ids(TimeFilter.ALL_TIME) == {today.id, yesterday.id, eight_days.id, last_month.id}


def test_window_start_is_inclusive(session, add_attempt):
    midnight = add_attempt("Midnight", 300, created_at=datetime(2026, 10, 21, tzinfo=timezone.utc))
    add_attempt("JustBefore", 200, created_at=datetime(2026, 10, 20, 23, 59, 59, tzinfo=timezone.utc))

    board = get_leaderboard(session, TimeFilter.TODAY, 10, NOW, UTC)

    assert [entry.id for entry in board] == [midnight.id]


def test_entries_carry_utc_timestamps(session, add_attempt):
    add_attempt("TestPlayer", 250)

    (entry,) = get_leaderboard(session, TimeFilter.ALL_TIME)

    assert entry.created_at.tzinfo is not None
    assert entry.created_at.utcoffset() == timedelta(0)


def test_personal_best_is_the_minimum(session, add_attempt):
    for ms in [250, 180, 300]:
        add_attempt("Alice", ms)
    add_attempt("Bob", 120)

    best = get_personal_best(session, "Alice")

    assert best is not None
    assert best.reaction_time_ms == 180
    assert best.participant_name == "Alice"


def test_personal_best_ignores_false_starts(session, add_attempt):
    add_attempt("Alice", 250)
    add_attempt("Alice", 90, is_false_start=True)

    assert get_personal_best(session, "Alice").reaction_time_ms == 250


def test_personal_best_absent(session, add_attempt):
    add_attempt("Jumpy", 100, is_false_start=True)

    assert get_personal_best(session, "Unknown") is None
    assert get_personal_best(session, "Jumpy") is None


def test_personal_best_is_case_sensitive_and_untrimmed(session, add_attempt):
    add_attempt("Alice", 200)

    assert get_personal_best(session, "alice") is None
    assert get_personal_best(session, " Alice") is None
    assert get_personal_best(session, "Alice") is not None


def test_submit_then_rank(session):
    before = utcnow()

    created = submit_reaction_time(
        session,
        AttemptCreate(participant_name="P", reaction_time_ms=250, is_false_start=False),
    )

    assert created.id is not None
    assert created.reaction_time_ms == 250
    assert created.is_false_start is False
    created_at = created.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    assert created_at >= before.replace(microsecond=0)
    board = get_leaderboard(session, TimeFilter.ALL_TIME, 10)
    assert [entry.id for entry in board] == [created.id]


def test_submit_assigns_increasing_ids(session):
    payload = AttemptCreate(participant_name="P", reaction_time_ms=300, is_false_start=True)
    first = submit_reaction_time(session, payload)
    second = submit_reaction_time(session, payload)

    assert second.id > first.id
    assert len(session.exec(select(Attempt)).all()) == 2


def test_submit_rounds_fractional_milliseconds(session):
    created = submit_reaction_time(
        session,
        AttemptCreate(participant_name="P", reaction_time_ms=0.2, is_false_start=False),
    )

    assert created.reaction_time_ms == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"participant_name": "", "reaction_time_ms": 250, "is_false_start": False},
        {"participant_name": "x" * 51, "reaction_time_ms": 250, "is_false_start": False},
        {"participant_name": "P", "reaction_time_ms": -5, "is_false_start": False},
        {"participant_name": "P", "reaction_time_ms": 0, "is_false_start": False},
        {"participant_name": "P", "reaction_time_ms": 250, "is_false_start": "yes"},
        {"participant_name": "P", "reaction_time_ms": 250},
        {"participant_name": "P", "reaction_time_ms": "250", "is_false_start": False},
        {"participant_name": "P", "reaction_time_ms": float("inf"), "is_false_start": False},
        {"participant_name": "P", "reaction_time_ms": 2**31, "is_false_start": False},
    ],
)
def test_invalid_submissions_fail_validation(payload):
    with pytest.raises(ValidationError):
        AttemptCreate.model_validate(payload)
