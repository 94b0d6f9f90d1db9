from datetime import timedelta

import pytest

from review_service.domain.logic import in_deck, interval_days, is_due, overdue_days

from .conftest import T0


@pytest.mark.parametrize(
    "streak,expected",
    [
        (0, 1), (1, 3), (2, 7), (3, 14), (4, 30), (5, 45), (6, 67), (7, 101), (9, 227), (10, 341),
        (11, 365), (2000, 365), (10**6, 365),
    ],
)
def test_ladder_for_correct_answers(streak, expected):
    assert interval_days(streak, True) == expected


@pytest.mark.parametrize("streak", [0, 3, 11, 50])
def test_incorrect_is_always_one_day(streak):
    assert interval_days(streak, False) == 1


def test_ladder_capped_at_a_year():
    assert interval_days(11, True) == 365
    assert interval_days(200, True) == 365


def test_due_is_inclusive():
    assert is_due(T0, T0)
    assert is_due(T0 - timedelta(seconds=1), T0)
    assert not is_due(T0 + timedelta(seconds=1), T0)


def test_overdue_days_floors():
    assert overdue_days(T0, T0) == 0
    assert overdue_days(T0, T0 + timedelta(hours=23, minutes=59)) == 0
    assert overdue_days(T0, T0 + timedelta(days=2, hours=12)) == 2


def test_deck_match_needs_separator():
    assert in_deck("hsk1_你好", "hsk1")
    assert not in_deck("hsk10_谢谢", "hsk1")
    assert not in_deck("hsk1", "hsk1")
    assert in_deck("anything", None)


def test_interval_never_below_a_day():
    assert all(interval_days(streak, True) >= 1 for streak in range(0, 3000, 7))
