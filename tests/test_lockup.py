import pytest

from stakeweight.errors import ErrorCode, RegistryError
from stakeweight.lockup import (
    MAX_LOCKUP_IN_FUTURE_SECS,
    MAX_LOCKUP_PERIODS,
    Lockup,
)
from stakeweight.lockup_kind import SECS_PER_DAY, SECS_PER_MONTH, LockupKind

START_TS = 1634929833
DAY = SECS_PER_DAY


def days_to_secs(days: float) -> int:
    return int(round(SECS_PER_DAY * days))


def months_to_secs(months: float) -> int:
    return int(round(SECS_PER_MONTH * months))


def test_period_computations():
    lockup = Lockup.new_from_periods(LockupKind.DAILY, 1000, 1000, 3)
    assert lockup.periods_total() == 3
    expectations = [
        (0, 0, 3),
        (999, 0, 3),
        (1000, 0, 3),
        (1000 + DAY - 1, 0, 3),
        (1000 + DAY, 1, 2),
        (1000 + 3 * DAY - 1, 2, 1),
        (1000 + 3 * DAY, 3, 0),
        (100 * DAY, 3, 0),
    ]
    for ts, current, left in expectations:
        assert lockup.period_current(ts) == current
        assert lockup.periods_left(ts) == left


@pytest.mark.parametrize(
    "expected, days_total, curr_day",
    [
        (10, 10.0, 0.0),
        (10, 10.0, 0.5),
        (9, 10.0, 1.0),
        (9, 10.0, 1.5),
        (1, 10.0, 9.0),
        (1, 10.0, 9.1),
        (1, 10.0, 9.9),
        (0, 10.0, 10.0),
        (0, 10.0, 11.0),
    ],
)
def test_days_left(expected, days_total, curr_day):
    lockup = Lockup(
        start_ts=START_TS,
        end_ts=START_TS + days_to_secs(days_total),
        kind=LockupKind.CLIFF,
    )
    assert lockup.periods_left(START_TS + days_to_secs(curr_day)) == expected


@pytest.mark.parametrize(
    "expected, months_total, curr_month",
    [
        (10, 10.0, 0.0),
        (10, 10.0, 0.5),
        (9, 10.0, 1.5),
        (0, 10.0, 11.0),
    ],
)
def test_months_left(expected, months_total, curr_month):
    lockup = Lockup(
        start_ts=START_TS,
        end_ts=START_TS + months_to_secs(months_total),
        kind=LockupKind.MONTHLY,
    )
    assert lockup.periods_left(START_TS + months_to_secs(curr_month)) == expected


def test_new_from_periods_sets_end():
    lockup = Lockup.new_from_periods(LockupKind.MONTHLY, 1000, 2000, 4)
    assert lockup.start_ts == 2000
    assert lockup.end_ts == 2000 + 4 * SECS_PER_MONTH
    assert lockup.kind == LockupKind.MONTHLY


def test_new_from_periods_start_too_far_in_future():
    with pytest.raises(RegistryError) as info:
        Lockup.new_from_periods(
            LockupKind.DAILY, 0, MAX_LOCKUP_IN_FUTURE_SECS, 1
        )
    assert info.value.code == ErrorCode.DEPOSIT_START_TOO_FAR_IN_FUTURE


def test_new_from_periods_just_within_future_limit():
    lockup = Lockup.new_from_periods(
        LockupKind.DAILY, 0, MAX_LOCKUP_IN_FUTURE_SECS - 1, 1
    )
    assert lockup.periods_total() == 1


def test_new_from_periods_too_many_periods():
    with pytest.raises(RegistryError) as info:
        Lockup.new_from_periods(LockupKind.DAILY, 0, 0, MAX_LOCKUP_PERIODS + 1)
    assert info.value.code == ErrorCode.INVALID_LOCKUP_PERIOD


def test_max_periods_allowed():
    lockup = Lockup.new_from_periods(LockupKind.DAILY, 0, 0, MAX_LOCKUP_PERIODS)
    assert lockup.periods_total() == MAX_LOCKUP_PERIODS


def test_seconds_left_and_expired():
    lockup = Lockup(start_ts=100, end_ts=200, kind=LockupKind.CLIFF)
    assert lockup.seconds_left(50) == 150
    assert lockup.seconds_left(150) == 50
    assert lockup.seconds_left(200) == 0
    assert not lockup.expired(199)
    assert lockup.expired(200)
    assert lockup.expired(1000)


def test_constant_lockup_never_counts_down():
    lockup = Lockup(start_ts=0, end_ts=5 * DAY, kind=LockupKind.CONSTANT)
    assert lockup.seconds_left(0) == 5 * DAY
    assert lockup.seconds_left(100 * DAY) == 5 * DAY
    assert not lockup.expired(100 * DAY)


def test_none_kind_has_no_periods():
    lockup = Lockup(start_ts=0, end_ts=0, kind=LockupKind.NONE)
    assert lockup.periods_total() == 0
    assert lockup.periods_left(10) == 0
    assert lockup.period_current(10) == 0
    assert lockup.expired(0)


def test_periods_total_rejects_partial_period():
    lockup = Lockup(start_ts=0, end_ts=DAY + 1, kind=LockupKind.DAILY)
    with pytest.raises(RegistryError) as info:
        lockup.periods_total()
    assert info.value.code == ErrorCode.INVALID_LOCKUP_PERIOD


def test_remove_past_periods():
    lockup = Lockup.new_from_periods(LockupKind.MONTHLY, 1000, 1000, 3)
    time = 1001 + SECS_PER_MONTH
    left_before = lockup.seconds_left(time)
    lockup.remove_past_periods(time)
    assert lockup.start_ts == 1000 + SECS_PER_MONTH
    assert lockup.periods_total() == 2
    assert lockup.period_current(time) == 0
    assert lockup.seconds_left(time) == left_before


def test_remove_past_periods_after_expiry():
    lockup = Lockup.new_from_periods(LockupKind.DAILY, 0, 0, 3)
    lockup.remove_past_periods(10 * DAY)
    assert lockup.start_ts == lockup.end_ts == 3 * DAY
    assert lockup.periods_total() == 0
    assert lockup.period_current(10 * DAY) == 0


def test_remove_past_periods_before_start_is_noop():
    lockup = Lockup.new_from_periods(LockupKind.DAILY, 0, 5 * DAY, 2)
    lockup.remove_past_periods(0)
    assert lockup.start_ts == 5 * DAY
    assert lockup.periods_total() == 2