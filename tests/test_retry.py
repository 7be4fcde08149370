from __future__ import annotations

import pytest

from kicad_bootstrap.retry import retry


def scripted(outcomes):
    calls = []

    def op():
        calls.append(len(calls) + 1)
        return outcomes[len(calls) - 1]

    return op, calls


def test_first_success_stops_immediately():
    op, calls = scripted([True])
    sleeps: list[float] = []

    result = retry(op, 3, 5.0, sleep=sleeps.append)

    assert result.ok is True
    assert result.attempts == 1
    assert calls == [1]
    assert sleeps == []


def test_success_on_last_attempt_sleeps_between_attempts_only():
    op, calls = scripted([False, False, True])
    sleeps: list[float] = []

    result = retry(op, 3, 5.0, sleep=sleeps.append)

    assert result.ok is True
    assert result.attempts == 3
    assert sleeps == [5.0, 5.0]


def test_exhausted_attempts_no_trailing_sleep():
    op, calls = scripted([False, False, False, True])
    sleeps: list[float] = []
    failures: list[tuple] = []

    result = retry(op, 3, 2.0, sleep=sleeps.append, on_failure=lambda a, t: failures.append((a, t)))

    assert result.ok is False
    assert result.attempts == 3
    assert len(calls) == 3
    assert sleeps == [2.0, 2.0]
    assert failures == [(1, 3), (2, 3), (3, 3)]


def test_value_of_successful_attempt_is_returned():
    op, _ = scripted([0, "done"])

    result = retry(op, 2, 0, sleep=lambda s: None)

    assert result.value == "done"


@pytest.mark.parametrize("attempts", [0, -1])
def test_rejects_non_positive_attempts(attempts):
    with pytest.raises(ValueError):
        retry(lambda: True, attempts, 1.0)
