"""Tests for the latest-wins debouncer."""

import threading

from city_search.debounce import Debouncer


def test_single_event_fires():
    slept = []
    debouncer = Debouncer(delay_seconds=0.5, sleep=slept.append)

    token = debouncer.settle("search")
    assert token is not None
    assert debouncer.is_current("search", token)
    assert slept == [0.5]


def test_newer_event_supersedes_waiting_one():
    debouncer = Debouncer(delay_seconds=0.5)
    outcomes = []

    def sleep_then_type_again(_delay):
        # Another keystroke arrives while the first one is waiting.
        debouncer.sleep = lambda _d: None
        outcomes.append(debouncer.settle("search"))

    debouncer.sleep = sleep_then_type_again
    outcomes.append(debouncer.settle("search"))

    newer, older = outcomes
    assert newer is not None
    assert older is None


def test_keys_are_independent():
    debouncer = Debouncer(delay_seconds=0.5)

    def sleep(_delay):
        debouncer.cancel("other")

    debouncer.sleep = sleep
    assert debouncer.settle("search") is not None


def test_cancel_supersedes_pending_event():
    debouncer = Debouncer(delay_seconds=0.5)
    debouncer.sleep = lambda _d: debouncer.cancel("search")

    assert debouncer.settle("search") is None


def test_cancel_after_settle_makes_token_stale():
    debouncer = Debouncer(delay_seconds=0)
    token = debouncer.settle("search")

    # Slow request still running when the user picks a result.
    debouncer.cancel("search")

    assert not debouncer.is_current("search", token)


def test_later_event_makes_earlier_token_stale():
    debouncer = Debouncer(delay_seconds=0)
    first = debouncer.settle("search")
    second = debouncer.settle("search")

    assert not debouncer.is_current("search", first)
    assert debouncer.is_current("search", second)


def test_missing_token_is_never_current():
    assert Debouncer().is_current("search", None) is False


def test_zero_delay_does_not_sleep():
    def fail(_delay):
        raise AssertionError("should not sleep")

    assert Debouncer(delay_seconds=0, sleep=fail).settle() is not None


def test_only_last_of_concurrent_events_fires():
    debouncer = Debouncer(delay_seconds=0.2)
    results = {}
    started = threading.Barrier(2)

    def type_char(name, pause):
        started.wait()
        if pause:
            threading.Event().wait(0.05)
        results[name] = debouncer.settle("search") is not None

    first = threading.Thread(target=type_char, args=("first", False))
    second = threading.Thread(target=type_char, args=("second", True))
    first.start()
    second.start()
    first.join()
    second.join()

    assert results == {"first": False, "second": True}
