"""Tests for the process-lifetime dedupe tracker."""

from prtriage_core.dedupe import DedupeTracker

PR_A = "https://api.github.com/repos/acme/widgets/issues/1"
PR_B = "https://api.github.com/repos/acme/widgets/issues/2"


def test_starts_empty():
    tracker = DedupeTracker()
    assert len(tracker) == 0
    assert PR_A not in tracker


def test_record_returns_new_tracker():
    empty = DedupeTracker()
    tracker = empty.record(PR_A)
    assert PR_A in tracker
    assert PR_A not in empty


def test_grows_monotonically():
    tracker = DedupeTracker().record(PR_A).record(PR_B)
    assert PR_A in tracker
    assert PR_B in tracker
    assert len(tracker) == 2


def test_recording_known_identifier_is_a_no_op():
    tracker = DedupeTracker().record(PR_A)
    assert tracker.record(PR_A) is tracker


def test_fresh_trackers_share_no_state():
    DedupeTracker().record(PR_A)
    assert PR_A not in DedupeTracker()
