"""Tests for operation status transitions."""

from app.services import status


def test_begin_drops_previous_banner():
    assert status.begin(status.Failed("boom")) == status.PENDING
    assert status.begin(status.Succeeded("ok")) == status.PENDING


def test_finish_transitions():
    assert status.succeed(status.PENDING, "done") == status.Succeeded("done")
    assert status.fail(status.PENDING, "nope") == status.Failed("nope")


def test_dismiss_clears_finished_banner():
    assert status.dismiss(status.Failed("nope")) == status.IDLE
    assert status.dismiss(status.Succeeded("done")) == status.IDLE


def test_dismiss_keeps_pending_operation():
    assert status.dismiss(status.PENDING) == status.PENDING


def test_kinds():
    assert status.IDLE.kind == "idle"
    assert status.PENDING.kind == "pending"
    assert status.Succeeded("x").kind == "succeeded"
    assert status.Failed("x").kind == "failed"
