import pytest

from portreview.base import Scope
from portreview.messages import error, success


def test_deferred_callbacks_run_in_reverse_order():
    calls = []
    with Scope() as scope:
        scope.defer(lambda: calls.append("first"))
        scope.defer(lambda: calls.append("second"))
    assert calls == ["second", "first"]


def test_failure_callbacks_only_run_on_error():
    seen = []
    with Scope() as scope:
        scope.on_failure(seen.append)
    assert seen == []

    with pytest.raises(ValueError):
        with Scope() as scope:
            scope.on_failure(seen.append)
            raise ValueError("boom")
    assert len(seen) == 1
    assert isinstance(seen[0], ValueError)


def test_failing_cleanup_does_not_mask_other_callbacks():
    calls = []

    def broken():
        raise RuntimeError("cleanup failed")

    with Scope() as scope:
        scope.defer(lambda: calls.append("ran"))
        scope.defer(broken)
    assert calls == ["ran"]


def test_multiline_messages_are_indented(capsys):
    error("Contract 'x' failed:", "path at a/.gitkeep")
    success("done")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("Contract 'x' failed:")
    assert lines[1] == "    path at a/.gitkeep"
    assert lines[2].endswith("done")
