"""Tests for the background event loader."""

import threading
import time

import pytest
from PySide6.QtCore import QCoreApplication

from backend.event_source import EventSource, EventSourceError
from backend.network_worker import EventLoader

from conftest import make_event


@pytest.fixture(scope="module")
def app():
    return QCoreApplication.instance() or QCoreApplication([])


def wait_until(app, predicate, timeout=5.0):
    """Pump the Qt event loop until predicate() holds or timeout expires."""
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        app.processEvents()
        time.sleep(0.01)
    app.processEvents()
    return predicate()


class StubSource:
    """Stands in for EventSource, counting loads and optionally blocking."""

    def __init__(self, result=None, error=None, gate=None):
        self.source = "stub"
        self.calls = 0
        self._result = result or []
        self._error = error
        self._gate = gate

    def load(self):
        self.calls += 1
        if self._gate is not None:
            self._gate.wait(5)
        if self._error is not None:
            raise self._error
        return self._result


def connect(loader):
    loaded, failed = [], []
    loader.events_loaded.connect(lambda events: loaded.append(events))
    loader.load_failed.connect(lambda message: failed.append(message))
    return loaded, failed


class TestEventLoader:
    """The single start-up load and its signals."""

    def test_success_emits_events_loaded(self, app, single_event):
        source = StubSource(result=[single_event])
        loader = EventLoader(source)
        loaded, failed = connect(loader)

        loader.start()
        assert wait_until(app, lambda: loaded)
        loader.shutdown(wait=True)

        assert loaded == [[single_event]]
        assert failed == []
        assert source.calls == 1

    def test_missing_file_emits_one_failure(self, app, tmp_path):
        loader = EventLoader(EventSource(str(tmp_path / "missing.json")))
        loaded, failed = connect(loader)

        loader.start()
        assert wait_until(app, lambda: failed)
        # Give a retry, if there were one, the chance to show up
        wait_until(app, lambda: len(failed) > 1, timeout=0.3)
        loader.shutdown(wait=True)

        assert len(failed) == 1
        assert "Cannot read" in failed[0]
        assert loaded == []
        assert not loader.is_pending()

    def test_source_error_does_not_retry(self, app):
        source = StubSource(error=EventSourceError("Network error: down"))
        loader = EventLoader(source)
        loaded, failed = connect(loader)

        loader.start()
        assert wait_until(app, lambda: failed)
        wait_until(app, lambda: source.calls > 1, timeout=0.3)
        loader.shutdown(wait=True)

        assert failed == ["Network error: down"]
        assert loaded == []
        assert source.calls == 1

    def test_unexpected_error_is_reported(self, app):
        loader = EventLoader(StubSource(error=KeyError("start")))
        loaded, failed = connect(loader)

        loader.start()
        assert wait_until(app, lambda: failed)
        loader.shutdown(wait=True)

        assert failed[0].startswith("KeyError")
        assert loaded == []

    def test_start_while_pending_is_ignored(self, app):
        gate = threading.Event()
        event = make_event("a", "2024-08-29T10:00:00", "2024-08-29T10:30:00")
        source = StubSource(result=[event], gate=gate)
        loader = EventLoader(source)
        loaded, failed = connect(loader)

        loader.start()
        assert loader.is_pending()
        loader.start()
        gate.set()

        assert wait_until(app, lambda: loaded)
        loader.shutdown(wait=True)

        assert source.calls == 1
        assert loaded == [[event]]
        assert failed == []
