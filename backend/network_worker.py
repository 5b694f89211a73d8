"""
Network Worker - loads the interview list in a background thread.

Uses ThreadPoolExecutor so the window stays responsive while the list is
fetched. Results are delivered via Qt signals emitted on the main thread.
"""

from concurrent.futures import ThreadPoolExecutor, Future
from typing import Optional
import traceback
import sys

from PySide6.QtCore import QObject, Signal

from .event_source import EventSource, EventSourceError


class EventLoader(QObject):
    """
    Runs the single start-up load of an EventSource off the GUI thread.

    Signals are delivered on the main thread when the load completes.
    """

    # Args: (events: list[InterviewEvent])
    events_loaded = Signal(object)

    # Args: (error_message: str)
    load_failed = Signal(str)

    def __init__(self, source: EventSource, parent=None):
        super().__init__(parent)
        self._source = source
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="events")
        self._pending: Optional[Future] = None

    @property
    def source(self) -> EventSource:
        return self._source

    def start(self) -> None:
        """
        Submit the load.

        Calling start() while a load is pending does nothing.
        """
        if self.is_pending():
            return
        self._pending = self._executor.submit(self._source.load)
        self._pending.add_done_callback(self._on_done)

    def _on_done(self, future: Future) -> None:
        """Handle completion of the background load."""
        self._pending = None
        if future.cancelled():
            return

        try:
            events = future.result()
        except EventSourceError as e:
            print(f"ERROR: Loading events from '{self._source.source}' failed: {e}", file=sys.stderr)
            self.load_failed.emit(str(e))
            return
        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"ERROR: Unexpected failure loading events: {error_msg}", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)
            self.load_failed.emit(error_msg)
            return

        # Qt queues cross-thread signal delivery to the receiver's thread
        self.events_loaded.emit(events)

    def is_pending(self) -> bool:
        """Check if the load is still running."""
        return self._pending is not None and not self._pending.done()

    def shutdown(self, wait: bool = True) -> None:
        """Shutdown the executor, optionally waiting for the pending load."""
        self._executor.shutdown(wait=wait, cancel_futures=True)
