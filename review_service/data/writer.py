import queue
import threading

import structlog

logger = structlog.get_logger()

_CHANGED = object()
_STOP = object()


class SnapshotWriter:
    """
    Single background writer for the progress file.

    ``notify()`` only enqueues a signal, so callers never wait on disk I/O.
    Signals that arrive while a save is running collapse into one save of
    the latest snapshot. A failed save is logged and retried on the next
    signal, since every save writes the whole snapshot.
    """

    def __init__(self, store, snapshot, join_timeout: float = 10.0):
        self.store = store
        self.snapshot = snapshot
        self.join_timeout = join_timeout
        self._queue = queue.Queue()
        self._save_lock = threading.Lock()
        self._thread = None
        self._dirty = False

    def start(self):
        if not self.running:
            self._thread = threading.Thread(
                target=self._run, name="progress-writer", daemon=True
            )
            self._thread.start()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def dirty(self) -> bool:
        return self._dirty

    def notify(self):
        self._dirty = True
        self._queue.put(_CHANGED)

    def flush(self) -> bool:
        """Save synchronously; returns False when the store refused the write."""
        with self._save_lock:
            # Cleared before the snapshot so a concurrent notify() re-marks it
            self._dirty = False
            records = self.snapshot()
            try:
                self.store.save_all(records)
            except Exception:
                self._dirty = True
                logger.exception("progress_save_failed", card_count=len(records))
                return False
        logger.debug("progress_saved", card_count=len(records))
        return True

    def close(self) -> bool:
        """Stop the thread, then save once more if anything is unsaved."""
        if self.running:
            self._queue.put(_STOP)
            self._thread.join(timeout=self.join_timeout)
            if self._thread.is_alive():
                logger.warning("progress_writer_stop_timeout", timeout=self.join_timeout)
        self._thread = None
        if self._dirty:
            return self.flush()
        return True

    def _run(self):
        while True:
            signal = self._queue.get()
            stop = signal is _STOP
            changed = signal is _CHANGED
            # Drain whatever piled up during the previous save
            while True:
                try:
                    signal = self._queue.get_nowait()
                except queue.Empty:
                    break
                stop = stop or signal is _STOP
                changed = changed or signal is _CHANGED
            if changed:
                self.flush()
            if stop:
                return
