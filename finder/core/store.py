# backend/finder/core/store.py
import logging
import threading

from finder.core.errors import StoreNotReadyError

logger = logging.getLogger(__name__)

UNINITIALIZED = "uninitialized"
READY = "ready"
FAILED = "failed"
CLOSED = "closed"


class StoreHandle:
    """
    Process-wide handle on the restaurant store.

    Lifecycle is uninitialized -> ready -> closed; a connect that raises
    moves the handle to failed, from where `connect()` may be tried again.
    The handle is created once by the app factory and injected into the
    app; request handlers only read it. Asking for the repository while not
    ready raises StoreNotReadyError so handlers can answer 503 instead of
    blocking.
    """

    name = "store"

    def __init__(self):
        self._state = UNINITIALIZED
        self._repository = None
        self._lock = threading.Lock()

    @property
    def state(self) -> str:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state == READY

    def _open(self):
        raise NotImplementedError

    def _close(self):
        pass

    def connect(self):
        with self._lock:
            if self._state not in (UNINITIALIZED, FAILED):
                return
            try:
                self._repository = self._open()
            except Exception:
                self._state = FAILED
                raise
            self._state = READY
        logger.info(f"Connected to {self.name}")

    def connect_in_background(self) -> threading.Thread:
        def _run():
            try:
                self.connect()
            except Exception:
                logger.exception(f"{self.name} connection failed")

        thread = threading.Thread(target=_run, name=f"{self.name}-connect", daemon=True)
        thread.start()
        return thread

    def repository(self):
        if self._state == FAILED:
            raise StoreNotReadyError("Database connection failed")
        if self._state != READY:
            raise StoreNotReadyError("Database connection not established")
        return self._repository

    def close(self):
        with self._lock:
            if self._state == READY:
                self._close()
            self._repository = None
            self._state = CLOSED
