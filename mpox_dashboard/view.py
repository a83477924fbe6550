import concurrent.futures
import threading
from typing import Callable, Optional

from mpox_dashboard.fetch import load_data
from mpox_dashboard.logging_setup import get_logger
from mpox_dashboard.models import LOADING, DisplayState

logger = get_logger(__name__)


class DashboardView:
    """
    Owns one dashboard's display state for the lifetime of a mount.

    ``initialize()`` schedules ``load_data`` once on the executor; the
    future's completion callback is the only writer of ``state``. After
    ``unmount()`` a late completion is ignored.
    """

    def __init__(
        self,
        executor: Optional[concurrent.futures.Executor] = None,
        loader: Callable[[], DisplayState] = load_data,
    ):
        self._executor = executor
        self._owns_executor = executor is None
        self._loader = loader
        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._generation = 0
        self._future: Optional[concurrent.futures.Future] = None
        self.state = DisplayState()

    def initialize(self) -> concurrent.futures.Future:
        with self._lock:
            if self._future is not None:
                return self._future
            if self._executor is None:
                self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
            self.state = DisplayState(phase=LOADING)
            generation = self._generation
            self._future = self._executor.submit(self._loader)
        self._future.add_done_callback(lambda future: self._complete(future, generation))
        if self._owns_executor:
            self._executor.shutdown(wait=False)
        return self._future

    def _complete(self, future: concurrent.futures.Future, generation: int) -> None:
        try:
            if future.cancelled():
                return
            # load_data absorbs fetch failures; anything else stays on the future for the caller
            if future.exception() is not None:
                logger.error("Dashboard load crashed: %s", future.exception())
                return
            with self._lock:
                if generation != self._generation:
                    logger.debug("Dropping stale dashboard update (generation %d, now %d)", generation, self._generation)
                    return
                self.state = future.result()
        finally:
            self._settled.set()

    def wait(self, timeout: Optional[float] = None) -> DisplayState:
        """Block until the completion callback has run, then return the state."""
        if self._future is None:
            raise RuntimeError("wait() called before initialize()")
        self._future.result(timeout)
        self._settled.wait(timeout)
        return self.state

    def unmount(self) -> None:
        with self._lock:
            self._generation += 1
            if self._future is not None:
                self._future.cancel()
