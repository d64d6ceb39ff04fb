from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PrefetchController(Generic[T]):
    """
    Run one background computation per result cycle and hand its outcome to
    the caller that asks for results.

    Responsibilities
    ----------------
    - :meth:`prepare` starts ``compute`` on a dedicated thread and returns
      immediately (fire-and-forget).
    - :meth:`collect` blocks until that computation finishes and returns its
      result, or re-raises the exception it failed with.

    Concurrency Model
    -----------------
    - One producer (the prefetch thread) and one consumer (the caller) per
      cycle. The outcome is handed over through a
      :class:`concurrent.futures.Future` set exactly once by the thread, so the
      wait in :meth:`collect` is a blocking wait, not a poll.
    - No timeout and no cancellation: a started computation always runs to
      completion or failure.
    - The pending future is per instance. Calling :meth:`prepare` again before
      :meth:`collect` is not supported.

    Parameters
    ----------
    compute
        Zero-argument callable doing the (slow) work.
    name
        Thread name used for the prefetch thread.
    """

    def __init__(self, compute: Callable[[], List[T]], name: str = "prefetch"):
        self._compute = compute
        self._name = name
        self._pending: Optional["Future[List[T]]"] = None
        self._thread: Optional[threading.Thread] = None

    def done(self) -> bool:
        """
        Return True when the pending computation has finished.

        Useful for callers that must not block (e.g. a UI thread). Returns
        False when nothing was prepared.
        """
        return self._pending is not None and self._pending.done()

    def prepare(self) -> None:
        """
        Start the computation on a background thread and return immediately.
        """
        fut: "Future[List[T]]" = Future()
        fut.set_running_or_notify_cancel()
        self._pending = fut
        self._thread = threading.Thread(target=self._run, args=(fut,), name=self._name, daemon=True)
        self._thread.start()

    def _run(self, fut: "Future[List[T]]") -> None:
        """
        Thread body: run the computation and publish its outcome.
        """
        try:
            result = self._compute()
        except BaseException as e:
            logger.debug("Prefetch %s failed: %r", self._name, e)
            fut.set_exception(e)
        else:
            fut.set_result(result)

    def collect(self) -> List[T]:
        """
        Wait for the prepared computation and return its result.

        Returns
        -------
        list
            Result of the computation, or an empty list if :meth:`prepare`
            was never called.

        Raises
        ------
        Exception
            Whatever the computation raised.
        """
        if self._pending is None:
            return []
        return self._pending.result()

    def join(self, timeout: float | None = 2.0) -> None:
        """
        Join the prefetch thread, if one was started.

        Parameters
        ----------
        timeout
            Maximum time to wait for the thread to exit.
        """
        if self._thread is not None:
            self._thread.join(timeout=timeout)
