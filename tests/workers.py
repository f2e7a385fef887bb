import threading

JOIN_TIMEOUT = 5


class Worker:
    """Runs a blocking call on a daemon thread and keeps its outcome."""

    def __init__(self, fn, *args):
        self.result = None
        self.error = None
        self._thread = threading.Thread(target=self._run, args=(fn, args), daemon=True)
        self._thread.start()

    def _run(self, fn, args):
        try:
            self.result = fn(*args)
        except BaseException as e:
            self.error = e

    def still_blocked_after(self, seconds: float) -> bool:
        self._thread.join(seconds)
        return self._thread.is_alive()

    def wait(self, timeout=JOIN_TIMEOUT):
        self._thread.join(timeout)
        assert not self._thread.is_alive(), "worker still blocked"
        if self.error is not None:
            raise self.error
        return self.result
