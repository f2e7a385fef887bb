import os
import asyncio
import threading
from typing import TYPE_CHECKING

from loguru import logger as log

if TYPE_CHECKING:
    from .core import NamedPipePath


def _in_daemon_thread(fn, *args) -> asyncio.Future:
    """Runs a blocking pipe call on a daemon thread, resolving a future on the running loop.

    A call abandoned through cancellation or a timeout stays blocked in open()
    until a peer shows up; it never holds up asyncio.run() or interpreter exit.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def resolve(result, error):
        if future.cancelled():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def target():
        try:
            outcome = (fn(*args), None)
        except Exception as e:
            outcome = (None, e)
        try:
            loop.call_soon_threadsafe(resolve, *outcome)
        except RuntimeError:
            # Loop closed while the call was blocked; nobody is waiting.
            log.debug(f"Dropped result of {fn.__qualname__}: event loop closed")

    threading.Thread(target=target, name=f"fifo-{fn.__name__}", daemon=True).start()
    return future


class NamedPipeReader:
    """Reads whole writer sessions from a named pipe.

    Every read opens the FIFO afresh and closes it before returning. Opening
    for read blocks until a writer opens the other end, and end-of-stream only
    arrives once that writer closes, so a long-lived descriptor would either
    hang at construction or merge consecutive sessions together.
    """

    def __init__(self, source: "NamedPipePath"):
        self._pipe = source.copy()

    @property
    def pipe(self) -> "NamedPipePath":
        return self._pipe

    def ensure_pipe_exists(self) -> "NamedPipeReader":
        """Creates the FIFO if missing. Returns self for chaining."""
        self._pipe.ensure_exists()
        return self

    def read(self) -> bytes:
        """Blocks until a writer connects, then reads until it closes."""
        path = self._pipe.path
        log.debug(f"Waiting for writer: {path}")
        fd = os.open(path, os.O_RDONLY)
        with os.fdopen(fd, "rb") as f:
            data = f.read()
        log.debug(f"Read {len(data)} bytes from {path}")
        return data

    def read_string(self) -> str:
        """Same as read(), decoded as UTF-8."""
        return self.read().decode("utf-8")

    async def aread(self) -> bytes:
        return await _in_daemon_thread(self.read)

    async def aread_string(self) -> str:
        return await _in_daemon_thread(self.read_string)

    def __repr__(self):
        return f"NamedPipeReader({str(self._pipe.path)!r})"


class NamedPipeWriter:
    """Writes to a named pipe, one session per call.

    The FIFO is opened without O_CREAT, so a missing pipe fails with
    FileNotFoundError instead of leaving a regular file behind. Call
    `ensure_pipe_exists` first when that matters.
    """

    def __init__(self, source: "NamedPipePath"):
        self._pipe = source.copy()

    @property
    def pipe(self) -> "NamedPipePath":
        return self._pipe

    def ensure_pipe_exists(self) -> "NamedPipeWriter":
        """Creates the FIFO if missing. Returns self for chaining."""
        self._pipe.ensure_exists()
        return self

    def write(self, data: bytes):
        """Blocks until a reader connects, writes everything, then closes.

        Closing is what tells the reader the session is over.
        """
        path = self._pipe.path
        log.debug(f"Waiting for reader: {path}")
        fd = os.open(path, os.O_WRONLY)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        log.debug(f"Wrote {len(data)} bytes to {path}")

    def write_str(self, data: str):
        self.write(data.encode("utf-8"))

    async def awrite(self, data: bytes):
        await _in_daemon_thread(self.write, data)

    async def awrite_str(self, data: str):
        await _in_daemon_thread(self.write_str, data)

    def __repr__(self):
        return f"NamedPipeWriter({str(self._pipe.path)!r})"
