"""Eases working with Unix named pipes (FIFOs) anywhere on the filesystem.

Create a pipe, write to it in one thread and read from it in another::

    import threading
    from fifo_bridge import NamedPipePath

    pipe = NamedPipePath("./my_pipe")
    # Only one side should do this; two racing creators can collide.
    pipe.ensure_exists()
    writer = pipe.open_write()
    reader = pipe.open_read()

    t = threading.Thread(target=writer.write_str, args=("Hello, pipes!",))
    t.start()
    assert reader.read_string() == "Hello, pipes!"
    t.join()

    pipe.delete()

Every read and write blocks until a peer opens the other end. There is no
lock on the pipe; any process can delete it underneath a handle.
"""

from loguru import logger as log

from .core import NamedPipePath
from .components import NamedPipeReader, NamedPipeWriter
from .infrastructure import (
    CreationError,
    PipeDeletedError,
    PipeError,
    PipeExistsError,
    create_pipe,
    remove_pipe,
)
from .logs import setup_logging

# Silent unless the application opts in via setup_logging() or log.enable().
log.disable(__name__)

__all__ = [
    "NamedPipePath",
    "NamedPipeReader",
    "NamedPipeWriter",
    "CreationError",
    "PipeDeletedError",
    "PipeError",
    "PipeExistsError",
    "create_pipe",
    "remove_pipe",
    "setup_logging",
]
