import os
from typing import Optional, Union

from loguru import logger as log

from . import config

StrPath = Union[str, "os.PathLike[str]"]


class PipeError(Exception):
    """Base class for errors raised by fifo_bridge."""


class CreationError(PipeError, OSError):
    """A FIFO could not be created."""


class PipeExistsError(CreationError, FileExistsError):
    """Something already lives at the path a FIFO was to be created at."""


class PipeDeletedError(PipeError, RuntimeError):
    """A NamedPipePath was used after delete() consumed it."""


def create_pipe(path: StrPath, mode: Optional[int] = None):
    """Creates a FIFO special file at `path`.

    When `mode` is omitted the configured default applies (0o644 unless
    FIFO_BRIDGE_MODE says otherwise). The process umask still masks it.
    """
    if mode is None:
        mode = config.pipe_mode()
    try:
        os.mkfifo(path, mode)
    except FileExistsError as e:
        raise PipeExistsError(e.errno, e.strerror, os.fspath(path)) from e
    except OSError as e:
        raise CreationError(e.errno, e.strerror, os.fspath(path)) from e
    log.debug(f"FIFO created: {os.fspath(path)} (mode {mode:#o})")


def remove_pipe(path: StrPath):
    """Unlinks the FIFO at `path`. Missing paths raise FileNotFoundError."""
    os.unlink(path)
    log.debug(f"FIFO removed: {os.fspath(path)}")
