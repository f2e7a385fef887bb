import os
import stat
from pathlib import Path

from loguru import logger as log

from .components import NamedPipeReader, NamedPipeWriter
from .infrastructure import PipeDeletedError, StrPath, create_pipe, remove_pipe


class NamedPipePath:
    """Identifies a Unix named pipe (FIFO) by its path.

    Holds no open descriptor, so copies are cheap and can be handed to any
    number of readers and writers. Nothing here assumes the FIFO exists;
    use `ensure_exists` before reading or writing.

    There is no lock on the pipe: any process may delete or recreate the
    path underneath a binding, and the binding cannot tell.
    """

    __slots__ = ("_path", "_deleted")

    def __init__(self, path: StrPath):
        self._path = Path(path)
        self._deleted = False

    @property
    def path(self) -> Path:
        self._check_alive()
        return self._path

    def _check_alive(self):
        if self._deleted:
            raise PipeDeletedError(f"{self._path} was deleted through this binding")

    def exists(self) -> bool:
        """Checks if the path exists. Not cached."""
        self._check_alive()
        return os.path.exists(self._path)

    def is_fifo(self) -> bool:
        """Checks if the path exists and is a FIFO special file."""
        self._check_alive()
        try:
            return stat.S_ISFIFO(os.stat(self._path).st_mode)
        except (FileNotFoundError, NotADirectoryError):
            return False

    def ensure_exists(self):
        """Creates a FIFO at the path if nothing is there yet.

        The check and the creation are two steps. If another binding creates
        the same path in between, PipeExistsError is raised; treat it as
        success. Calling this from only one side of a reader/writer pair
        avoids the race.
        """
        self._check_alive()
        if not self.exists():
            create_pipe(self._path)

    def delete(self):
        """Removes the pipe from disk, if present, and consumes the binding.

        Any further use of this object raises PipeDeletedError. Readers and
        writers derived earlier keep their own copies and are unaffected.
        """
        self._check_alive()
        self._deleted = True
        if os.path.exists(self._path):
            remove_pipe(self._path)
        else:
            log.debug(f"FIFO already absent: {self._path}")

    def open_read(self) -> "NamedPipeReader":
        """Creates a reader for this pipe. Does not touch the filesystem."""
        self._check_alive()
        return NamedPipeReader(self)

    def open_write(self) -> "NamedPipeWriter":
        """Creates a writer for this pipe. Does not touch the filesystem."""
        self._check_alive()
        return NamedPipeWriter(self)

    def copy(self) -> "NamedPipePath":
        self._check_alive()
        return NamedPipePath(self._path)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __enter__(self):
        self.ensure_exists()
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self._deleted:
            self.delete()

    def __eq__(self, other):
        if not isinstance(other, NamedPipePath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self):
        return hash(self._path)

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __repr__(self):
        state = " deleted" if self._deleted else ""
        return f"NamedPipePath({str(self._path)!r}){state}"
