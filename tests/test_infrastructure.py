import errno
import os
import stat

import pytest

from fifo_bridge import CreationError, PipeError, PipeExistsError, create_pipe, remove_pipe


def test_create_pipe_makes_fifo(pipe_path):
    create_pipe(pipe_path)
    assert stat.S_ISFIFO(os.stat(pipe_path).st_mode)


def test_create_pipe_with_explicit_mode(pipe_path):
    create_pipe(pipe_path, 0o600)
    assert stat.S_IMODE(os.stat(pipe_path).st_mode) == 0o600


def test_create_pipe_uses_mode_from_environment(pipe_path, monkeypatch):
    monkeypatch.setenv("FIFO_BRIDGE_MODE", "0o600")
    create_pipe(pipe_path)
    assert stat.S_IMODE(os.stat(pipe_path).st_mode) == 0o600


def test_create_pipe_over_existing_entry(pipe_path):
    pipe_path.write_text("not a pipe")
    with pytest.raises(PipeExistsError) as excinfo:
        create_pipe(pipe_path)
    err = excinfo.value
    assert isinstance(err, FileExistsError)
    assert isinstance(err, CreationError)
    assert isinstance(err, PipeError)
    assert err.errno == errno.EEXIST
    assert err.filename == str(pipe_path)


def test_create_pipe_in_missing_directory(tmp_path):
    target = tmp_path / "missing" / "pipe"
    with pytest.raises(CreationError) as excinfo:
        create_pipe(target)
    assert not isinstance(excinfo.value, PipeExistsError)
    assert excinfo.value.errno == errno.ENOENT
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_remove_pipe(pipe_path):
    create_pipe(pipe_path)
    remove_pipe(pipe_path)
    assert not pipe_path.exists()


def test_remove_missing_pipe(pipe_path):
    with pytest.raises(FileNotFoundError):
        remove_pipe(pipe_path)
