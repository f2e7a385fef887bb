import pytest

from fifo_bridge import NamedPipePath


@pytest.fixture
def pipe_path(tmp_path):
    return tmp_path / "test_pipe"


@pytest.fixture
def pipe(pipe_path):
    pipe = NamedPipePath(pipe_path)
    pipe.ensure_exists()
    yield pipe
    if pipe_path.exists():
        pipe_path.unlink()
