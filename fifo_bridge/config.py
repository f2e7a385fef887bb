import os

DEFAULT_PIPE_MODE = 0o644
DEFAULT_LOG_LEVEL = "INFO"

MODE_ENV = "FIFO_BRIDGE_MODE"
LOG_LEVEL_ENV = "FIFO_BRIDGE_LOG_LEVEL"


def pipe_mode() -> int:
    """Permission bits applied to new FIFOs when no mode is given."""
    raw = os.getenv(MODE_ENV)
    if not raw:
        return DEFAULT_PIPE_MODE
    try:
        return int(raw, 8)
    except ValueError:
        raise ValueError(f"{MODE_ENV} must be an octal mode, got {raw!r}") from None


def log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
