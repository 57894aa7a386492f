import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_run_id: ContextVar[str] = ContextVar("run_id", default="-")


def current_run_id() -> str:
    return _run_id.get()


@contextmanager
def run_scope(run_id: str | None = None) -> Iterator[str]:
    """Tag every log record emitted inside the block with one run id."""
    value = run_id or uuid.uuid4().hex[:12]
    token = _run_id.set(value)
    try:
        yield value
    finally:
        _run_id.reset(token)
