"""
Run-scoped logging context.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

import structlog

_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def generate_run_id() -> str:
    """Generate a unique run ID."""
    return f"run_{uuid.uuid4().hex[:12]}"


def get_run_id() -> Optional[str]:
    """Get the ID of the run currently being evaluated."""
    return _run_id.get()


@contextmanager
def run_context(run_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a run ID to every log line emitted inside the block.

    Nested runs get their own ID and restore the outer one on exit.

    Args:
        run_id: Explicit run ID; generated when omitted

    Yields:
        The bound run ID
    """
    run_id = run_id or generate_run_id()
    token = _run_id.set(run_id)
    try:
        with structlog.contextvars.bound_contextvars(run_id=run_id):
            yield run_id
    finally:
        _run_id.reset(token)
