"""
Check runner.

Runs validation units in order and stops at the first failure.
"""

from typing import Callable, Optional

from ..domain.errors import CheckError
from ..shared.logging import get_logger, run_context

logger = get_logger(__name__)

ValidationUnit = Callable[[], Optional[CheckError]]


def run(*units: ValidationUnit) -> Optional[CheckError]:
    """
    Evaluate validation units in order and return the first error.

    Units after a failing one are never evaluated. Running no units
    succeeds.

    Args:
        units: Checks, or any zero-argument callables returning an error or None

    Returns:
        The first error produced, or None if every unit passed
    """
    with run_context():
        logger.debug("run_started", units=len(units))

        for position, unit in enumerate(units):
            error = unit()
            if error is not None:
                logger.debug(
                    "check_failed",
                    position=position,
                    check=_unit_name(unit),
                    error_type=type(error).__name__,
                    error=str(error),
                )
                return error

        logger.debug("run_passed", units=len(units))
    return None


def _unit_name(unit: ValidationUnit) -> str:
    name = getattr(unit, "name", None)
    if isinstance(name, str):
        return name
    return getattr(unit, "__qualname__", type(unit).__name__)
