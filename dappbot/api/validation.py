"""Body Validation — turns a rejected guard into a 400 error envelope.

Invariants:
    - Guards answer yes/no only; this is where "no" becomes an exception
    - The raised InvalidBodyError renders as a user-error envelope (400)
"""

import logging
from typing import Any, Callable

from dappbot.core.errors import ErrorContext, InvalidBodyError

logger = logging.getLogger(__name__)


def require_shape(
    value: Any,
    guard: Callable[[Any], bool],
    shape: str,
    context: ErrorContext | None = None,
) -> Any:
    """Return `value` unchanged if `guard` accepts it, else raise InvalidBodyError."""
    if not guard(value):
        error = InvalidBodyError(shape, context)
        logger.info(
            f"Rejected body: not a valid {shape}",
            extra={"shape": shape, "error_code": error.code},
        )
        raise error
    return value
