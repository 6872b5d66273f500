"""Utility functions for fastx_sampler."""

import sys

from tqdm.auto import tqdm

from .errors import CounterOverflowError

U64_MAX = 2**64 - 1


def checked_add(value: int, increment: int, what: str) -> int:
    """Add two counters, failing instead of exceeding the u64 range.

    Args:
        value: Current counter value.
        increment: Amount to add.
        what: Description of the counter, used in the error message.

    Returns:
        The sum.

    Raises:
        CounterOverflowError: If the sum does not fit in 64 unsigned bits.
    """
    total = value + increment
    if total > U64_MAX:
        raise CounterOverflowError(f"Overflow (>2^64) when {what}")
    return total


class WarningTracker:
    """Collect non-fatal warnings raised during a run."""

    def __init__(self, echo: bool = True) -> None:
        self.warnings: list[str] = []
        self.echo = echo

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        if self.echo:
            tqdm.write(f"⚠ {message}", file=sys.stderr)

    def get_warnings(self) -> list[str]:
        return list(self.warnings)
