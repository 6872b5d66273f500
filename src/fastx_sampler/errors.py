"""Exception hierarchy for fastx sampling runs."""

from pathlib import Path
from typing import Optional, Union


class SamplerError(Exception):
    """Base class for every fatal error raised by fastx_sampler."""


class FastxIOError(SamplerError, OSError):
    """A file could not be opened, created, read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class FastxParseError(SamplerError):
    """A record could not be decoded as FASTA or FASTQ."""


class FormatMismatchError(SamplerError):
    """Input files disagree on their sequence format."""


class CounterOverflowError(SamplerError):
    """A counter would exceed the 64-bit unsigned range."""


class InsufficientEntriesError(SamplerError):
    """More records were requested than are available."""


class WeightUpdateError(SamplerError):
    """The weighted file index reached an inconsistent state."""


class ConfigError(SamplerError, ValueError):
    """Invalid run configuration."""


class UnsortedIndicesError(SamplerError, ValueError):
    """Record indices handed to the extractor are not ascending."""
