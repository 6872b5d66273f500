"""Out-of-core random sampling and concatenation of FASTA/FASTQ files."""

from .catalog import Catalog, build_catalog
from .config import SamplerConfig
from .errors import (
    ConfigError,
    CounterOverflowError,
    FastxIOError,
    FastxParseError,
    FormatMismatchError,
    InsufficientEntriesError,
    SamplerError,
    UnsortedIndicesError,
    WeightUpdateError,
)
from .extract import copy_entries
from .fastx import FastxReader, FastxRecord
from .pipeline import SampleResult, run
from .sampler import WeightedIndex, WithoutReplacement, WithReplacement, strategy_for
from .writer import OutputWriter

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ConfigError",
    "CounterOverflowError",
    "FastxIOError",
    "FastxParseError",
    "FastxReader",
    "FastxRecord",
    "FormatMismatchError",
    "InsufficientEntriesError",
    "OutputWriter",
    "SampleResult",
    "SamplerConfig",
    "SamplerError",
    "UnsortedIndicesError",
    "WeightUpdateError",
    "WeightedIndex",
    "WithReplacement",
    "WithoutReplacement",
    "build_catalog",
    "copy_entries",
    "run",
    "strategy_for",
]
