"""Record counting and format detection over the input files."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .errors import FastxIOError, FormatMismatchError
from .fastx import FastxReader
from .utils import checked_add


@dataclass
class Catalog:
    """Per-file record counts of a set of input files."""

    paths: list[Path]
    counts: list[int]
    formats: list[Optional[str]]
    total_count: int = 0
    total_bytes: int = 0
    format: Optional[str] = None
    sizes: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.paths)


def file_sizes(paths: Sequence[Union[str, Path]]) -> tuple[list[int], int]:
    """Return the size of every file and their sum in bytes."""
    sizes = []
    total = 0
    for path in paths:
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise FastxIOError(f"Could not access metadata of file '{path}': {e}", path) from e
        sizes.append(size)
        total = checked_add(total, size, "summing file sizes")
    return sizes, total


def count_records(path: Union[str, Path]) -> tuple[int, Optional[str]]:
    """Count the records of one file in a single forward pass.

    Returns:
        Tuple of (record_count, detected_format). The format is None for
        empty files.
    """
    count = 0
    with FastxReader(path) as reader:
        for _record in reader:
            count = checked_add(count, 1, f"counting records in file '{path}'")
        return count, reader.format


def build_catalog(
    paths: Sequence[Union[str, Path]],
    progress: Optional[Any] = None,
    sizes: Optional[Sequence[int]] = None,
) -> Catalog:
    """Count the records of every input file, reading each exactly once.

    The first non-empty file fixes the expected format; any later
    non-empty file of a different format is rejected.

    Args:
        paths: Input files, in order.
        progress: Optional observer notified with ``update(n_bytes)`` after
            each file is counted.
        sizes: File sizes already obtained from ``file_sizes``; stat'ed here
            when omitted.

    Returns:
        Catalog of the input files.

    Raises:
        FastxIOError: If a file cannot be opened or stat'ed.
        FastxParseError: If a record cannot be decoded.
        FormatMismatchError: If two non-empty files differ in format.
        CounterOverflowError: If a count or sum exceeds 2^64 - 1.
    """
    paths = [Path(p) for p in paths]
    if sizes is None:
        sizes, total_bytes = file_sizes(paths)
    else:
        sizes = list(sizes)
        total_bytes = 0
        for size in sizes:
            total_bytes = checked_add(total_bytes, size, "summing file sizes")

    catalog = Catalog(
        paths=paths, counts=[], formats=[], total_bytes=total_bytes, sizes=sizes
    )
    for path, size in zip(paths, sizes):
        count, file_format = count_records(path)
        catalog.counts.append(count)
        catalog.formats.append(file_format)
        catalog.total_count = checked_add(
            catalog.total_count, count, "summing record counts over all files"
        )

        if catalog.format is None:
            catalog.format = file_format
        elif file_format is not None and file_format != catalog.format:
            raise FormatMismatchError(
                f"Mismatched sequence formats, the first nonempty file is "
                f"{catalog.format}, but '{path}' is {file_format}"
            )

        if progress is not None:
            progress.update(size)

    return catalog
