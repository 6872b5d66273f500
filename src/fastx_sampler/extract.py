"""Streaming extraction of selected records from one file."""

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .errors import FastxParseError, UnsortedIndicesError
from .fastx import FastxReader
from .writer import OutputWriter


def copy_entries(
    source: Union[str, Path],
    output: OutputWriter,
    indices: Iterable[int],
    progress: Optional[Any] = None,
) -> int:
    """Copy the records at ``indices`` from ``source`` to ``output``.

    The file is read once, strictly forward. Indices must be ascending; a
    repeated index emits the record already held again without reading on.

    Args:
        source: Input file.
        output: Destination sink.
        indices: Ascending, possibly repeating, record positions.
        progress: Optional observer notified with ``update(1)`` per record.

    Returns:
        Number of records written.

    Raises:
        FastxIOError: If the file cannot be opened or read.
        FastxParseError: If a record cannot be decoded, or the file ends
            before the last requested index.
    """
    written = 0
    with FastxReader(source) as reader:
        records = iter(reader)
        current_index = -1
        current_record = None
        for wanted in indices:
            wanted = int(wanted)
            if wanted < current_index:
                raise UnsortedIndicesError(
                    f"Indices must be ascending, got {wanted} after {current_index}"
                )
            while current_index < wanted:
                try:
                    current_record = next(records)
                except StopIteration:
                    raise FastxParseError(
                        f"'{source}' ended after {current_index + 1} records, "
                        f"but record {wanted} was requested"
                    ) from None
                current_index += 1

            output.write(current_record)
            written += 1
            if progress is not None:
                progress.update(1)

    return written
