"""Output sink that renumbers records sequentially."""

from pathlib import Path
from typing import Optional, TextIO, Union

from .errors import FastxIOError
from .fastx import FASTX_ENCODING, FastxRecord, write_record


class OutputWriter:
    """Write records under the identifiers 0, 1, 2, ... in emission order.

    Each record is written as FASTQ if it carries quality data and as
    FASTA otherwise.

    Args:
        handle: Open text handle to write to.
        path: Path of the handle, used in error messages.
    """

    def __init__(self, handle: TextIO, path: Optional[Union[str, Path]] = None) -> None:
        self.handle = handle
        self.path = path
        self.next_index = 0

    @classmethod
    def create(cls, path: Union[str, Path]) -> "OutputWriter":
        try:
            handle = open(path, "w", encoding=FASTX_ENCODING)
        except OSError as e:
            raise FastxIOError(
                f"Could not create and open output file '{path}' for writing: {e}", path
            ) from e
        return cls(handle, path)

    def write(self, record: FastxRecord) -> None:
        try:
            write_record(self.handle, str(self.next_index), record)
        except OSError as e:
            kind = "fastq" if record.has_quality else "fasta"
            raise FastxIOError(f"Cannot write {kind} record to '{self.path}': {e}", self.path) from e
        self.next_index += 1

    def close(self) -> None:
        try:
            self.handle.flush()
        except OSError as e:
            raise FastxIOError(f"Unable to flush output buffer of '{self.path}': {e}", self.path) from e
        finally:
            self.handle.close()

    def __enter__(self) -> "OutputWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
