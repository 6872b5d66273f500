"""Forward-only FASTA/FASTQ record reader and record writer."""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, TextIO, Union

from Bio.SeqIO.FastaIO import SimpleFastaParser
from Bio.SeqIO.QualityIO import FastqGeneralIterator

from .errors import FastxIOError, FastxParseError

FASTA = "fasta"
FASTQ = "fastq"

_FORMAT_BY_MARKER = {b">": FASTA, b"@": FASTQ}

# Maps every byte to one character, so any input decodes and round-trips verbatim
FASTX_ENCODING = "latin-1"


@dataclass(frozen=True)
class FastxRecord:
    """A sequence record stripped of its original identifier."""

    sequence: str
    quality: Optional[str] = None

    @property
    def has_quality(self) -> bool:
        return self.quality is not None


class FastxReader:
    """Read the records of one FASTA or FASTQ file strictly forward.

    The format is detected from the first non-whitespace byte of the file
    before any record is parsed. Empty files have no format and yield no
    records.

    Args:
        path: File to read.

    Raises:
        FastxIOError: If the file cannot be opened.
        FastxParseError: If the file starts with neither '>' nor '@'.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        try:
            raw = open(self.path, "rb")
        except OSError as e:
            raise FastxIOError(
                f"Could not open file '{self.path}' for reading: {e}", self.path
            ) from e

        try:
            self.format = self._detect_format(raw)
        except Exception:
            raw.close()
            raise
        self._handle = io.TextIOWrapper(raw, encoding=FASTX_ENCODING)

    def _detect_format(self, raw: BinaryIO) -> Optional[str]:
        while True:
            try:
                chunk = raw.peek(1)
            except OSError as e:
                raise FastxIOError(f"Could not read file '{self.path}': {e}", self.path) from e
            if not chunk:
                return None

            stripped = chunk.lstrip()
            # Drop leading blank lines so the parser starts on the marker
            raw.read(len(chunk) - len(stripped))
            if not stripped:
                continue

            marker = stripped[:1]
            if marker not in _FORMAT_BY_MARKER:
                raise FastxParseError(
                    f"Unable to detect format of '{self.path}': expected '>' or '@', "
                    f"found {marker!r}"
                )
            return _FORMAT_BY_MARKER[marker]

    @property
    def has_quality(self) -> bool:
        return self.format == FASTQ

    def __iter__(self) -> Iterator[FastxRecord]:
        if self.format is None:
            return

        try:
            if self.format == FASTQ:
                for _title, sequence, quality in FastqGeneralIterator(self._handle):
                    yield FastxRecord(sequence, quality)
            else:
                for _title, sequence in SimpleFastaParser(self._handle):
                    yield FastxRecord(sequence)
        except ValueError as e:
            raise FastxParseError(f"Unable to parse fastx record in '{self.path}': {e}") from e
        except OSError as e:
            raise FastxIOError(f"Could not read file '{self.path}': {e}", self.path) from e

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "FastxReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def write_record(handle: TextIO, identifier: str, record: FastxRecord) -> None:
    """Write a record as FASTQ if it carries quality data, else as FASTA."""
    if record.quality is not None:
        handle.write(f"@{identifier}\n{record.sequence}\n+\n{record.quality}\n")
    else:
        handle.write(f">{identifier}\n{record.sequence}\n")
