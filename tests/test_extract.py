from __future__ import annotations

import builtins

import numpy as np
import pytest

from fastx_sampler.errors import (
    FastxIOError,
    FastxParseError,
    SamplerError,
    UnsortedIndicesError,
)
from fastx_sampler.extract import copy_entries
from fastx_sampler.writer import OutputWriter

from fastx_helpers import fasta_text, fastq_text, read_output

SEQUENCES = ["AAAA", "CCCC", "GGGG", "TTTT", "ACAC", "GTGT", "AGAG"]


@pytest.fixture()
def opened_paths(monkeypatch):
    """Record every path the reader opens."""
    opened = []

    def counting_open(path, *args, **kwargs):
        opened.append(str(path))
        return builtins.open(path, *args, **kwargs)

    monkeypatch.setattr("fastx_sampler.fastx.open", counting_open, raising=False)
    return opened


def test_repeated_indices_reuse_held_record(write_file, tmp_path, opened_paths):
    source = write_file("in.fa", fasta_text(SEQUENCES))
    out_path = tmp_path / "out.fa"

    with OutputWriter.create(out_path) as output:
        written = copy_entries(source, output, [2, 2, 5])

    assert written == 3
    assert read_output(out_path) == [("0", "GGGG", None), ("1", "GGGG", None), ("2", "GTGT", None)]
    assert opened_paths == [str(source)]


def test_identifiers_continue_across_files(write_file, tmp_path):
    first = write_file("a.fa", fasta_text(SEQUENCES[:3]))
    second = write_file("b.fa", fasta_text(SEQUENCES[3:]))
    out_path = tmp_path / "out.fa"

    with OutputWriter.create(out_path) as output:
        copy_entries(first, output, [0, 2])
        copy_entries(second, output, [1])
        assert output.next_index == 3

    assert [r[:2] for r in read_output(out_path)] == [("0", "AAAA"), ("1", "GGGG"), ("2", "ACAC")]


def test_fastq_records_keep_quality(write_file, tmp_path):
    source = write_file("in.fq", fastq_text([("ACGT", "IIII"), ("GGCC", "#!#!")]))
    out_path = tmp_path / "out.fq"

    with OutputWriter.create(out_path) as output:
        copy_entries(source, output, [1])

    assert out_path.read_text() == "@0\nGGCC\n+\n#!#!\n"


def test_index_past_end_is_parse_error(write_file, tmp_path):
    source = write_file("in.fa", fasta_text(SEQUENCES[:2]))
    with OutputWriter.create(tmp_path / "out.fa") as output:
        with pytest.raises(FastxParseError):
            copy_entries(source, output, [0, 4])


def test_descending_indices_are_rejected(write_file, tmp_path):
    source = write_file("in.fa", fasta_text(SEQUENCES))
    with OutputWriter.create(tmp_path / "out.fa") as output:
        with pytest.raises(UnsortedIndicesError) as excinfo:
            copy_entries(source, output, [3, 1])
    assert isinstance(excinfo.value, SamplerError)


def test_progress_is_notified_per_record(write_file, tmp_path):
    source = write_file("in.fa", fasta_text(SEQUENCES))
    updates = []

    class _Progress:
        def update(self, n):
            updates.append(n)

    with OutputWriter.create(tmp_path / "out.fa") as output:
        copy_entries(source, output, [0, 0, 6], progress=_Progress())
    assert updates == [1, 1, 1]


def test_missing_source_is_io_error(tmp_path):
    with OutputWriter.create(tmp_path / "out.fa") as output:
        with pytest.raises(FastxIOError):
            copy_entries(tmp_path / "missing.fa", output, [0])


def test_output_in_missing_directory_is_io_error(tmp_path):
    with pytest.raises(FastxIOError):
        OutputWriter.create(tmp_path / "no" / "such" / "dir" / "out.fa")


def test_numpy_index_arrays_are_accepted(write_file, tmp_path):
    source = write_file("in.fa", fasta_text(SEQUENCES))
    out_path = tmp_path / "out.fa"
    with OutputWriter.create(out_path) as output:
        copy_entries(source, output, np.array([1, 1, 4], dtype=np.uint64))
    assert [r[1] for r in read_output(out_path)] == ["CCCC", "CCCC", "ACAC"]
