from __future__ import annotations

import io

import pytest

from fastx_sampler.errors import FastxIOError, FastxParseError
from fastx_sampler.fastx import FASTA, FASTQ, FastxReader, FastxRecord, write_record
from fastx_sampler.writer import OutputWriter

from fastx_helpers import fasta_text, fastq_text


def test_reads_fasta_and_drops_identifiers(write_file):
    path = write_file("x.fa", fasta_text(["ACGT", "GGCC"]))
    with FastxReader(path) as reader:
        assert reader.format == FASTA
        assert not reader.has_quality
        assert list(reader) == [FastxRecord("ACGT"), FastxRecord("GGCC")]


def test_wrapped_fasta_sequence_is_joined(write_file):
    path = write_file("wrapped.fa", ">r1\nACGT\nTTGG\n>r2\nCC\n")
    with FastxReader(path) as reader:
        assert [r.sequence for r in reader] == ["ACGTTTGG", "CC"]


def test_reads_fastq_with_quality(write_file):
    path = write_file("x.fq", fastq_text([("ACGT", "IIII"), ("GG", "#!")]))
    with FastxReader(path) as reader:
        assert reader.format == FASTQ
        records = list(reader)
    assert records == [FastxRecord("ACGT", "IIII"), FastxRecord("GG", "#!")]
    assert all(r.has_quality for r in records)


def test_empty_file_has_no_format(write_file):
    path = write_file("empty.fa", "")
    with FastxReader(path) as reader:
        assert reader.format is None
        assert list(reader) == []


def test_leading_blank_lines_are_skipped(write_file):
    path = write_file("blank.fa", "\n\n>r1\nACGT\n")
    with FastxReader(path) as reader:
        assert reader.format == FASTA
        assert list(reader) == [FastxRecord("ACGT")]


def test_unknown_marker_is_parse_error(write_file):
    path = write_file("bad.txt", "hello\nworld\n")
    with pytest.raises(FastxParseError):
        FastxReader(path)


def test_quality_length_mismatch_is_parse_error(write_file):
    path = write_file("bad.fq", "@r1\nACGT\n+\nII\n")
    with FastxReader(path) as reader:
        with pytest.raises(FastxParseError):
            list(reader)


def test_missing_file_is_io_error(tmp_path):
    missing = tmp_path / "missing.fa"
    with pytest.raises(FastxIOError) as excinfo:
        FastxReader(missing)
    assert excinfo.value.path == missing
    assert "missing.fa" in str(excinfo.value)


def test_write_record_picks_format_from_quality():
    handle = io.StringIO()
    write_record(handle, "0", FastxRecord("ACGT"))
    write_record(handle, "1", FastxRecord("GG", "II"))
    assert handle.getvalue() == ">0\nACGT\n@1\nGG\n+\nII\n"


def test_non_utf8_header_is_accepted(tmp_path):
    path = tmp_path / "latin.fa"
    path.write_bytes(b">r1 caf\xe9\nACGT\n>r2\nGGCC\n")
    with FastxReader(path) as reader:
        assert list(reader) == [FastxRecord("ACGT"), FastxRecord("GGCC")]


def test_non_ascii_sequence_bytes_survive_writing(tmp_path):
    source = tmp_path / "in.fq"
    source.write_bytes(b"@r1 \xff\nAC\xe9T\n+\nII\xf0I\n")
    out_path = tmp_path / "out.fq"
    with FastxReader(source) as reader, OutputWriter.create(out_path) as output:
        for record in reader:
            output.write(record)
    assert out_path.read_bytes() == b"@0\nAC\xe9T\n+\nII\xf0I\n"
