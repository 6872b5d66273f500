from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from fastx_helpers import fasta_text


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture()
def small_fastas(write_file) -> tuple[Path, Path]:
    # 3 and 5 records with distinct sequences
    a = write_file("a.fasta", fasta_text(["AAAA", "AAAC", "AAAG"], prefix="a"))
    b = write_file("b.fasta", fasta_text(["CCCA", "CCCC", "CCCG", "CCCT", "CCTA"], prefix="b"))
    return a, b
