"""Run a full sampling or concatenation over a set of FASTA/FASTQ files."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import numpy as np
from tqdm.auto import tqdm

from .catalog import Catalog, build_catalog, file_sizes
from .config import SamplerConfig
from .extract import copy_entries
from .report import write_run_report
from .sampler import all_indices, strategy_for
from .utils import WarningTracker
from .writer import OutputWriter


@dataclass
class SampleResult:
    """Outcome of a run."""

    catalog: Catalog
    amount_per_file: list[int]
    records_written: int
    mode: str
    warnings: list[str] = field(default_factory=list)


def _status(config: SamplerConfig, message: str) -> None:
    if config.progress:
        print(message)


def run(
    config: Union[Dict[str, Any], SamplerConfig],
    tracker: Optional[WarningTracker] = None,
) -> SampleResult:
    """Catalogue the inputs, plan the draws and stream the selected records out.

    Planning happens before the output file is created, so a request that
    cannot be satisfied leaves no output behind. Any later failure leaves a
    partial output file that must be discarded.

    Args:
        config: SamplerConfig instance or dictionary.
        tracker: Warning tracker (a new one is created if omitted).

    Returns:
        SampleResult describing the run.
    """
    # Parse config
    if isinstance(config, dict):
        cfg = SamplerConfig.from_dict(config)
    else:
        cfg = config

    if tracker is None:
        tracker = WarningTracker(echo=cfg.progress)

    _status(cfg, "Counting fastx entries...")
    sizes, total_bytes = file_sizes(cfg.inputs)
    with tqdm(
        total=total_bytes, unit="B", unit_scale=True, desc="Counting", disable=not cfg.progress
    ) as pbar:
        catalog = build_catalog(cfg.inputs, progress=pbar, sizes=sizes)
    _status(cfg, f"Found {catalog.total_count:,} records in {len(catalog)} files")

    rng = np.random.default_rng(cfg.seed)
    strategy = None
    if cfg.concatenate:
        amount_per_file = list(catalog.counts)
        total = catalog.total_count
    else:
        strategy = strategy_for(cfg.allow_repetitions)
        total = cfg.amount
        _status(cfg, f"Assigning {total:,} random draws {strategy.description} to files...")
        with tqdm(total=total, unit="draw", desc="Assigning", disable=not cfg.progress) as pbar:
            amount_per_file = strategy.assign_draws(catalog.counts, total, rng, progress=pbar)

    if strategy is None:
        _status(cfg, "Concatenating the input files (no random selection)...")
    else:
        _status(cfg, f"Drawing {total:,} records {strategy.description}...")

    written = 0
    with OutputWriter.create(cfg.output) as output, tqdm(
        total=total, unit="rec", desc="Writing", disable=not cfg.progress
    ) as pbar:
        for path, entry_count, amount in zip(catalog.paths, catalog.counts, amount_per_file):
            if amount == 0:
                continue
            if strategy is None:
                indices = all_indices(entry_count)
            else:
                indices = strategy.select_indices(
                    entry_count, amount, rng, tracker=tracker, path=path
                )
            written += copy_entries(path, output, indices, progress=pbar)

    result = SampleResult(
        catalog=catalog,
        amount_per_file=amount_per_file,
        records_written=written,
        mode=cfg.mode,
        warnings=tracker.get_warnings(),
    )

    if cfg.report is not None:
        write_run_report(cfg.report, cfg, result)

    _status(cfg, f"✓ Wrote {written:,} records to {cfg.output}")
    return result
