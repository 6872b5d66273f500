"""Run report generation utilities."""

from datetime import datetime
from pathlib import Path
from typing import Any, Union

from .errors import FastxIOError


def generate_run_report(config: Any, result: Any) -> str:
    """Generate a markdown report of a sampling or concatenation run.

    Args:
        config: SamplerConfig instance.
        result: SampleResult of the run.

    Returns:
        Markdown report.
    """
    catalog = result.catalog
    lines = []

    # Header
    lines.append("# fastx-sampler Run Report")
    lines.append("")
    lines.append(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    # Configuration summary
    lines.append("## Configuration")
    lines.append("")
    lines.append(f"- **Mode:** {result.mode}")
    if config.amount is not None:
        lines.append(f"- **Requested Amount:** {config.amount:,} records")
    lines.append(f"- **Seed:** {config.seed if config.seed is not None else 'random'}")
    lines.append(f"- **Input Files:** {len(catalog)}")
    lines.append(f"- **Input Records:** {catalog.total_count:,}")
    lines.append(f"- **Format:** {catalog.format or 'n/a (all inputs empty)'}")
    lines.append(f"- **Records Written:** {result.records_written:,}")
    lines.append(f"- **Output:** {config.output}")
    lines.append("")

    # Per-file breakdown
    lines.append("## File Composition")
    lines.append("")
    lines.append("| File | Format | Records | Drawn | Percentage |")
    lines.append("|------|--------|---------|-------|------------|")

    for path, file_format, count, drawn in zip(
        catalog.paths, catalog.formats, catalog.counts, result.amount_per_file
    ):
        pct = (drawn / result.records_written * 100) if result.records_written > 0 else 0
        lines.append(f"| {path} | {file_format or '-'} | {count:,} | {drawn:,} | {pct:.2f}% |")

    lines.append("")

    # Sampling methodology
    lines.append("## Sampling Methodology")
    lines.append("")
    if config.concatenate:
        lines.append("- **Selection:** every record of every input, in input order")
    elif config.allow_repetitions:
        lines.append(
            "- **File assignment:** every draw picks a file with probability proportional "
        )
        lines.append("  to its record count (multinomial)")
        lines.append("- **Record selection:** uniform positions, repeats allowed")
    else:
        lines.append(
            "- **File assignment:** every draw picks a file weighted by its remaining "
        )
        lines.append("  records (multivariate hypergeometric)")
        lines.append("- **Record selection:** truncated uniform shuffle, no repeats")
    lines.append(
        "- **Identifiers:** records are renumbered 0, 1, 2, ... in output order"
    )
    lines.append("")

    # Warnings
    if result.warnings:
        lines.append("## Warnings")
        lines.append("")
        for warning in result.warnings:
            lines.append(f"- {warning}")
        lines.append("")

    return "\n".join(lines)


def write_run_report(path: Union[str, Path], config: Any, result: Any) -> None:
    try:
        Path(path).write_text(generate_run_report(config, result), encoding="utf-8")
    except OSError as e:
        raise FastxIOError(f"Could not write run report '{path}': {e}", path) from e
