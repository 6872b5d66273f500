"""Command line entry point for sampling or concatenating FASTA/FASTQ files."""

from pathlib import Path
from typing import List, Optional

import typer

from .config import SamplerConfig
from .errors import ConfigError, SamplerError
from .pipeline import run

app = typer.Typer(help="Randomly sample or concatenate FASTA/FASTQ files")


@app.command()
def sample_command(
    inputs: List[Path] = typer.Option(
        ...,
        "--input",
        "-i",
        help="Fasta or fastq input file (format detected). Pass multiple times for multiple files",
    ),
    output: Path = typer.Option(..., "--output", "-o", help="Output fastx file"),
    amount: Optional[int] = typer.Option(
        None, "--amount", "-n", help="Amount of entries to randomly select"
    ),
    concatenate: bool = typer.Option(
        False,
        "--concatenate",
        help="Instead of selecting random entries, simply concatenate the input files",
    ),
    allow_repetitions: bool = typer.Option(
        False,
        "--allow-repetitions",
        help="Allow an entry to be selected more than once. Without it, the run aborts "
        "if there are not enough entries",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible output"),
    report: Optional[Path] = typer.Option(
        None, "--report", help="Write a markdown run report to this path"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide progress bars and status lines"),
) -> None:
    try:
        config = SamplerConfig(
            inputs=inputs,
            output=output,
            amount=amount,
            concatenate=concatenate,
            allow_repetitions=allow_repetitions,
            seed=seed,
            progress=not quiet,
            report=report,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    try:
        run(config)
    except SamplerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()
