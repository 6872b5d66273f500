"""Configuration for sampling and concatenation runs."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError
from .utils import U64_MAX


@dataclass
class SamplerConfig:
    """Settings of one fastx_sampler run.

    Exactly one of ``amount`` and ``concatenate`` must be given.

    Attributes:
        inputs: FASTA or FASTQ files, read in this order.
        output: File receiving the renumbered records.
        amount: Number of records to draw at random.
        concatenate: Copy every record of every input instead of sampling.
        allow_repetitions: Allow a record to be drawn more than once.
        seed: Random seed (None draws one from the OS).
        progress: Show progress bars and status lines.
        report: Optional path of a markdown run report.
    """

    inputs: list[Path]
    output: Path
    amount: Optional[int] = None
    concatenate: bool = False
    allow_repetitions: bool = False
    seed: Optional[int] = None
    progress: bool = True
    report: Optional[Path] = None

    def __post_init__(self) -> None:
        if isinstance(self.inputs, (str, Path)):
            self.inputs = [self.inputs]
        self.inputs = [Path(p) for p in self.inputs]
        if not self.inputs:
            raise ConfigError("At least one input file is required")
        self.output = Path(self.output)
        if self.report is not None:
            self.report = Path(self.report)

        if self.amount is None and not self.concatenate:
            raise ConfigError("Either an amount or concatenate must be given")
        if self.amount is not None and self.concatenate:
            raise ConfigError("amount and concatenate are mutually exclusive")
        if self.amount is not None:
            if isinstance(self.amount, bool) or not isinstance(self.amount, int):
                raise ConfigError(f"amount must be an integer, got {self.amount!r}")
            if not 0 <= self.amount <= U64_MAX:
                raise ConfigError(f"amount must be between 0 and 2^64 - 1, got {self.amount}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"seed must be non-negative, got {self.seed}")

    @property
    def mode(self) -> str:
        if self.concatenate:
            return "concatenate"
        return "sample with repetition" if self.allow_repetitions else "sample without repetitions"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SamplerConfig":
        """Create config from a plain mapping.

        Args:
            data: Mapping of field names to values.

        Returns:
            SamplerConfig instance.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        if "inputs" not in data or "output" not in data:
            raise ConfigError("Config requires 'inputs' and 'output'")

        return cls(**data)
