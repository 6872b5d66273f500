"""Sampling utilities: draw planning across files and index selection within a file."""

from pathlib import Path
from typing import Any, Optional, Sequence, Union

import numpy as np

from .errors import InsufficientEntriesError, WeightUpdateError
from .utils import WarningTracker, checked_add

# Upper bound on the number of random values generated at once
DRAW_CHUNK_SIZE = 1 << 16


def _checked_total(counts: Sequence[int]) -> int:
    total = 0
    for count in counts:
        total = checked_add(total, count, "summing record counts over all files")
    return total


class WeightedIndex:
    """Weighted random choice of an index, with cheap single-entry updates.

    Weights are non-negative integers kept in a Fenwick tree, so locating
    the index owning a draw and changing one weight both cost O(log n).
    Indices with weight zero are never selected.

    Args:
        weights: Initial weight of every index.
    """

    def __init__(self, weights: Sequence[int]) -> None:
        self._weights = [int(w) for w in weights]
        if any(w < 0 for w in self._weights):
            raise WeightUpdateError(f"Negative weight in {self._weights}")

        n = len(self._weights)
        self._tree = [0] * (n + 1)
        for i, weight in enumerate(self._weights):
            j = i + 1
            self._tree[j] += weight
            parent = j + (j & -j)
            if parent <= n:
                self._tree[parent] += self._tree[j]

        self._total = sum(self._weights)
        self._top = 1 << (n.bit_length() - 1) if n else 0

    def __len__(self) -> int:
        return len(self._weights)

    @property
    def total(self) -> int:
        return self._total

    def weight(self, index: int) -> int:
        return self._weights[index]

    def find(self, target: int) -> int:
        """Return the index whose cumulative weight interval contains target."""
        if not 0 <= target < self._total:
            raise WeightUpdateError(
                f"Draw {target} outside of the total weight {self._total}"
            )

        pos = 0
        step = self._top
        while step:
            candidate = pos + step
            if candidate < len(self._tree) and self._tree[candidate] <= target:
                pos = candidate
                target -= self._tree[candidate]
            step >>= 1
        return pos

    def sample(self, rng: np.random.Generator) -> int:
        if self._total == 0:
            raise WeightUpdateError("Cannot sample from weights that are all zero")
        return self.find(int(rng.integers(0, self._total, dtype=np.uint64)))

    def update(self, index: int, weight: int) -> None:
        """Set the weight of a single index."""
        if weight < 0:
            raise WeightUpdateError(
                f"Error updating random weights: weight of index {index} would become {weight}"
            )

        delta = weight - self._weights[index]
        self._weights[index] = weight
        self._total += delta
        j = index + 1
        while j < len(self._tree):
            self._tree[j] += delta
            j += j & -j


class WithReplacement:
    """Draws that may pick the same record more than once.

    Every draw picks a file with probability proportional to its record
    count, so the per-file tallies are multinomially distributed.
    """

    allow_repetitions = True
    description = "with repetition"

    def assign_draws(
        self,
        counts: Sequence[int],
        amount: int,
        rng: np.random.Generator,
        progress: Optional[Any] = None,
    ) -> list[int]:
        """Split ``amount`` independent draws over the files.

        Args:
            counts: Record count of every file.
            amount: Total number of draws.
            rng: Random generator.
            progress: Optional observer notified with ``update(n_draws)``.

        Returns:
            Number of draws assigned to every file.
        """
        tallies = [0] * len(counts)
        if amount == 0:
            return tallies

        total = _checked_total(counts)
        if total == 0:
            raise InsufficientEntriesError(
                f"Cannot draw {amount} records, the input files contain no records"
            )

        # File i owns the draws in [bounds[i-1], bounds[i])
        bounds = np.cumsum(np.asarray(counts, dtype=np.uint64), dtype=np.uint64)
        remaining = amount
        while remaining:
            n = min(remaining, DRAW_CHUNK_SIZE)
            draws = rng.integers(0, total, size=n, dtype=np.uint64)
            chosen = np.searchsorted(bounds, draws, side="right")
            for file_index, hits in enumerate(np.bincount(chosen, minlength=len(counts)).tolist()):
                if hits:
                    tallies[file_index] = checked_add(
                        tallies[file_index], hits, "assigning random draws to files"
                    )
            remaining -= n
            if progress is not None:
                progress.update(n)

        return tallies

    def select_indices(
        self,
        entry_count: int,
        amount: int,
        rng: np.random.Generator,
        tracker: Optional[WarningTracker] = None,
        path: Optional[Union[str, Path]] = None,
    ) -> np.ndarray:
        """Draw ``amount`` uniform record positions of one file, sorted ascending.

        Positions may repeat.
        """
        if amount == 0:
            return np.empty(0, dtype=np.uint64)
        if entry_count == 0:
            raise InsufficientEntriesError(f"Cannot draw {amount} records from empty file '{path}'")
        if amount > entry_count and tracker is not None:
            tracker.warn(
                f"Using inefficient algorithm for a large amount of repetitious draws "
                f"({amount} draws from {entry_count} records in '{path}')"
            )

        indices = rng.integers(0, entry_count, size=amount, dtype=np.uint64)
        indices.sort()
        return indices


class WithoutReplacement:
    """Draws that pick every record at most once.

    Files are picked one draw at a time, weighted by the records they
    have left, so the per-file tallies follow a multivariate
    hypergeometric distribution.
    """

    allow_repetitions = False
    description = "without repetitions"

    def assign_draws(
        self,
        counts: Sequence[int],
        amount: int,
        rng: np.random.Generator,
        progress: Optional[Any] = None,
    ) -> list[int]:
        """Split ``amount`` draws without replacement over the files.

        Raises:
            InsufficientEntriesError: If ``amount`` exceeds the total record count.
        """
        total = _checked_total(counts)
        if amount > total:
            raise InsufficientEntriesError(
                f"Requested {amount} records without repetitions, "
                f"but the input files contain only {total}"
            )

        tallies = [0] * len(counts)
        if amount == 0:
            return tallies

        remaining = WeightedIndex(counts)
        drawn = 0
        while drawn < amount:
            n = min(amount - drawn, DRAW_CHUNK_SIZE)
            # The remaining total shrinks by exactly one per draw
            highs = np.uint64(total - drawn) - np.arange(n, dtype=np.uint64)
            targets = rng.integers(0, highs, dtype=np.uint64)
            for target in targets.tolist():
                file_index = remaining.find(target)
                tallies[file_index] = checked_add(
                    tallies[file_index], 1, "assigning random draws to files"
                )
                remaining.update(file_index, remaining.weight(file_index) - 1)
            drawn += n
            if progress is not None:
                progress.update(n)

        return tallies

    def select_indices(
        self,
        entry_count: int,
        amount: int,
        rng: np.random.Generator,
        tracker: Optional[WarningTracker] = None,
        path: Optional[Union[str, Path]] = None,
    ) -> np.ndarray:
        """Pick ``amount`` distinct record positions of one file, sorted ascending.

        A full permutation of the file's positions is shuffled and truncated,
        so the cost grows with ``entry_count`` rather than ``amount``.
        """
        if amount > entry_count:
            raise InsufficientEntriesError(
                f"Cannot draw {amount} distinct records from {entry_count} in '{path}'"
            )
        if amount == 0:
            return np.empty(0, dtype=np.uint64)

        indices = rng.permutation(entry_count)[:amount]
        indices.sort()
        return indices


SamplingStrategy = Union[WithReplacement, WithoutReplacement]


def strategy_for(allow_repetitions: bool) -> SamplingStrategy:
    return WithReplacement() if allow_repetitions else WithoutReplacement()


def all_indices(entry_count: int) -> range:
    """Every record position of a file, used when concatenating."""
    return range(entry_count)
